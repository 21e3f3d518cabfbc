# screens/students/list_controller.py
"""
List controller: owns the fetched record set, the free-text search and
delete orchestration.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

import pandas as pd

from core.errors import TransportError
from screens.students.models import StudentRecord
from screens.students.state import AppState

log = logging.getLogger(__name__)

MSG_LOAD_FAILED = "Error loading students"
MSG_DELETED = "✓ Student deleted successfully"
MSG_DELETE_FAILED = "✗ Error deleting student record"

DISPLAY_COLUMNS = ["Name", "Age", "Roll Number", "Course"]

Confirm = Callable[[], bool]


def deny() -> bool:
    return False


class ListController:

    def __init__(
        self,
        store,
        state: AppState,
        confirm: Confirm = deny,
        on_edit: Optional[Callable[[StudentRecord], None]] = None,
    ):
        self.store = store
        self.state = state
        self.confirm = confirm
        self.on_edit = on_edit

        self.records: List[StudentRecord] = []
        self.search = ""
        self.busy = False
        self.pending_delete: Optional[str] = None

    # ========================================================================
    # FETCH / FILTER
    # ========================================================================

    def activate(self) -> None:
        """Refetch the record set from the store."""
        self.busy = True
        try:
            self.records = self.store.list()
        except TransportError as e:
            log.error("Error fetching students: %s", e)
            self.records = []
            self.state.status.post(MSG_LOAD_FAILED)
        finally:
            self.busy = False

    def set_search(self, query: str) -> None:
        self.search = query or ""

    def visible_records(self) -> List[StudentRecord]:
        needle = self.search.lower()
        return [r for r in self.records if needle in r.search_text().lower()]

    # ========================================================================
    # ACTIONS
    # ========================================================================

    def request_delete(self, record_id: str, confirm: Optional[Confirm] = None) -> bool:
        """Delete after confirmation. Returns True only if the record was deleted."""
        ask = confirm or self.confirm
        if not ask():
            self.pending_delete = None
            return False

        self.busy = True
        try:
            self.store.delete(record_id)
        except TransportError as e:
            log.error("Error deleting record %s: %s", record_id, e)
            self.state.status.post(MSG_DELETE_FAILED)
            return False
        finally:
            self.busy = False
            self.pending_delete = None

        self.state.status.flash(MSG_DELETED)
        self.activate()
        return True

    def request_edit(self, record: StudentRecord) -> None:
        if self.on_edit is None:
            raise RuntimeError("ListController has no edit handler")
        self.on_edit(record)

    def mark_pending_delete(self, record_id: str) -> None:
        self.pending_delete = record_id

    def clear_pending_delete(self) -> None:
        self.pending_delete = None

    # ========================================================================
    # PRESENTATION
    # ========================================================================

    def summary(self) -> str:
        n = len(self.visible_records())
        return f"{n} {'student' if n == 1 else 'students'} found"

    def visible_frame(self) -> pd.DataFrame:
        rows = [
            {
                "Name": r.name,
                "Age": r.age,
                "Roll Number": r.roll_no,
                "Course": r.course,
            }
            for r in self.visible_records()
        ]
        return pd.DataFrame(rows, columns=DISPLAY_COLUMNS)

    def export_csv(self) -> bytes:
        return self.visible_frame().to_csv(index=False).encode("utf-8")
