# screens/students/form_controller.py
"""
Form controller: owns the draft, its field errors and create/update mode,
and runs validate -> write -> reset.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from core.errors import TransportError, ValidationError
from screens.students.models import StudentDraft, StudentRecord
from screens.students.state import AppState
from screens.students.validator import ensure_valid

log = logging.getLogger(__name__)

MSG_ADDED = "✓ Student added successfully"
MSG_UPDATED = "✓ Student updated successfully"
MSG_SAVE_FAILED = "✗ Error saving student record"


def _noop() -> None:
    return None


class FormController:

    def __init__(
        self,
        store,
        state: AppState,
        on_saved: Callable[[], None] = _noop,
        on_edit_started: Callable[[], None] = _noop,
    ):
        self.store = store
        self.state = state
        self.on_saved = on_saved
        self.on_edit_started = on_edit_started

        self.draft = StudentDraft()
        self.errors: Dict[str, str] = {}
        self.editing_id: Optional[str] = None
        self.busy = False

    # ========================================================================
    # STATE
    # ========================================================================

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def update_field(self, name: str, value: str) -> None:
        self.draft = self.draft.with_field(name, value)

    def _reset(self) -> None:
        self.draft = StudentDraft()
        self.errors = {}
        self.editing_id = None

    def cancel(self) -> None:
        self._reset()

    def begin_edit(self, record: StudentRecord) -> None:
        self.draft = record.to_draft()
        self.errors = {}
        self.editing_id = record.id
        self.on_edit_started()

    # ========================================================================
    # SUBMIT
    # ========================================================================

    def submit(self) -> bool:
        """Validate and write the draft. Returns True when the write succeeded."""
        try:
            ensure_valid(self.draft)
        except ValidationError as e:
            self.errors = e.field_errors
            return False

        editing_id = self.editing_id
        self.busy = True
        try:
            if editing_id is not None:
                self.store.update(editing_id, self.draft)
            else:
                self.store.create(self.draft)
        except TransportError as e:
            log.error("Error saving record: %s", e)
            self.state.status.post(MSG_SAVE_FAILED)
            return False
        finally:
            self.busy = False

        self._reset()
        self.state.status.flash(MSG_UPDATED if editing_id is not None else MSG_ADDED)
        self.on_saved()
        return True

    # ========================================================================
    # PRESENTATION
    # ========================================================================

    @property
    def title(self) -> str:
        return "Update Student" if self.is_editing else "Add New Student"

    @property
    def subtitle(self) -> str:
        return "Modify student information" if self.is_editing else "Enter student details below"

    @property
    def submit_label(self) -> str:
        if self.busy:
            return "Processing..."
        return "Update Student" if self.is_editing else "➕ Add Student"
