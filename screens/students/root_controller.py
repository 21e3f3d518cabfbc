# screens/students/root_controller.py
from __future__ import annotations

import logging
from typing import Optional

from screens.students.form_controller import FormController
from screens.students.list_controller import Confirm, ListController, deny
from screens.students.models import StudentRecord
from screens.students.state import AppState, StatusBoard, StatusMessage, View

log = logging.getLogger(__name__)


class RootController:
    """Switches between the form and list views and owns the shared state."""

    def __init__(self, store, state: Optional[AppState] = None, confirm: Confirm = deny):
        self.store = store
        self.state = state or AppState(status=StatusBoard())
        self.form = FormController(
            store,
            self.state,
            on_saved=self._after_save,
            on_edit_started=self.show_form,
        )
        self.list = ListController(
            store,
            self.state,
            confirm=confirm,
            on_edit=self.form.begin_edit,
        )

    @property
    def view(self) -> View:
        return self.state.view

    def show_list(self) -> None:
        """'View all': switch to the list and refetch."""
        log.debug("View -> list")
        self.state.view = View.LIST
        self.list.activate()

    def show_form(self) -> None:
        """'Back': switch to the form, keeping the draft."""
        log.debug("View -> form")
        self.state.view = View.FORM

    def request_edit(self, record: StudentRecord) -> None:
        self.list.request_edit(record)

    def status(self) -> Optional[StatusMessage]:
        return self.state.status.current()

    def _after_save(self) -> None:
        if self.state.view is View.LIST:
            self.list.activate()
