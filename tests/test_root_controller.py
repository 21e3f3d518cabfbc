"""
tests/test_root_controller.py

View transitions and the wiring between form and list.
"""

from __future__ import annotations

import unittest

from screens.students.models import StudentDraft
from screens.students.root_controller import RootController
from screens.students.state import AppState, StatusBoard, View
from tests.fakes import FakeClock, FakeStore, record


class TestRootController(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.store = FakeStore([record("r1", "Bob", "21", "X1", "CS")])
        self.root = RootController(
            self.store,
            AppState(status=StatusBoard(ttl_seconds=3.0, clock=self.clock)),
            confirm=lambda: True,
        )

    def test_starts_on_form_without_fetching(self) -> None:
        self.assertIs(self.root.view, View.FORM)
        self.assertEqual(self.store.calls, [])
        self.assertIsNone(self.root.status())

    def test_view_all_switches_and_fetches(self) -> None:
        self.root.show_list()
        self.assertIs(self.root.view, View.LIST)
        self.assertEqual(self.store.ops(), ["list"])
        self.assertEqual([r.id for r in self.root.list.records], ["r1"])

    def test_each_activation_refetches(self) -> None:
        self.root.show_list()
        self.root.show_form()
        self.root.show_list()
        self.assertEqual(self.store.ops(), ["list", "list"])

    def test_back_keeps_draft(self) -> None:
        self.root.form.update_field("name", "Half typed")
        self.root.show_list()
        self.root.show_form()
        self.assertIs(self.root.view, View.FORM)
        self.assertEqual(self.root.form.draft.name, "Half typed")

    def test_edit_from_list_prefills_form_and_switches(self) -> None:
        self.root.show_list()
        self.root.request_edit(self.root.list.records[0])
        self.assertIs(self.root.view, View.FORM)
        self.assertEqual(self.root.form.editing_id, "r1")
        self.assertEqual(self.root.form.draft, StudentDraft(name="Bob", age="21", roll_no="X1", course="CS"))

    def test_submit_does_not_change_view(self) -> None:
        for field, value in (("name", "Alice"), ("age", "20"), ("roll_no", "CS001"), ("course", "Physics")):
            self.root.form.update_field(field, value)
        self.assertTrue(self.root.form.submit())
        self.assertIs(self.root.view, View.FORM)
        # List not visible, so no refetch.
        self.assertEqual(self.store.ops(), ["create"])
        self.assertEqual(self.root.status().text, "✓ Student added successfully")

    def test_update_then_activate_shows_changes(self) -> None:
        self.root.show_list()
        self.root.request_edit(self.root.list.records[0])
        self.root.form.update_field("age", "25")
        self.assertTrue(self.root.form.submit())
        self.assertEqual(self.root.form.draft, StudentDraft())
        self.assertIsNone(self.root.form.editing_id)

        self.root.show_list()
        self.assertEqual(self.root.list.records[0].age, "25")
        self.assertEqual(self.root.list.records[0].id, "r1")

    def test_delete_from_list(self) -> None:
        self.root.show_list()
        self.assertTrue(self.root.list.request_delete("r1"))
        self.assertEqual(self.root.list.records, [])
        self.assertEqual(self.root.status().text, "✓ Student deleted successfully")
        self.clock.advance(3.0)
        self.assertIsNone(self.root.status())

    def test_default_root_never_deletes_without_confirmation(self) -> None:
        root = RootController(self.store)
        root.show_list()
        self.assertFalse(root.list.request_delete("r1"))
        self.assertNotIn("delete", self.store.ops())


if __name__ == "__main__":
    unittest.main()
