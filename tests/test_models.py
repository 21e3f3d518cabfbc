"""
tests/test_models.py

Record/draft dataclasses and the JSON field mapping.
"""

from __future__ import annotations

import unittest

from core.errors import TransportError
from screens.students.models import StudentDraft, draft_to_wire, record_from_wire


class TestRecordFromWire(unittest.TestCase):
    def test_reads_snake_case_roll_number(self) -> None:
        rec = record_from_wire({"_id": "a1", "name": "Bob", "age": "21", "roll_no": "X1", "course": "CS"})
        self.assertEqual((rec.id, rec.name, rec.age, rec.roll_no, rec.course), ("a1", "Bob", "21", "X1", "CS"))

    def test_accepts_camel_case_roll_number(self) -> None:
        self.assertEqual(record_from_wire({"_id": "a", "rollNo": "R9"}).roll_no, "R9")
        self.assertEqual(record_from_wire({"_id": "a", "rollNumber": "R8"}).roll_no, "R8")

    def test_snake_case_wins_when_both_present(self) -> None:
        self.assertEqual(record_from_wire({"_id": "a", "roll_no": "S", "rollNo": "C"}).roll_no, "S")

    def test_non_string_values_rendered_as_text(self) -> None:
        rec = record_from_wire({"_id": 7, "name": "Eve", "age": 19, "roll_no": "E1", "course": None})
        self.assertEqual(rec.id, "7")
        self.assertEqual(rec.age, "19")
        self.assertEqual(rec.course, "")

    def test_missing_identifier_is_malformed(self) -> None:
        with self.assertRaises(TransportError):
            record_from_wire({"name": "NoId"})

    def test_non_object_is_malformed(self) -> None:
        with self.assertRaises(TransportError):
            record_from_wire(["not", "a", "dict"])


class TestDraft(unittest.TestCase):
    def test_with_field_returns_new_draft(self) -> None:
        d1 = StudentDraft()
        d2 = d1.with_field("name", "Alice")
        self.assertEqual(d1.name, "")
        self.assertEqual(d2.name, "Alice")

    def test_unknown_field_rejected(self) -> None:
        with self.assertRaises(KeyError):
            StudentDraft().with_field("rollNo", "X")

    def test_wire_payload_always_uses_roll_no(self) -> None:
        draft = StudentDraft(name="A", age="1", roll_no="R1", course="C")
        self.assertEqual(draft_to_wire(draft), {"name": "A", "age": "1", "roll_no": "R1", "course": "C"})
        self.assertEqual(
            draft_to_wire(draft, record_id="x9"),
            {"_id": "x9", "name": "A", "age": "1", "roll_no": "R1", "course": "C"},
        )


if __name__ == "__main__":
    unittest.main()
