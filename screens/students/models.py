# screens/students/models.py
"""
Data models for student records.
Holds the record / draft dataclasses and the mapping between the
internal field names and the remote store's JSON schema.
"""

from __future__ import annotations
from dataclasses import dataclass, replace, asdict
from typing import Any, Dict, Optional

from core.errors import TransportError


# ============================================================================
# FIELDS
# ============================================================================

FIELDS = ("name", "age", "roll_no", "course")

FIELD_LABELS = {
    "name": "Student Name",
    "age": "Age",
    "roll_no": "Roll Number",
    "course": "Course",
}

FIELD_PLACEHOLDERS = {
    "name": "Enter full name",
    "age": "Enter age",
    "roll_no": "e.g., CS2024001",
    "course": "e.g., Computer Science",
}

# Older payloads used camelCase for the roll number.
ROLL_NO_WIRE_KEYS = ("roll_no", "rollNo", "rollNumber")
ID_WIRE_KEYS = ("_id", "id")


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass(frozen=True)
class StudentDraft:
    """In-progress form values; unvalidated."""
    name: str = ""
    age: str = ""
    roll_no: str = ""
    course: str = ""

    def with_field(self, field_name: str, value: str) -> StudentDraft:
        if field_name not in FIELDS:
            raise KeyError(field_name)
        return replace(self, **{field_name: value})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class StudentRecord:
    """A student as held by the remote store."""
    id: str
    name: str
    age: str
    roll_no: str
    course: str

    def to_draft(self) -> StudentDraft:
        return StudentDraft(name=self.name, age=self.age, roll_no=self.roll_no, course=self.course)

    def search_text(self) -> str:
        return " ".join([self.name, self.age, self.roll_no, self.course])


# ============================================================================
# WIRE MAPPING
# ============================================================================

def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _first_present(item: Dict[str, Any], keys) -> Optional[Any]:
    for key in keys:
        if item.get(key) not in (None, ""):
            return item[key]
    return None


def record_from_wire(item: Any) -> StudentRecord:
    """Build a record from one element of the list response."""
    if not isinstance(item, dict):
        raise TransportError(f"Malformed student record: expected object, got {type(item).__name__}")
    record_id = _first_present(item, ID_WIRE_KEYS)
    if record_id is None:
        raise TransportError("Malformed student record: missing identifier", details={"record": item})
    return StudentRecord(
        id=_text(record_id),
        name=_text(item.get("name")),
        age=_text(item.get("age")),
        roll_no=_text(_first_present(item, ROLL_NO_WIRE_KEYS)),
        course=_text(item.get("course")),
    )


def draft_to_wire(draft: StudentDraft, record_id: Optional[str] = None) -> Dict[str, str]:
    payload = draft.to_dict()
    if record_id is not None:
        payload = {"_id": record_id, **payload}
    return payload
