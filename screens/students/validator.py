# screens/students/validator.py
from __future__ import annotations

import re
from typing import Dict

from core.errors import ValidationError
from screens.students.models import StudentDraft

# Optionally signed decimal numeral: "12", "-3", "+4.5", ".5", "7."
NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
ROLL_NO_PATTERN = re.compile(r"[A-Za-z0-9]+")


def is_numeric(value: str) -> bool:
    """True if the trimmed value parses fully as a decimal number."""
    return bool(NUMERIC_PATTERN.fullmatch((value or "").strip()))


def _validate_text(value: str, label: str) -> str | None:
    if not value.strip():
        return f"{label} is required"
    # Rejects e.g. a course literally named "101"; kept as the product behaves today.
    if is_numeric(value):
        return f"{label} must be a string"
    return None


def _validate_age(value: str) -> str | None:
    if not value:
        return "Age is required"
    if not is_numeric(value):
        return "Age must be a number"
    return None


def _validate_roll_no(value: str) -> str | None:
    if not value.strip():
        return "Roll No is required"
    if not ROLL_NO_PATTERN.fullmatch(value):
        return "Roll No must contain only letters and numbers"
    return None


def validate_draft(draft: StudentDraft) -> Dict[str, str]:
    """
    Map field name -> error message. Empty dict means the draft is valid.

    Keys are the canonical field names; the roll number is keyed "roll_no"
    (the camelCase "rollNo" of older payloads exists only at the wire
    boundary, see models.record_from_wire).
    """
    checks = {
        "name": _validate_text(draft.name, "Name"),
        "age": _validate_age(draft.age),
        "roll_no": _validate_roll_no(draft.roll_no),
        "course": _validate_text(draft.course, "Course"),
    }
    return {field: msg for field, msg in checks.items() if msg}


def ensure_valid(draft: StudentDraft) -> None:
    errors = validate_draft(draft)
    if errors:
        raise ValidationError(errors)
