"""
tests/fakes.py

In-memory stand-ins for the remote store and the clock.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from core.errors import TransportError
from screens.students.models import StudentDraft, StudentRecord


class FakeStore:
    """Behaves like StudentStoreClient against an in-memory collection."""

    def __init__(self, records: Optional[List[StudentRecord]] = None):
        self._records: Dict[str, StudentRecord] = {r.id: r for r in (records or [])}
        self._next_id = 1
        self.calls: List[tuple] = []
        self.failing: Set[str] = set()

    def _check(self, op: str) -> None:
        if op in self.failing:
            raise TransportError(f"{op} failed")

    def list(self) -> List[StudentRecord]:
        self.calls.append(("list",))
        self._check("list")
        return list(self._records.values())

    def create(self, draft: StudentDraft) -> None:
        self.calls.append(("create", draft))
        self._check("create")
        new_id = f"id{self._next_id}"
        self._next_id += 1
        self._records[new_id] = StudentRecord(id=new_id, **draft.to_dict())

    def update(self, record_id: str, draft: StudentDraft) -> None:
        self.calls.append(("update", record_id, draft))
        self._check("update")
        if record_id not in self._records:
            raise TransportError("HTTP 404", status_code=404)
        self._records[record_id] = StudentRecord(id=record_id, **draft.to_dict())

    def delete(self, record_id: str) -> None:
        self.calls.append(("delete", record_id))
        self._check("delete")
        if record_id not in self._records:
            raise TransportError("HTTP 404", status_code=404)
        del self._records[record_id]

    def ops(self) -> List[str]:
        return [c[0] for c in self.calls]


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def record(rid: str, name: str, age: str, roll_no: str, course: str) -> StudentRecord:
    return StudentRecord(id=rid, name=name, age=age, roll_no=roll_no, course=course)
