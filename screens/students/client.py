# screens/students/client.py
"""
Remote record store client.

All four operations hit the same collection endpoint; the HTTP verb picks
the operation. Any failure surfaces as TransportError.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from core.errors import TransportError
from screens.students.models import StudentDraft, StudentRecord, draft_to_wire, record_from_wire

log = logging.getLogger(__name__)


class StudentStoreClient:
    """Service to interact with the student records API."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    def _request(self, method: str, payload: Optional[dict] = None) -> requests.Response:
        log.debug("%s %s payload=%s", method, self.base_url, payload)
        try:
            response = self.session.request(method, self.base_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", method, self.base_url, e)
            raise TransportError(f"{method} request failed: {e}") from e

        if not response.ok:
            log.warning("%s %s returned HTTP %s: %s", method, self.base_url, response.status_code, response.text[:200])
            raise TransportError(
                f"{method} request returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list(self) -> List[StudentRecord]:
        response = self._request("GET")
        try:
            body: Any = response.json()
        except ValueError as e:
            raise TransportError("List response is not valid JSON") from e
        if not isinstance(body, list):
            raise TransportError(f"List response must be an array, got {type(body).__name__}")

        records = [record_from_wire(item) for item in body]
        seen = set()
        for rec in records:
            if rec.id in seen:
                raise TransportError(f"List response contains duplicate identifier {rec.id!r}")
            seen.add(rec.id)
        log.debug("Fetched %d student records", len(records))
        return records

    def create(self, draft: StudentDraft) -> None:
        self._request("POST", draft_to_wire(draft))

    def update(self, record_id: str, draft: StudentDraft) -> None:
        self._request("PUT", draft_to_wire(draft, record_id=record_id))

    def delete(self, record_id: str) -> None:
        # The endpoint takes the id in the body, not the path.
        self._request("DELETE", {"_id": record_id})
