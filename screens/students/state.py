# screens/students/state.py
"""
Shared application state for the students page: which view is showing and
the transient status banner both views write to.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

log = logging.getLogger(__name__)

SUCCESS_MARK = "✓"


class View(str, Enum):
    FORM = "form"
    LIST = "list"


@dataclass(frozen=True)
class StatusMessage:
    text: str
    expires_at: Optional[float] = None

    @property
    def kind(self) -> str:
        return "success" if SUCCESS_MARK in self.text else "error"


class StatusBoard:
    """
    One message at a time with at most one expiry deadline.

    `post` keeps the message until something replaces it; `flash` clears it
    after `ttl_seconds`. Either one replaces both the text and the deadline
    of the previous message. Expiry is checked lazily against `clock`
    whenever the message is read.
    """

    def __init__(self, ttl_seconds: float = 3.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._message: Optional[StatusMessage] = None

    def post(self, text: str, ttl: Optional[float] = None) -> StatusMessage:
        expires_at = None if ttl is None else self._clock() + ttl
        self._message = StatusMessage(text=text, expires_at=expires_at)
        log.info("Status: %s", text)
        return self._message

    def current(self) -> Optional[StatusMessage]:
        msg = self._message
        if msg is not None and msg.expires_at is not None and self._clock() >= msg.expires_at:
            self._message = None
        return self._message

    def flash(self, text: str) -> StatusMessage:
        """Post a message that clears itself after the configured delay."""
        return self.post(text, ttl=self.ttl_seconds)

    def clear(self) -> None:
        self._message = None


@dataclass
class AppState:
    status: StatusBoard = field(default_factory=StatusBoard)
    view: View = View.FORM
