"""
Application exceptions.
"""
from __future__ import annotations
from typing import Optional


class AppError(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class ValidationError(AppError):
    """Field-scoped validation failure; never reaches the network."""
    def __init__(self, field_errors: dict[str, str]):
        super().__init__("Validation failed", code="VALIDATION_ERROR", details=dict(field_errors))
        self.field_errors = dict(field_errors)


class TransportError(AppError):
    """Any failure talking to the remote record store (network, HTTP status, malformed body)."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[dict] = None):
        super().__init__(message, code="TRANSPORT_ERROR", details=details)
        self.status_code = status_code
