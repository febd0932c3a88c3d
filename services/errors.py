"""Errors raised by TodoList services."""
from __future__ import annotations


class TodoError(Exception):
    """Base class for application errors."""


class ValidationError(TodoError):
    """User input rejected before any remote call is made."""


class RemoteAuthError(TodoError):
    """The identity service refused or failed a request."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


__all__ = ["TodoError", "ValidationError", "RemoteAuthError"]
