"""Contract of the remote identity service consumed by :class:`AuthSession`."""
from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Optional

from models.session import Session


class IdentityService(ABC):
    @abstractmethod
    def current_session(self) -> Optional[Session]:
        """Return the signed-in session, or None. Never raises."""

    @abstractmethod
    def sign_in_with_email_password(self, email: str, password: str) -> "Future[Session]":
        """Start a sign-in; the future fails with ``RemoteAuthError``."""

    @abstractmethod
    def create_user_with_email_password(self, email: str, password: str) -> "Future[Session]":
        """Start an account creation; the future fails with ``RemoteAuthError``."""

    @abstractmethod
    def sign_out(self) -> None:
        """Forget the current session locally."""


__all__ = ["IdentityService"]
