"""Authentication state machine backing the login, signup and home screens."""
from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import Callable

from core.settings import AUTH
from models.auth_status import (
    AUTHENTICATED,
    IDLE,
    LOADING,
    UNAUTHENTICATED,
    AuthStatus,
    Error,
)
from services.errors import ValidationError
from services.identity import IdentityService
from services.observable import StatusObservable


logger = logging.getLogger(__name__)


def validate_credentials(email: str, password: str) -> None:
    if not email or not password:
        raise ValidationError(AUTH.missing_fields_message)


class AuthSession:
    """Owns the current :class:`AuthStatus` and forwards calls to the identity service.

    ``login`` and ``signup`` switch to ``Loading`` immediately and resolve
    later from the identity service's future. In-flight calls are neither
    de-duplicated nor cancelled: the last one to complete wins.
    """

    def __init__(self, identity: IdentityService, *, check_on_start: bool = True):
        self.identity = identity
        self._status: StatusObservable[AuthStatus] = StatusObservable(IDLE)
        if check_on_start:
            self.check_status()

    @property
    def status(self) -> AuthStatus:
        return self._status.value

    def subscribe(self, callback: Callable[[AuthStatus], None]) -> Callable[[], None]:
        return self._status.subscribe(callback)

    def unsubscribe(self, callback: Callable[[AuthStatus], None]) -> None:
        self._status.unsubscribe(callback)

    # ------------------------------------------------------------------
    def check_status(self) -> None:
        if self.identity.current_session() is not None:
            self._set(AUTHENTICATED)
        else:
            self._set(UNAUTHENTICATED)

    def login(self, email: str, password: str) -> None:
        self._submit(self.identity.sign_in_with_email_password, "login", email, password)

    def signup(self, email: str, password: str) -> None:
        self._submit(self.identity.create_user_with_email_password, "signup", email, password)

    def signout(self) -> None:
        self.identity.sign_out()
        self._set(UNAUTHENTICATED)

    # ------------------------------------------------------------------
    def _submit(self, call, action: str, email: str, password: str) -> None:
        try:
            validate_credentials(email, password)
        except ValidationError as exc:
            self._set(Error(str(exc)))
            return
        self._set(LOADING)
        future = call(email, password)
        future.add_done_callback(lambda f: self._on_complete(action, f))

    def _on_complete(self, action: str, future: "Future") -> None:
        exc = future.exception()
        if exc is None:
            self._set(AUTHENTICATED)
            return
        message = getattr(exc, "message", None) or str(exc) or AUTH.fallback_error_message
        logger.warning("%s failed: %s", action, message)
        self._set(Error(message))

    def _set(self, status: AuthStatus) -> None:
        logger.debug("Auth status -> %s", status)
        self._status.publish(status)


__all__ = ["AuthSession", "validate_credentials"]
