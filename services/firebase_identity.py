"""Firebase email/password authentication over the Identity Toolkit API."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from core.settings import AUTH
from models.session import Session
from services.errors import RemoteAuthError
from services.identity import IdentityService


logger = logging.getLogger(__name__)

ERROR_MESSAGES: Dict[str, str] = {
    "EMAIL_NOT_FOUND": "No account exists for this email.",
    "INVALID_PASSWORD": "The password is incorrect.",
    "INVALID_LOGIN_CREDENTIALS": "Email or password is incorrect.",
    "INVALID_EMAIL": "The email address is badly formatted.",
    "USER_DISABLED": "This account has been disabled.",
    "EMAIL_EXISTS": "The email address is already in use by another account.",
    "WEAK_PASSWORD": "Password should be at least 6 characters.",
    "OPERATION_NOT_ALLOWED": "Email/password sign-in is disabled for this project.",
    "TOO_MANY_ATTEMPTS_TRY_LATER": "Too many attempts. Try again later.",
    "MISSING_PASSWORD": "Password is required.",
    "MISSING_EMAIL": "Email is required.",
}


def _error_code(exc: HttpError) -> Optional[str]:
    """Extract the Firebase error code, e.g. ``WEAK_PASSWORD : ...`` -> ``WEAK_PASSWORD``."""
    raw = exc.content
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    try:
        payload = json.loads(raw or "{}")
    except json.JSONDecodeError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    if not message:
        return None
    return str(message).split(":", 1)[0].strip() or None


def translate_http_error(exc: HttpError) -> RemoteAuthError:
    code = _error_code(exc)
    if code:
        return RemoteAuthError(ERROR_MESSAGES.get(code, code.replace("_", " ").capitalize()), code=code)
    reason = getattr(exc, "reason", None) or str(exc)
    return RemoteAuthError(reason or AUTH.fallback_error_message)


class FirebaseIdentity(IdentityService):
    def __init__(
        self,
        api_key: str | None = None,
        session_path: str | Path | None = None,
        *,
        service_factory: Callable[[], Any] | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else AUTH.api_key
        self.session_path = Path(session_path or AUTH.session_path)
        self.session_path.parent.mkdir(parents=True, exist_ok=True)
        self._service_factory = service_factory or self._build_service
        self._executor = executor or ThreadPoolExecutor(
            max_workers=AUTH.max_workers, thread_name_prefix="identity"
        )
        # httplib2 connections are not thread-safe; one service per worker.
        self._local = threading.local()
        self._write_lock = threading.Lock()
        logger.debug("Session cache: %s", self.session_path)

    # ------------------------------------------------------------------
    # IdentityService
    def current_session(self) -> Optional[Session]:
        try:
            data = json.loads(self.session_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable session cache %s: %s; signing out", self.session_path, exc)
            self._clear_session()
            return None
        if not isinstance(data, dict):
            self._clear_session()
            return None
        return Session.from_dict(data)

    def sign_in_with_email_password(self, email: str, password: str) -> "Future[Session]":
        return self._executor.submit(self._call, "verifyPassword", email, password)

    def create_user_with_email_password(self, email: str, password: str) -> "Future[Session]":
        return self._executor.submit(self._call, "signupNewUser", email, password)

    def sign_out(self) -> None:
        self._clear_session()

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)

    # ------------------------------------------------------------------
    # helpers
    def _build_service(self):
        if not self.api_key:
            raise RemoteAuthError("Sign-in is not configured (TODO_FIREBASE_API_KEY is empty).")
        return build(
            "identitytoolkit",
            "v3",
            developerKey=self.api_key,
            cache_discovery=False,
        )

    def _service(self):
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._service_factory()
            self._local.service = service
        return service

    def _call(self, method: str, email: str, password: str) -> Session:
        body = {"email": email, "password": password, "returnSecureToken": True}
        relyingparty = self._service().relyingparty()
        try:
            response = getattr(relyingparty, method)(body=body).execute()
        except HttpError as exc:
            error = translate_http_error(exc)
            logger.warning("%s failed for %s: %s", method, email, error.code or error.message)
            raise error from exc
        except OSError as exc:
            logger.warning("%s failed for %s: %s", method, email, exc)
            raise RemoteAuthError(str(exc) or AUTH.fallback_error_message) from exc

        session = Session(
            uid=str(response.get("localId") or ""),
            email=str(response.get("email") or email),
            id_token=str(response.get("idToken") or ""),
            refresh_token=str(response.get("refreshToken") or ""),
        )
        if not session.uid:
            raise RemoteAuthError(AUTH.fallback_error_message)
        try:
            self._persist_session(session)
        except OSError as exc:
            logger.warning("Could not cache session for %s: %s", session.email, exc)
        logger.info("%s succeeded for %s", method, session.email)
        return session

    def _persist_session(self, session: Session) -> None:
        data = json.dumps(session.to_dict())
        # each write gets its own temp file; concurrent sign-ins may both land here
        with self._write_lock:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.session_path.parent,
                prefix=self.session_path.stem + ".",
                suffix=".tmp",
                delete=False,
            ) as fh:
                fh.write(data)
                tmp_path = Path(fh.name)
            try:
                os.replace(tmp_path, self.session_path)
            finally:
                if tmp_path.exists():
                    try:
                        tmp_path.unlink()
                    except OSError:
                        pass

    def _clear_session(self) -> None:
        try:
            if self.session_path.exists():
                self.session_path.unlink()
                logger.info("Removed cached session")
        except OSError as exc:
            logger.warning("Failed to remove cached session: %s", exc)


__all__ = ["FirebaseIdentity", "ERROR_MESSAGES", "translate_http_error"]
