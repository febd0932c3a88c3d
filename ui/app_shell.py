# ui/app_shell.py
from __future__ import annotations

import logging

import flet as ft

from core.settings import UI
from models.auth_status import AuthStatus, Authenticated, Unauthenticated
from services.auth_session import AuthSession
from services.firebase_identity import FirebaseIdentity
from services.identity import IdentityService

from .pages.auth import AuthPage
from .pages.home import HomePage


logger = logging.getLogger(__name__)


class AppShell:
    """Routes between the login, signup and home screens by observing ``AuthSession``."""

    def __init__(self, page: ft.Page, identity: IdentityService | None = None):
        self.page = page

        self.page.title = UI.app_title
        self.page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
        self.page.vertical_alignment = ft.MainAxisAlignment.START
        self.page.bgcolor = UI.theme.background

        self.identity = identity or FirebaseIdentity()
        self.auth = AuthSession(self.identity)

        self._login = AuthPage(self, mode="login")
        self._signup = AuthPage(self, mode="signup")
        # created per sign-in; dropping it discards the task list
        self._home: HomePage | None = None
        self._route: str | None = None  # "login" | "signup" | "home"
        self._unsubscribe = None

        self.content = ft.Container(expand=True)
        self.root = ft.SafeArea(self.content, expand=True)

    # ---------- mount ----------
    def mount(self):
        self.page.controls.clear()
        self.page.add(self.root)
        # replays the current status, so the first screen is picked here
        self._unsubscribe = self.auth.subscribe(self._on_status)

    def unmount(self):
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        shutdown = getattr(self.identity, "shutdown", None)
        if callable(shutdown):
            shutdown()

    # ---------- navigation ----------
    def show(self, route: str):
        if route == "home":
            if self._home is None:
                self._home = HomePage(self)
            self.content.content = self._home.view
            self.page.floating_action_button = self._home.fab
        elif route in ("login", "signup"):
            self._home = None
            auth_page = self._login if route == "login" else self._signup
            auth_page.reset()
            self.content.content = auth_page.view
            self.page.floating_action_button = None
        else:
            raise ValueError(f"Unknown route: {route}")
        self._route = route
        logger.debug("Route -> %s", route)
        self.page.update()

    def _active_auth_page(self) -> AuthPage | None:
        if self._route == "login":
            return self._login
        if self._route == "signup":
            return self._signup
        return None

    # May run on an identity worker thread; flet serialises page updates.
    def _on_status(self, status: AuthStatus):
        if isinstance(status, Authenticated):
            if self._route != "home":
                self.show("home")
            return
        if isinstance(status, Unauthenticated):
            if self._route in (None, "home"):
                self.show("login")
            else:
                self._active_auth_page().set_status(status)
                self.page.update()
            return
        auth_page = self._active_auth_page()
        if auth_page is not None:
            auth_page.set_status(status)
            self.page.update()
