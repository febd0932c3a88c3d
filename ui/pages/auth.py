# ui/pages/auth.py
from __future__ import annotations

import flet as ft

from core.settings import UI
from models.auth_status import AuthStatus, Error, Loading


MODES = {
    "login": {
        "title": "Welcome back",
        "submit": "Log in",
        "switch_text": "Don't have an account? Sign up",
        "switch_to": "signup",
    },
    "signup": {
        "title": "Create an account",
        "submit": "Sign up",
        "switch_text": "Already have an account? Log in",
        "switch_to": "login",
    },
}


class AuthPage:
    """Email/password form shared by the login and signup screens."""

    def __init__(self, app, mode: str = "login"):
        if mode not in MODES:
            raise ValueError(f"Unsupported auth mode: {mode}")
        self.app = app
        self.mode = mode
        texts = MODES[mode]

        self.email_tf = ft.TextField(
            label="Email",
            keyboard_type=ft.KeyboardType.EMAIL,
            prefix_icon=ft.Icons.EMAIL_OUTLINED,
            autofocus=True,
        )
        self.password_tf = ft.TextField(
            label="Password",
            password=True,
            can_reveal_password=True,
            prefix_icon=ft.Icons.LOCK_OUTLINE,
            on_submit=self.on_submit,
        )
        self.error_text = ft.Text("", color=ft.Colors.RED_400, visible=False)
        self.progress = ft.ProgressRing(width=20, height=20, stroke_width=2, visible=False)
        self.submit_btn = ft.FilledButton(
            texts["submit"],
            on_click=self.on_submit,
            style=ft.ButtonStyle(bgcolor=UI.theme.primary),
            expand=True,
        )
        self.switch_btn = ft.TextButton(
            texts["switch_text"],
            on_click=lambda e: self.app.show(texts["switch_to"]),
        )

        self.view = ft.Container(
            content=ft.Column(
                [
                    ft.Text(UI.app_title, size=28, weight=ft.FontWeight.BOLD, color=UI.theme.primary),
                    ft.Text(texts["title"], size=16, color=UI.theme.text_subtle),
                    self.email_tf,
                    self.password_tf,
                    self.error_text,
                    ft.Row([self.submit_btn, self.progress], spacing=12),
                    self.switch_btn,
                ],
                spacing=16,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            padding=24,
            expand=True,
            alignment=ft.alignment.center,
        )

    def on_submit(self, _):
        email = (self.email_tf.value or "").strip()
        password = self.password_tf.value or ""
        if self.mode == "signup":
            self.app.auth.signup(email, password)
        else:
            self.app.auth.login(email, password)

    def set_status(self, status: AuthStatus | None):
        busy = isinstance(status, Loading)
        self.progress.visible = busy
        self.submit_btn.disabled = busy
        self.email_tf.disabled = busy
        self.password_tf.disabled = busy
        if isinstance(status, Error):
            self.error_text.value = status.message
            self.error_text.visible = True
        else:
            self.error_text.value = ""
            self.error_text.visible = False

    def reset(self):
        self.password_tf.value = ""
        self.set_status(None)
