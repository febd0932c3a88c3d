"""Centralized application configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional
import os
import sys


def get_default_data_dir(
    app_name: str,
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """Return an OS-specific user data directory for ``app_name``."""

    platform_id = (platform or sys.platform).lower()
    environ = dict(env or os.environ)
    home_dir = Path(home or Path.home())
    sanitized = app_name.strip() or "app"
    sanitized = sanitized.replace("/", "-").replace("\\", "-")

    if platform_id.startswith("win"):
        base = Path(environ.get("APPDATA") or home_dir / "AppData" / "Roaming")
    elif platform_id == "darwin":
        base = home_dir / "Library" / "Application Support"
    else:
        base = Path(environ.get("XDG_DATA_HOME") or home_dir / ".local" / "share")

    return (base.expanduser() / sanitized)


APP_NAME = "TodoList"


DATA_DIR = get_default_data_dir(APP_NAME)
LOG_DIR = DATA_DIR / "logs"

for _dir in (DATA_DIR, LOG_DIR):
    _dir.mkdir(parents=True, exist_ok=True)


SESSION_PATH = DATA_DIR / "session.json"
LOG_PATH = LOG_DIR / "todo.log"


@dataclass(frozen=True)
class AuthSettings:
    # Web API key of the Firebase project; empty means sign-in is unavailable.
    api_key: str = field(default_factory=lambda: os.environ.get("TODO_FIREBASE_API_KEY", ""))
    session_path: Path = SESSION_PATH
    max_workers: int = 2
    missing_fields_message: str = "fill all fields"
    fallback_error_message: str = "unknown error"


AUTH = AuthSettings()


@dataclass(frozen=True)
class ThemeColors:
    primary: str = "#4B6EFF"
    background: str = "#F5F7FA"
    card: str = "#FFFFFF"
    text_subtle: str = "#9E9E9E"
    pending: str = "#FF9F1C"
    done: str = "#2EC4B6"
    tab_selected_bg: str = "#212121"
    tab_selected_text: str = "#FFFFFF"
    tab_bg: str = "#FFFFFF"
    tab_text: str = "#000000"
    delete_icon: str = "#BDBDBD"


@dataclass(frozen=True)
class UISettings:
    app_title: str = "TodoList"
    subtitle: str = "Ready to get things done today?"
    theme_mode: str = "light"
    color_scheme_seed: str = "#4B6EFF"
    window_width: int = 420
    window_height: int = 820
    window_min_width: int = 360
    window_min_height: int = 600
    dialog_width: int = 360
    theme: ThemeColors = ThemeColors()


UI = UISettings()


@dataclass(frozen=True)
class LogSettings:
    path: Path = LOG_PATH
    max_bytes: int = 1_000_000
    backup_count: int = 3
    level: str = field(default_factory=lambda: os.environ.get("TODO_LOG_LEVEL", "INFO"))


LOGGING = LogSettings()


__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "LOG_DIR",
    "SESSION_PATH",
    "LOG_PATH",
    "AUTH",
    "UI",
    "LOGGING",
    "get_default_data_dir",
]
