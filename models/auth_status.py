"""Authentication status values observed by the UI.

Exactly one status is current at a time. ``Idle``, ``Loading``,
``Authenticated`` and ``Unauthenticated`` carry no data and are exposed as
module-level singletons; ``Error`` carries the user-facing message.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Authenticated:
    pass


@dataclass(frozen=True)
class Unauthenticated:
    pass


@dataclass(frozen=True)
class Error:
    message: str


AuthStatus = Union[Idle, Loading, Authenticated, Unauthenticated, Error]

IDLE = Idle()
LOADING = Loading()
AUTHENTICATED = Authenticated()
UNAUTHENTICATED = Unauthenticated()


__all__ = [
    "AuthStatus",
    "Idle",
    "Loading",
    "Authenticated",
    "Unauthenticated",
    "Error",
    "IDLE",
    "LOADING",
    "AUTHENTICATED",
    "UNAUTHENTICATED",
]
