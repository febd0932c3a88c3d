"""Task priorities and their display metadata."""
from __future__ import annotations

from enum import Enum
from typing import Dict


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank: lower comes first."""
        return _RANK[self]


_RANK: Dict[Priority, int] = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}

# Kept apart from the enum so board logic never touches presentation data.
PRIORITY_META: Dict[Priority, Dict[str, str]] = {
    Priority.HIGH: {
        "label": "High",
        "short": "High",
        "color": "#FFCDD2",    # red-100
    },
    Priority.MEDIUM: {
        "label": "Medium",
        "short": "Med",
        "color": "#FFF9C4",    # yellow-100
    },
    Priority.LOW: {
        "label": "Low",
        "short": "Low",
        "color": "#C8E6C9",    # green-100
    },
}

DEFAULT_PRIORITY = Priority.LOW


def normalize_priority(value: Priority | str | None) -> Priority:
    """Map external values (enum, value or name) to a supported priority."""
    if value is None:
        return DEFAULT_PRIORITY
    if isinstance(value, Priority):
        return value
    key = str(value).strip().lower()
    for level in Priority:
        if key in (level.value, level.name.lower()):
            return level
    return DEFAULT_PRIORITY


def priority_label(value: Priority, *, short: bool = False) -> str:
    meta = PRIORITY_META.get(value, PRIORITY_META[DEFAULT_PRIORITY])
    return meta["short" if short else "label"]


def priority_color(value: Priority) -> str:
    meta = PRIORITY_META.get(value, PRIORITY_META[DEFAULT_PRIORITY])
    return meta["color"]


def priority_options() -> Dict[str, str]:
    """Return mapping of chip values -> labels, highest priority first."""
    return {level.value: PRIORITY_META[level]["label"] for level in sorted(Priority, key=lambda p: p.rank)}
