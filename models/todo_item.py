# models/todo_item.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import threading
import time

from core.priorities import DEFAULT_PRIORITY, Priority


_id_lock = threading.Lock()
_last_id = 0


def next_item_id() -> int:
    """Millisecond timestamp, bumped so two ids never collide."""
    global _last_id
    with _id_lock:
        candidate = time.time_ns() // 1_000_000
        _last_id = max(candidate, _last_id + 1)
        return _last_id


class TaskFilter(Enum):
    ALL = "all"
    PENDING = "pending"
    DONE = "done"

    @property
    def label(self) -> str:
        return {"all": "All", "pending": "Pending", "done": "Done"}[self.value]


@dataclass
class TodoItem:
    text: str
    is_done: bool = False
    priority: Priority = DEFAULT_PRIORITY
    id: int = field(default_factory=next_item_id)


__all__ = ["TodoItem", "TaskFilter", "next_item_id"]
