# services/task_board.py
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional

from core.priorities import DEFAULT_PRIORITY, Priority, normalize_priority
from models.todo_item import TaskFilter, TodoItem
from services.errors import ValidationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardStats:
    total: int
    done: int
    pending: int
    completion_percent: float


def validate_task_text(text: Optional[str]) -> str:
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValidationError("Task text is empty")
    return cleaned


def _matches_tab(item: TodoItem, tab: TaskFilter) -> bool:
    if tab is TaskFilter.PENDING:
        return not item.is_done
    if tab is TaskFilter.DONE:
        return item.is_done
    return True


class TaskBoard:
    """In-memory task collection plus the search/tab state of the home screen.

    Nothing here is persisted; the board lives as long as the screen owning it.
    Unknown ids passed to ``toggle_done``/``remove`` are ignored.
    """

    def __init__(self) -> None:
        self._items: List[TodoItem] = []
        self.search_query: str = ""
        self.filter: TaskFilter = TaskFilter.ALL

    @property
    def items(self) -> List[TodoItem]:
        return list(self._items)

    # ---------- mutations ----------
    def add(self, text: Optional[str], priority: Priority | str | None = DEFAULT_PRIORITY) -> Optional[TodoItem]:
        try:
            cleaned = validate_task_text(text)
        except ValidationError:
            return None
        item = TodoItem(text=cleaned, priority=normalize_priority(priority))
        self._items.append(item)
        logger.debug("Task added: %s (%s)", item.id, item.priority.value)
        return item

    def toggle_done(self, item_id: int) -> None:
        item = self._find(item_id)
        if item is not None:
            item.is_done = not item.is_done

    def remove(self, item_id: int) -> None:
        self._items = [item for item in self._items if item.id != item_id]

    def set_search_query(self, text: Optional[str]) -> None:
        self.search_query = text or ""

    def set_filter(self, tab: TaskFilter | str) -> None:
        self.filter = tab if isinstance(tab, TaskFilter) else TaskFilter(str(tab).lower())

    # ---------- derived views ----------
    @property
    def stats(self) -> BoardStats:
        total = len(self._items)
        done = sum(1 for item in self._items if item.is_done)
        percent = done / total * 100 if total > 0 else 0.0
        return BoardStats(total=total, done=done, pending=total - done, completion_percent=percent)

    @property
    def visible_items(self) -> List[TodoItem]:
        query = self.search_query.casefold()
        matching = [
            item
            for item in self._items
            if query in item.text.casefold() and _matches_tab(item, self.filter)
        ]
        # sorted() is stable, so ties keep insertion order.
        return sorted(matching, key=lambda item: (item.is_done, item.priority.rank))

    def _find(self, item_id: int) -> Optional[TodoItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None


__all__ = ["TaskBoard", "BoardStats", "validate_task_text"]
