"""Domain models exposed by the TodoList application."""
from .auth_status import AuthStatus
from .session import Session
from .todo_item import TaskFilter, TodoItem

__all__ = ["AuthStatus", "Session", "TaskFilter", "TodoItem"]
