# services/observable.py
from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar


T = TypeVar("T")

logger = logging.getLogger(__name__)


class StatusObservable(Generic[T]):
    """Single-slot publisher: holds the latest value and replays it to new subscribers."""

    def __init__(self, initial: T):
        self._value = initial
        self._listeners: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def publish(self, value: T) -> None:
        self._value = value
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Status listener %r failed", listener)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register ``callback``, call it with the current value, return an unsubscribe handle."""
        self._listeners.append(callback)
        try:
            callback(self._value)
        except Exception:
            logger.exception("Status listener %r failed", callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Callable[[T], None]) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass


__all__ = ["StatusObservable"]
