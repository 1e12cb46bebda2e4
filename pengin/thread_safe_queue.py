"""A FIFO queue guarded by a lock, with blocking pop."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """FIFO queue safe to share between threads."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._condition = threading.Condition()

    def push(self, value: T) -> None:
        with self._condition:
            self._items.append(value)
            self._condition.notify()

    def try_pop(self) -> T:
        """Pop the front item; raises ``queue.Empty`` if there is none."""
        with self._condition:
            if not self._items:
                raise queue.Empty
            return self._items.popleft()

    def wait_and_pop(self, timeout: Optional[float] = None) -> T:
        """Block until an item is available; raises ``queue.Empty`` on timeout."""
        with self._condition:
            if not self._condition.wait_for(lambda: bool(self._items), timeout):
                raise queue.Empty
            return self._items.popleft()

    def empty(self) -> bool:
        with self._condition:
            return not self._items

    def __len__(self) -> int:
        with self._condition:
            return len(self._items)

    def clear(self) -> None:
        with self._condition:
            self._items.clear()
            self._condition.notify_all()