"""Work-stealing queue: the owner pushes and pops at one end, others steal at the other."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")


class WorkStealingQueue(Generic[T]):
    """Unbounded queue whose capacity doubles when it fills up.

    :meth:`push` and :meth:`pop` are meant for the owning thread and work
    last-in first-out; :meth:`steal` may be called from any thread and takes
    the oldest item. Both return ``None`` when there is nothing to take.
    """

    def __init__(self, capacity: int = 1024) -> None:
        if capacity <= 0 or capacity & (capacity - 1):
            raise ValueError(f"capacity must be a positive power of two, got {capacity}")
        self._capacity = capacity
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def empty(self) -> bool:
        """Whether the queue holds no items at the time of the call."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        """Current capacity; grows by doubling."""
        return self._capacity

    def push(self, item: T) -> None:
        """Add an item at the owner's end, growing the queue if it is full."""
        with self._lock:
            if self._capacity - 1 < len(self._items):
                self._capacity *= 2
            self._items.append(item)

    def pop(self) -> Optional[T]:
        """Take the newest item, or ``None`` if the queue is empty."""
        with self._lock:
            return self._items.pop() if self._items else None

    def steal(self) -> Optional[T]:
        """Take the oldest item, or ``None`` if the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None