"""A FIFO queue in a ring of slots that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 100


class CircularQueue:
    """A ring-buffer queue; enqueueing into a full queue doubles its capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of values the queue holds before it grows."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        capacity = self.capacity
        for offset in range(self._count):
            yield self._slots[(self._head + offset) % capacity]

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"

    def is_full(self) -> bool:
        """True when every slot is in use."""
        return self._count == self.capacity

    def is_empty(self) -> bool:
        """True when the queue holds nothing."""
        return self._count == 0

    def _grow(self) -> None:
        items = list(self)
        self._slots = items + [None] * len(items)
        self._head = 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            self._grow()
        self._slots[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        """Return the value at the rear without removing it."""
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[(self._head + self._count - 1) % self.capacity]