"""A stack with a capacity that doubles when full and halves when mostly empty."""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 10
_MIN_CAPACITY = 2


class ArrayStack:
    """A LIFO stack tracking a capacity that grows and shrinks with use."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of values held before the stack grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self._capacity})"

    def is_full(self) -> bool:
        """True when the stack holds as many values as its capacity."""
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        """True when the stack holds nothing."""
        return not self._items

    def push(self, value: Any) -> None:
        """Put a value on top, doubling the capacity first if full."""
        if self.is_full():
            self._capacity *= 2
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value.

        When a quarter or less of the capacity is in use, the capacity is
        halved first.
        """
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        if len(self._items) <= self._capacity // 4:
            self._capacity = self._capacity // 2 or _MIN_CAPACITY
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty stack")
        return self._items[-1]