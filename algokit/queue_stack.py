"""A last-in, first-out stack kept in a queue."""

from __future__ import annotations

from collections import deque


class QueueStack:
    """Stack of integers backed by a double-ended queue."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)