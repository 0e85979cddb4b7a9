"""First-in-first-out queue and last-in-first-out stack.

Taking from or peeking at an empty container gives ``None``.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, List, Optional


class Queue:
    """A first-in-first-out queue."""

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def is_empty(self) -> bool:
        """True if the queue holds nothing."""
        return not self._items

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> Optional[Any]:
        """Remove and return the front item, or ``None`` if empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> Optional[Any]:
        """Return the front item without removing it, or ``None`` if empty."""
        if not self._items:
            return None
        return self._items[0]


class Stack:
    """A last-in-first-out stack."""

    def __init__(self) -> None:
        self._items: List[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def is_empty(self) -> bool:
        """True if the stack holds nothing."""
        return not self._items

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Optional[Any]:
        """Remove and return the top item, or ``None`` if empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[Any]:
        """Return the top item without removing it, or ``None`` if empty."""
        if not self._items:
            return None
        return self._items[-1]