"""Last-in, first-out stack with an optional release callback for its elements."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

FreeFunc = Optional[Callable[[Any], None]]


class LListStack:
    """A LIFO stack.

    ``free_value``, when given, is called on every element still held by the
    stack when :meth:`clear` is invoked.
    """

    def __init__(self, free_value: FreeFunc = None) -> None:
        self._free_value = free_value
        self._items: list[Any] = []

    def create(self) -> "LListStack":
        """Return a new, empty stack sharing this stack's release callback."""
        return LListStack(self._free_value)

    def clear(self) -> None:
        """Release every element (top to bottom) and empty the stack."""
        if self._free_value is not None:
            for item in reversed(self._items):
                self._free_value(item)
        self._items.clear()

    def push(self, element: Any) -> None:
        """Push ``element`` onto the top of the stack."""
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the elements from top to bottom."""
        return self._items[::-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())