"""First-in, first-out queue with an optional release callback for its elements."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, Optional

FreeFunc = Optional[Callable[[Any], None]]


class LListQueue:
    """A FIFO queue.

    ``free_value``, when given, is called on every element still held by the
    queue when :meth:`clear` is invoked.
    """

    def __init__(self, free_value: FreeFunc = None) -> None:
        self._free_value = free_value
        self._items: deque[Any] = deque()

    def create(self) -> "LListQueue":
        """Return a new, empty queue sharing this queue's release callback."""
        return LListQueue(self._free_value)

    def clear(self) -> None:
        """Release every element through the callback and empty the queue."""
        if self._free_value is not None:
            for item in self._items:
                self._free_value(item)
        self._items.clear()

    def enqueue(self, element: Any) -> None:
        """Add ``element`` at the tail of the queue."""
        self._items.append(element)

    def front(self) -> Any:
        """Return the element at the head without removing it."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def dequeue(self) -> Any:
        """Remove and return the element at the head."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the elements from head to tail."""
        return list(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())