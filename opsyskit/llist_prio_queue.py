"""Priority queue kept as a sequence ordered by a caller-supplied comparator."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

CmpFunc = Callable[[Any, Any], int]
FreeFunc = Optional[Callable[[Any], None]]


class LListPrioQueue:
    """A priority queue of ``(priority, value)`` entries.

    Entries are kept sorted by ``cmp(p1, p2)``, which returns a negative
    number, zero or a positive number.  Entries with equal priorities leave
    in the order they were inserted.  ``free_prio`` and ``free_value``, when
    given, are called on every entry still held when :meth:`clear` runs.
    """

    def __init__(
        self,
        cmp: CmpFunc,
        free_prio: FreeFunc = None,
        free_value: FreeFunc = None,
    ) -> None:
        self._cmp = cmp
        self._free_prio = free_prio
        self._free_value = free_value
        self._entries: list[tuple[Any, Any]] = []

    def create(self) -> "LListPrioQueue":
        """Return a new, empty queue with the same comparator and callbacks."""
        return LListPrioQueue(self._cmp, self._free_prio, self._free_value)

    def clear(self) -> None:
        """Release every priority and value through the callbacks and empty the queue."""
        for priority, value in self._entries:
            if self._free_prio is not None:
                self._free_prio(priority)
            if self._free_value is not None:
                self._free_value(value)
        self._entries.clear()

    def insert(self, priority: Any, value: Any) -> None:
        """Insert ``value`` with ``priority`` after all entries not greater than it."""
        position = next(
            (
                index
                for index, (existing, _) in enumerate(self._entries)
                if self._cmp(priority, existing) < 0
            ),
            len(self._entries),
        )
        self._entries.insert(position, (priority, value))

    def min(self) -> tuple[Any, Any]:
        """Return ``(priority, value)`` of the minimum entry without removing it."""
        if not self._entries:
            raise IndexError("min of an empty priority queue")
        return self._entries[0]

    def remove_min(self) -> tuple[Any, Any]:
        """Remove and return ``(priority, value)`` of the minimum entry."""
        if not self._entries:
            raise IndexError("remove_min from an empty priority queue")
        return self._entries.pop(0)

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        """Return True when the queue holds no entries."""
        return not self._entries

    def to_list(self) -> list[Any]:
        """Return the values from smallest to largest priority."""
        return [value for _, value in self._entries]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())