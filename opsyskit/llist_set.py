"""Set of elements kept in a linked sequence, with a caller-supplied equality test."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

CmpFunc = Callable[[Any, Any], int]
FreeFunc = Optional[Callable[[Any], None]]


def _default_cmp(a: Any, b: Any) -> int:
    return 0 if a == b else 1


class LListSet:
    """A set whose membership is decided by ``cmp``.

    ``cmp(a, b)`` returns 0 when the elements are equal.  ``free_value``,
    when given, is called on each element that :meth:`remove` or
    :meth:`clear` discards.  Elements are kept in the order they were added.
    """

    def __init__(
        self, free_value: FreeFunc = None, cmp: Optional[CmpFunc] = None
    ) -> None:
        self._free_value = free_value
        self._cmp = cmp if cmp is not None else _default_cmp
        self._items: list[Any] = []

    def _position(self, member: Any) -> Optional[int]:
        return next(
            (
                pos
                for pos, value in enumerate(self._items)
                if self._cmp(member, value) == 0
            ),
            None,
        )

    def clear(self) -> None:
        """Release every element through the callback and empty the set."""
        if self._free_value is not None:
            for value in self._items:
                self._free_value(value)
        self._items.clear()

    def add(self, member: Any) -> bool:
        """Add ``member``; return False if an equal element is already present."""
        if self._position(member) is not None:
            return False
        self._items.append(member)
        return True

    def contains(self, member: Any) -> bool:
        """Return True if an element equal to ``member`` is present."""
        return self._position(member) is not None

    def __contains__(self, member: Any) -> bool:
        return self.contains(member)

    def is_empty(self) -> bool:
        """Return True when the set holds no elements."""
        return not self._items

    def remove(self, member: Any) -> bool:
        """Remove the element equal to ``member``; return False if absent."""
        pos = self._position(member)
        if pos is None:
            return False
        value = self._items.pop(pos)
        if self._free_value is not None:
            self._free_value(value)
        return True

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[Any]:
        """Return the elements in the order they were added."""
        return list(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())