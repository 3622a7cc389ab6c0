"""Set of elements kept in a chained hash table with caller-supplied hashing."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

DEFAULT_SET_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75
MAX_SET_CAPACITY = 134_217_728

CmpFunc = Callable[[Any, Any], int]
HashFunc = Callable[[Any, int], int]
FreeFunc = Optional[Callable[[Any], None]]


def _default_cmp(a: Any, b: Any) -> int:
    return 0 if a == b else 1


def _default_hash(value: Any, n: int) -> int:
    return hash(value) % n


class HashSet:
    """A set whose membership is decided by ``cmp`` and placed by ``hash_fxn``.

    ``cmp(a, b)`` returns 0 when the elements are equal.  ``hash_fxn(value, n)``
    returns a bucket number in ``[0, n)``.  A capacity of 0 selects the
    default of 16 buckets and a load factor of 0 selects 0.75.  When the
    load passes the load factor the bucket count doubles, up to
    134,217,728.  ``free_value``, when given, is called on each element that
    :meth:`remove` or :meth:`clear` discards.
    """

    def __init__(
        self,
        free_value: FreeFunc = None,
        cmp: Optional[CmpFunc] = None,
        capacity: int = 0,
        load_factor: float = 0.0,
        hash_fxn: Optional[HashFunc] = None,
    ) -> None:
        self._free_value = free_value
        self._cmp = cmp if cmp is not None else _default_cmp
        self._hash = hash_fxn if hash_fxn is not None else _default_hash
        requested = capacity if capacity > 0 else DEFAULT_SET_CAPACITY
        self._capacity = min(requested, MAX_SET_CAPACITY)
        self._load_factor = (
            load_factor if load_factor > 0.000001 else DEFAULT_LOAD_FACTOR
        )
        # bucket number -> chain, whose head is the last element of the list
        self._buckets: dict[int, list[Any]] = {}
        self._size = 0

    @property
    def capacity(self) -> int:
        """The current number of buckets."""
        return self._capacity

    def _index(self, value: Any, n: int) -> int:
        index = self._hash(value, n)
        if not 0 <= index < n:
            raise ValueError(f"hash function returned {index}, outside [0, {n})")
        return index

    def _resize(self) -> None:
        n = min(2 * self._capacity, MAX_SET_CAPACITY)
        if n == self._capacity:
            return
        table: dict[int, list[Any]] = {}
        for index in sorted(self._buckets):
            for value in reversed(self._buckets[index]):
                table.setdefault(self._index(value, n), []).append(value)
        self._buckets = table
        self._capacity = n

    def clear(self) -> None:
        """Release every element through the callback and empty the set."""
        if self._free_value is not None:
            for value in self.to_list():
                self._free_value(value)
        self._buckets.clear()
        self._size = 0

    def add(self, member: Any) -> bool:
        """Add ``member``; return False if an equal element is already present."""
        if self._size / self._capacity > self._load_factor:
            self._resize()
        if self.contains(member):
            return False
        self._buckets.setdefault(self._index(member, self._capacity), []).append(member)
        self._size += 1
        return True

    def contains(self, member: Any) -> bool:
        """Return True if an element equal to ``member`` is present."""
        chain = self._buckets.get(self._index(member, self._capacity), ())
        return any(self._cmp(member, value) == 0 for value in chain)

    def __contains__(self, member: Any) -> bool:
        return self.contains(member)

    def is_empty(self) -> bool:
        """Return True when the set holds no elements."""
        return self._size == 0

    def remove(self, member: Any) -> bool:
        """Remove the element equal to ``member``; return False if absent."""
        index = self._index(member, self._capacity)
        chain = self._buckets.get(index)
        if not chain:
            return False
        for pos, value in enumerate(chain):
            if self._cmp(member, value) == 0:
                del chain[pos]
                if not chain:
                    del self._buckets[index]
                self._size -= 1
                if self._free_value is not None:
                    self._free_value(value)
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def to_list(self) -> list[Any]:
        """Return the elements bucket by bucket, each chain from its head."""
        return [
            value
            for index in sorted(self._buckets)
            for value in reversed(self._buckets[index])
        ]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())