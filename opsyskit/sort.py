"""Stable sorting driven by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import Any


def sort(items: list[Any], cmp: Callable[[Any, Any], int]) -> None:
    """Sort ``items`` in place, stably, ordering by ``cmp``.

    ``cmp(a, b)`` returns a negative number, zero or a positive number when
    ``a`` is less than, equal to or greater than ``b``.
    """
    items[:] = sorted(items, key=cmp_to_key(cmp))