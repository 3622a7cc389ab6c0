"""Character classes in bracket notation and the word-splitting rules of MString."""

from __future__ import annotations

import re
import string
from collections.abc import Callable
from typing import Optional

Predicate = Callable[[str], bool]

_SPACE = " \t\n\v\f\r"
_WORD_SEPARATORS = re.compile(r"[ \t\n]+")


def _is_alpha(c: str) -> bool:
    return c in string.ascii_letters


def _is_digit(c: str) -> bool:
    return c in string.digits


def _is_graph(c: str) -> bool:
    return 33 <= ord(c) <= 126


_CLASS_PREDICATES: dict[str, Predicate] = {
    "[:alnum:]": lambda c: _is_alpha(c) or _is_digit(c),
    "[:alpha:]": _is_alpha,
    "[:blank:]": lambda c: c in " \t",
    "[:cntrl:]": lambda c: ord(c) < 32 or ord(c) == 127,
    "[:digit:]": _is_digit,
    "[:graph:]": _is_graph,
    "[:lower:]": lambda c: c in string.ascii_lowercase,
    "[:print:]": lambda c: 32 <= ord(c) <= 126,
    "[:punct:]": lambda c: _is_graph(c) and not (_is_alpha(c) or _is_digit(c)),
    "[:space:]": lambda c: c in _SPACE,
    "[:upper:]": lambda c: c in string.ascii_uppercase,
    "[:xdigit:]": lambda c: c in string.hexdigits,
}


def class_predicate(name: str) -> Optional[Predicate]:
    """Return the test for the class ``name`` (such as ``"[:digit:]"``).

    The test takes one character and is true only for ASCII members of the
    class.  Returns None when ``name`` is not a known class.
    """
    predicate = _CLASS_PREDICATES.get(name)
    if predicate is None:
        return None

    def test(c: str) -> bool:
        return len(c) == 1 and ord(c) < 128 and predicate(c)

    return test


def split_on(text: str, sep: str) -> list[str]:
    """Split ``text`` at each occurrence of ``sep``, scanning left to right.

    Empty pieces between separators are kept, but a separator at the very
    end does not produce a trailing empty piece.  Raises ValueError if
    ``sep`` is empty.
    """
    if not sep:
        raise ValueError("empty separator")
    if not text:
        return []
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of blanks, tabs and newlines."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]