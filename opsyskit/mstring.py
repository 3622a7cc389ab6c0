"""Mutable string with in-place editing and search helpers."""

from __future__ import annotations

from typing import Union

from opsyskit.charclass import class_predicate, split_on, split_words

_SPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_TO_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _all_in_class(text: str, name: str) -> bool:
    predicate = class_predicate(name)
    return bool(text) and all(predicate(c) for c in text)


def _check_char(chr: str) -> str:
    if not isinstance(chr, str) or len(chr) != 1:
        raise ValueError(f"expected a single character, got {chr!r}")
    return chr


class MString:
    """A string whose contents can be changed in place.

    Wherever a method takes ``begin`` and ``end``, an ``end`` of 0 stands
    for the length of the string.  Character classes and case changes
    follow the ASCII rules.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    def copy(self) -> "MString":
        """Return an independent copy."""
        return MString(self._text)

    def slice(self, begin: int, end: int = 0) -> "MString":
        """Return a new string of the characters in ``[begin, end)``.

        Raises ValueError unless ``0 <= begin < end <= len(self)``.
        """
        if end == 0:
            end = len(self._text)
        if not (begin >= 0 and end <= len(self._text) and begin < end):
            raise ValueError(f"illegal slice [{begin}, {end})")
        return MString(self._text[begin:end])

    def append(self, suffix: str) -> None:
        """Append ``suffix`` to the end."""
        self._text += suffix

    def assign(self, chr: str, index: int) -> None:
        """Replace the character at ``index`` with ``chr``."""
        _check_char(chr)
        if not 0 <= index < len(self._text):
            raise IndexError(f"index {index} out of range")
        self._text = self._text[:index] + chr + self._text[index + 1:]

    def clear(self) -> None:
        """Remove every character."""
        self._text = ""

    def insert(self, substr: str, index: int) -> None:
        """Insert ``substr`` before ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self._text):
            raise IndexError(f"index {index} out of range")
        self._text = self._text[:index] + substr + self._text[index:]

    def lower(self) -> None:
        """Convert upper-case letters to lower case."""
        self._text = self._text.translate(_TO_LOWER)

    def lstrip(self) -> None:
        """Remove leading whitespace."""
        self._text = self._text.lstrip(_SPACE)

    def remove(self, index: int) -> None:
        """Delete the character at ``index``."""
        if not 0 <= index < len(self._text):
            raise IndexError(f"index {index} out of range")
        self._text = self._text[:index] + self._text[index + 1:]

    def replace(self, old: str, new: str) -> None:
        """Replace every non-overlapping occurrence of ``old``, left to right."""
        if not old:
            raise ValueError("cannot replace an empty string")
        self._text = self._text.replace(old, new)

    def rstrip(self) -> None:
        """Remove trailing whitespace."""
        self._text = self._text.rstrip(_SPACE)

    def strip(self) -> None:
        """Remove leading and trailing whitespace."""
        self.lstrip()
        self.rstrip()

    def translate(self, char_class: str, chr: str) -> None:
        """Replace each character of class ``char_class`` (e.g. ``"[:digit:]"``) with ``chr``.

        An unknown class leaves the string unchanged.
        """
        predicate = class_predicate(char_class)
        if predicate is None:
            return
        _check_char(chr)
        self._text = "".join(chr if predicate(c) else c for c in self._text)

    def upper(self) -> None:
        """Convert lower-case letters to upper case."""
        self._text = self._text.translate(_TO_UPPER)

    def compare(self, other: Union["MString", str]) -> int:
        """Return -1, 0 or 1 as this string sorts before, equal to or after ``other``."""
        theirs = str(other)
        return (self._text > theirs) - (self._text < theirs)

    def contains(self, substr: str) -> bool:
        """Return True if ``substr`` occurs in the string."""
        return substr in self._text

    def __contains__(self, substr: str) -> bool:
        return self.contains(substr)

    def ends_with(self, suffix: str, begin: int = 0, end: int = 0) -> bool:
        """Return True if the characters in ``[begin, end)`` end with ``suffix``."""
        if end == 0:
            end = len(self._text)
        n = len(suffix)
        if end - begin < n:
            return False
        return self._text[end - n:end] == suffix

    def get(self, index: int) -> str:
        """Return the character at ``index``."""
        if not 0 <= index < len(self._text):
            raise IndexError(f"index {index} out of range")
        return self._text[index]

    def index(self, substr: str, begin: int = 0, end: int = 0) -> int:
        """Return the first position of ``substr`` within ``[begin, end)``, or -1."""
        if end == 0:
            end = len(self._text)
        n = len(substr)
        last = end - max(n, 1)
        return next(
            (
                i
                for i in range(max(begin, 0), last + 1)
                if self._text[i:i + n] == substr
            ),
            -1,
        )

    def rindex(self, substr: str, begin: int = 0, end: int = 0) -> int:
        """Return the last position of ``substr`` within ``[begin, end)``, or -1."""
        if end == 0:
            end = len(self._text)
        n = len(substr)
        return next(
            (
                i
                for i in range(end - n, max(begin, 0) - 1, -1)
                if self._text[i:i + n] == substr
            ),
            -1,
        )

    def is_alpha(self) -> bool:
        """Return True if non-empty and every character is a letter."""
        return _all_in_class(self._text, "[:alpha:]")

    def is_digit(self) -> bool:
        """Return True if non-empty and every character is a digit."""
        return _all_in_class(self._text, "[:digit:]")

    def is_lower(self) -> bool:
        """Return True if non-empty and every character is a lower-case letter."""
        return _all_in_class(self._text, "[:lower:]")

    def is_space(self) -> bool:
        """Return True if non-empty and every character is whitespace."""
        return _all_in_class(self._text, "[:space:]")

    def is_upper(self) -> bool:
        """Return True if non-empty and every character is an upper-case letter."""
        return _all_in_class(self._text, "[:upper:]")

    def __len__(self) -> int:
        return len(self._text)

    def split(self, sep: str = "") -> list[str]:
        """Split into words.

        With an empty ``sep``, runs of blanks, tabs and newlines separate
        words; otherwise the exact sequence ``sep`` does.
        """
        if sep:
            return split_on(self._text, sep)
        return split_words(self._text)

    def starts_with(self, prefix: str, begin: int = 0, end: int = 0) -> bool:
        """Return True if the characters in ``[begin, end)`` start with ``prefix``."""
        if end == 0:
            end = len(self._text)
        n = len(prefix)
        if end - begin < n:
            return False
        return self._text[begin:begin + n] == prefix

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MString({self._text!r})"