"""Small text and output helpers used by the process launchers."""

from __future__ import annotations

import os
import re
import sys
from typing import Optional, TextIO

_WHITESPACE = " \t"
_LEADING_DIGITS = re.compile(r"[0-9]*")


def read_line(stream: TextIO, size: int) -> str:
    """Read at most ``size - 1`` characters, stopping after a newline.

    The newline, when reached, is kept.  Returns ``""`` at end of input.
    """
    chars: list[str] = []
    for _ in range(size - 1):
        c = stream.read(1)
        if not c:
            break
        chars.append(c)
        if c == "\n":
            break
    return "".join(chars)


def get_word(buf: str, i: int) -> Optional[tuple[str, int]]:
    """Fetch the next blank-separated word of ``buf`` starting at ``i``.

    A word may be enclosed in single or double quotes, in which case it runs
    to the matching quote, which is skipped.  Returns ``(word, next_index)``
    or ``None`` when only blanks remain.
    """
    n = len(buf)
    while i < n and buf[i] in _WHITESPACE:
        i += 1
    if i >= n:
        return None
    if buf[i] in "'\"":
        terminators = buf[i]
        quoted = True
        i += 1
    else:
        terminators = _WHITESPACE
        quoted = False
    start = i
    while i < n and buf[i] not in terminators:
        i += 1
    word = buf[start:i]
    if i < n and quoted:
        i += 1
    return word, i


def atoi(s: str) -> int:
    """Convert the leading decimal digits of ``s`` to an integer (0 if none)."""
    digits = _LEADING_DIGITS.match(s).group(0)
    return int(digits) if digits else 0


def itoa(number: int) -> str:
    """Format ``number`` as a decimal string."""
    return str(number)


def strneq(s1: str, s2: str, n: int) -> bool:
    """Return True if the first ``n`` characters of the two strings are equal."""
    return s1[:n] == s2[:n]


def pack(st: str, fw: int, fc: str) -> str:
    """Justify ``st`` in a field of width ``|fw|`` padded with ``fc``.

    A non-negative ``fw`` pads after ``st``; a negative one pads before it.
    A string longer than the field is returned unchanged.
    """
    fill = fc * max(abs(fw) - len(st), 0)
    return fill + st if fw < 0 else st + fill


def put_int(stream: TextIO, number: int) -> None:
    """Write ``number`` in decimal to ``stream`` and flush it."""
    stream.write(str(number))
    stream.flush()


def put_str(stream: TextIO, s: str) -> None:
    """Write ``s`` to ``stream`` and flush it."""
    stream.write(s)
    stream.flush()


def _last_error_text() -> str:
    err = sys.exc_info()[1]
    if err is None:
        return os.strerror(0)
    if isinstance(err, OSError) and err.strerror:
        return err.strerror
    return str(err)


def put_error(stream: TextIO, message: str) -> None:
    """Write ``message`` followed by a description of the error being handled."""
    put_str(stream, message)
    put_str(stream, " - ")
    put_str(stream, _last_error_text())
    put_str(stream, "\n")