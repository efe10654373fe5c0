"""String helpers: splitting, trimming, bounded copies and searches, integer conversion."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Callable

_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _require_char(value: str, name: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    _require_char(sep, "sep")
    return [piece for piece in text.split(sep) if piece]


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Anything after the digits is ignored; no digits gives 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def bounded_find(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _require_non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they agree, otherwise the code point difference of the
    first differing characters, the end of a string counting as code point 0.
    """
    _require_non_negative(n, "n")
    for x, y in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def find_char(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    _require_char(char, "char")
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    _require_char(char, "char")
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _require_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    need; when ``size`` does not exceed ``len(dst)`` nothing is appended and
    the length reported is ``size + len(src)``.
    """
    _require_non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)