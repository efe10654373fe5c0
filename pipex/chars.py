"""Character classification, case mapping and byte-range helpers."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged.

    The result has the same kind (code or character) as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged.

    The result has the same kind (code or character) as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def find_byte(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``.

    ``value`` is taken modulo 256. Returns None when it does not occur.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns 0 when they agree, otherwise the difference of the first
    differing bytes. Raises ValueError when a buffer ends before ``n``
    bytes were compared and no difference was found.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    left, right = bytes(a), bytes(b)
    for offset in range(n):
        if offset >= len(left) or offset >= len(right):
            raise ValueError(f"buffers are shorter than {n} bytes")
        if left[offset] != right[offset]:
            return left[offset] - right[offset]
    return 0