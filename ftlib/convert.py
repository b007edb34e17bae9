"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _parse_leading_int(text: str) -> int:
    """Parse an optional sign and ASCII digits after leading whitespace.

    Parsing stops at the first character that is not a digit; text with no
    digits in that place yields 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def atoi(text: str) -> int:
    """Convert the leading decimal number in ``text`` to an int."""
    return _parse_leading_int(text)


def atol(text: str) -> int:
    """Convert the leading decimal number in ``text`` to an int.

    Behaves exactly like :func:`atoi`; Python integers have no width limit.
    """
    return _parse_leading_int(text)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)