"""Building new strings from existing ones: splitting, slicing, joining,
trimming and applying a function to every character."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, List, Optional


def _text(s: str, name: str = "s") -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")
    return s


def _count(n: int, name: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty words.

    A string that is empty or holds only separators gives an empty list.
    """
    text = _text(s)
    if not isinstance(sep, str):
        raise TypeError(f"sep must be a str, got {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A ``start`` beyond the end of ``s`` gives an empty string.
    """
    text = _text(s)
    begin = _count(start, "start")
    size = _count(length, "length")
    if begin > len(text):
        return ""
    return text[begin : begin + size]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _text(s1, "s1") + _text(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _text(s)
    chars = _text(charset, "charset")
    if not chars:
        return text
    return text.strip(chars)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    text = _text(s)
    if not callable(func):
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    s: MutableSequence[Any], func: Callable[[int, Any], Optional[Any]]
) -> None:
    """Apply ``func(index, item)`` to each item of a mutable sequence in place.

    ``s`` is a list of characters or a bytearray. When ``func`` returns a
    value other than ``None`` it replaces the item at that index.
    """
    if isinstance(s, (str, bytes)) or not isinstance(s, MutableSequence):
        raise TypeError(
            f"s must be a mutable sequence, got {type(s).__name__}"
        )
    if not callable(func):
        raise TypeError("func must be callable")
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement