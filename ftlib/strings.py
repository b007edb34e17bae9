"""Searching, comparing and bounded copying of NUL-terminated text.

The text is treated the way a C string is. It ends at its first NUL
character, or at its end if it has none, and that terminator counts as part
of the text where searches are concerned. Positions are returned as indexes
into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _c_string(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Return the character to search for.

    An int is truncated to its low byte, as a C ``char`` conversion does.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def _size(n: int, name: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``len`` of the text.
    """
    text = _c_string(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``len`` of the text.
    """
    text = _c_string(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where ``little`` first occurs within ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. A match must lie wholly within
    the first ``length`` characters; otherwise ``None`` is returned.
    """
    haystack = _c_string(big)
    needle = _c_string(little)
    limit = _size(length, "length")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first position
    where they differ, or 0 when the compared parts are equal.
    """
    a_text = _c_string(s1)
    b_text = _c_string(s2)
    limit = _size(n, "n")
    pairs = zip_longest(a_text, b_text, fillvalue=_NUL)
    for a, b in islice(pairs, limit):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the new buffer text and the length of ``src``. At most
    ``size - 1`` characters are copied; a returned length of ``size`` or
    more means the copy was truncated. With ``size`` 0, ``dst`` is
    returned unchanged.
    """
    dst_text = _c_string(dst)
    src_text = _c_string(src)
    capacity = _size(size, "size")
    if capacity == 0:
        return dst_text, len(src_text)
    return src_text[: capacity - 1], len(src_text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the new buffer text and the length it tried to create. When
    ``size`` is no greater than the length of ``dst``, nothing is appended
    and the length returned is ``len(src) + size``; otherwise it is
    ``len(dst) + len(src)``.
    """
    dst_text = _c_string(dst)
    src_text = _c_string(src)
    capacity = _size(size, "size")
    dst_len = min(len(dst_text), capacity)
    if capacity <= dst_len:
        return dst_text, len(src_text) + capacity
    room = capacity - dst_len - 1
    return dst_text + src_text[:room], dst_len + len(src_text)