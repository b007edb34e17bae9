"""Byte-buffer operations: filling, searching, comparing, copying and sizing.

Buffers are bytes-like objects. Functions that write take a mutable buffer
(a ``bytearray`` or a writable ``memoryview``), change it in place and
return it. Counts larger than the buffers involved raise ``ValueError``.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _count(n: int, name: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def _view(buf: Buffer, name: str) -> memoryview:
    try:
        view = memoryview(buf)
    except TypeError:
        raise TypeError(
            f"{name} must be bytes-like, got {type(buf).__name__}"
        ) from None
    return view.cast("B") if view.format != "B" or view.ndim != 1 else view


def _writable(buf: MutableBuffer, name: str) -> memoryview:
    view = _view(buf, name)
    if view.readonly:
        raise TypeError(f"{name} must be a writable buffer")
    return view


def _within(view: memoryview, n: int, name: str) -> None:
    if n > len(view):
        raise ValueError(
            f"n ({n}) is larger than {name} ({len(view)} bytes)"
        )


def _byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    return value & 0xFF


def memset(buf: MutableBuffer, value: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    view = _writable(buf, "buf")
    count = _count(n)
    _within(view, count, "buf")
    view[:count] = bytes([_byte(value)]) * count
    return buf


def bzero(buf: MutableBuffer, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return memset(buf, 0, n)


def memchr(buf: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of ``value`` in the first ``n`` bytes, or ``None``."""
    view = _view(buf, "buf")
    count = _count(n)
    _within(view, count, "buf")
    index = bytes(view[:count]).find(_byte(value))
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned bytes.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    left = _view(a, "a")
    right = _view(b, "b")
    count = _count(n)
    _within(left, count, "a")
    _within(right, count, "b")
    for x, y in zip(left[:count], right[:count]):
        if x != y:
            return x - y
    return 0


def _copy(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    target = _writable(dst, "dst")
    source = _view(src, "src")
    count = _count(n)
    _within(target, count, "dst")
    _within(source, count, "src")
    if count:
        # Taking a snapshot first keeps overlapping regions intact.
        target[:count] = bytes(source[:count])
    return dst


def memcpy(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    return _copy(dst, src, n)


def memmove(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dst``; the regions may overlap."""
    return _copy(dst, src, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises ``OverflowError`` when the total size cannot be represented.
    """
    elements = _count(count, "count")
    width = _count(size, "size")
    if elements and width > sys.maxsize // elements:
        raise OverflowError(
            f"{elements} elements of {width} bytes exceed the addressable size"
        )
    return bytearray(elements * width)


def realloc(buf: Optional[Buffer], new_size: int) -> Optional[bytearray]:
    """Return a new buffer of ``new_size`` bytes holding the start of ``buf``.

    With no ``buf`` a fresh zero-filled buffer is returned. A ``new_size``
    of 0 releases the buffer and returns ``None``. Bytes beyond the old
    contents are zero.
    """
    size = _count(new_size, "new_size")
    if buf is None:
        return bytearray(size)
    old = _view(buf, "buf")
    if size == 0:
        return None
    result = bytearray(size)
    keep = min(len(old), size)
    result[:keep] = old[:keep]
    return result