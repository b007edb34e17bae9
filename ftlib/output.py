"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional, Union

from ftlib.convert import itoa

CharLike = Union[str, int]


def _write_all(fd: int, data: bytes) -> int:
    """Write all of ``data`` to ``fd`` and return the number of bytes written."""
    view = memoryview(data)
    written = 0
    while written < len(view):
        written += os.write(fd, view[written:])
    return written


def _encode_char(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, int) and not isinstance(c, bool):
        return bytes([c & 0xFF])
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def putchar_fd(c: CharLike, fd: int) -> int:
    """Write one character to ``fd`` and return the number of bytes written.

    An int is written as a single byte, truncated to its low eight bits.
    """
    return _write_all(fd, _encode_char(c))


def putstr_fd(s: str, fd: int) -> int:
    """Write ``s`` to ``fd`` and return the number of bytes written."""
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, got {type(s).__name__}")
    return _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> int:
    """Write ``s`` and a newline to ``fd``; with ``None`` nothing is written.

    Returns the number of bytes written.
    """
    if s is None:
        return 0
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of ``n`` to ``fd``; return the bytes written."""
    return putstr_fd(itoa(n), fd)


def print_error(message: str) -> NoReturn:
    """Write ``Error``, then ``message``, each on its own line, to standard
    error and exit with status 1."""
    sys.stdout.flush()
    sys.stderr.flush()
    error_fd = 2
    putstr_fd("Error\n", error_fd)
    putstr_fd(message, error_fd)
    putstr_fd("\n", error_fd)
    sys.exit(1)