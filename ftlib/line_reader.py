"""Reading a byte stream one line at a time."""

from __future__ import annotations

import os
from typing import BinaryIO, Dict, Iterator, Optional, Union

BUFFER_SIZE = 42

Source = Union[int, BinaryIO]


class LineReader:
    """Read lines of bytes from a file descriptor or a binary file object.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, bool):
            raise TypeError("source must be a file descriptor or a file object")
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
        elif not hasattr(source, "read"):
            raise TypeError("source must be a file descriptor or a file object")
        self._source = source
        self._buffer_size = buffer_size
        self._pending = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size) or b""

    def _fill(self) -> None:
        parts = [self._pending]
        try:
            while True:
                chunk = self._read_chunk()
                if not chunk:
                    break
                parts.append(chunk)
                if b"\n" in chunk:
                    break
        except OSError:
            self._pending = b""
            raise
        self._pending = b"".join(parts)

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` when nothing is left to read."""
        if b"\n" not in self._pending:
            self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        if end < 0:
            line, self._pending = self._pending, b""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd``, keeping separate state per descriptor.

    Returns ``None`` at end of input, after which the state for ``fd`` is
    dropped.
    """
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError("fd must be an int")
    if fd < 0:
        raise ValueError(f"invalid file descriptor {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line