import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.output import (
    print_error,
    putchar_fd,
    putendl_fd,
    putnbr_fd,
    putstr_fd,
)


def _capture(write):
    """Run ``write(fd)`` against a pipe; return its result and the bytes sent."""
    read_fd, write_fd = os.pipe()
    try:
        result = write(write_fd)
    finally:
        os.close(write_fd)
    chunks = []
    with os.fdopen(read_fd, "rb") as reader:
        chunks.append(reader.read())
    return result, b"".join(chunks)


def test_putchar_writes_one_character():
    count, data = _capture(lambda fd: putchar_fd("A", fd))
    assert data == b"A"
    assert count == 1


def test_putchar_accepts_int_byte():
    count, data = _capture(lambda fd: putchar_fd(ord("z"), fd))
    assert data == b"z"
    assert count == 1


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putchar_rejects_other_types():
    with pytest.raises(TypeError):
        putchar_fd(1.5, 1)


def test_putstr_writes_text_and_counts():
    count, data = _capture(lambda fd: putstr_fd("hello", fd))
    assert data == b"hello"
    assert count == len(b"hello")


def test_putstr_empty_writes_nothing():
    count, data = _capture(lambda fd: putstr_fd("", fd))
    assert data == b""
    assert count == 0


def test_putstr_rejects_none():
    with pytest.raises(TypeError):
        putstr_fd(None, 1)


def test_putendl_appends_newline():
    count, data = _capture(lambda fd: putendl_fd("line", fd))
    assert data == b"line\n"
    assert count == len(data)


def test_putendl_with_none_writes_nothing():
    count, data = _capture(lambda fd: putendl_fd(None, fd))
    assert data == b""
    assert count == 0


def test_putnbr_int_min():
    _, data = _capture(lambda fd: putnbr_fd(-2147483648, fd))
    assert data == b"-2147483648"


def test_putnbr_zero():
    _, data = _capture(lambda fd: putnbr_fd(0, fd))
    assert data == b"0"


def test_putnbr_rejects_non_int():
    with pytest.raises(TypeError):
        putnbr_fd("12", 1)


@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_putnbr_round_trip(n):
    count, data = _capture(lambda fd: putnbr_fd(n, fd))
    assert int(data.decode("ascii")) == n
    assert count == len(data)


@given(st.text(max_size=200))
def test_putstr_round_trip(text):
    count, data = _capture(lambda fd: putstr_fd(text, fd))
    assert data.decode("utf-8") == text
    assert count == len(data)


def test_print_error_writes_and_exits(capfd):
    with pytest.raises(SystemExit) as excinfo:
        print_error("Map is invalid")
    assert excinfo.value.code == 1
    captured = capfd.readouterr()
    assert captured.err == "Error\nMap is invalid\n"
    assert captured.out == ""