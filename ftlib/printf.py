"""A small printf: formats ``%c %s %p %d %i %u %x %X %%`` conversions.

Integer conversions use 32-bit C semantics. ``%d`` and ``%i`` wrap to a
signed 32-bit value. ``%u``, ``%x`` and ``%X`` wrap to an unsigned 32-bit
value.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT32 = 1 << 32
_INT32_MIN = -(1 << 31)
_POINTER_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for an unknown conversion, a lone '%' or a missing argument."""


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{spec} expects an int, got {type(value).__name__}"
        )
    return value


def _in_base(n: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    if address == 0:
        return "(nil)"
    return "0x" + _in_base(address, HEX_LOWER)


def _signed(value: Any) -> str:
    n = _require_int(value, "d")
    wrapped = (n - _INT32_MIN) % _UINT32 + _INT32_MIN
    return str(wrapped)


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") % _UINT32)


def _hex_lower(value: Any) -> str:
    return _in_base(_require_int(value, "x") % _UINT32, HEX_LOWER)


def _hex_upper(value: Any) -> str:
    return _in_base(_require_int(value, "X") % _UINT32, HEX_UPPER)


_HANDLERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _HANDLERS.get(spec)
    if handler is None:
        raise FormatError(f"unknown conversion '%{spec}'")
    try:
        value = next(values)
    except StopIteration:
        raise FormatError(f"missing argument for '%{spec}'") from None
    return handler(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    Arguments left over after the last conversion are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, got {type(fmt).__name__}")
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Format like :func:`format_string`, write to standard output and
    return the number of characters written; ``None`` writes nothing."""
    if fmt is None:
        return 0
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)