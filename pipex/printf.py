"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT_RANGE = 1 << 32
_INT_OFFSET = 1 << 31


def _as_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} requires an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    return (value + _INT_OFFSET) % _UINT_RANGE - _INT_OFFSET


def _unsigned32(value: int) -> int:
    return value % _UINT_RANGE


def _render_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_as_int(value, "c") % 256)


def _render_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value


def _render_pointer(value: Any) -> str:
    if value is None:
        return "0x0"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return f"0x{address:x}"


def _render(conversion: str, value: Any) -> str:
    if conversion == "c":
        return _render_char(value)
    if conversion == "s":
        return _render_string(value)
    if conversion == "p":
        return _render_pointer(value)
    if conversion in "di":
        return str(_signed32(_as_int(value, conversion)))
    if conversion == "u":
        return str(_unsigned32(_as_int(value, conversion)))
    if conversion == "x":
        return f"{_unsigned32(_as_int(value, conversion)):x}"
    if conversion == "X":
        return f"{_unsigned32(_as_int(value, conversion)):X}"
    # An unknown conversion still consumes its argument but prints nothing.
    return ""


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format string ends with an incomplete conversion")
        if conversion == "%":
            yield "%"
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{conversion}") from None
        yield _render(conversion, value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)