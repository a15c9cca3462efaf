"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import IO, Any, Iterator

_DIGITS = "0123456789abcdef"
_MISSING = object()


def _wrap_signed32(value: int) -> int:
    return (value + (1 << 31)) % (1 << 32) - (1 << 31)


def _hex(value: int, upper: bool) -> str:
    digits = []
    while True:
        value, rem = divmod(value, 16)
        digits.append(_DIGITS[rem])
        if not value:
            break
    text = "".join(reversed(digits))
    return text.upper() if upper else text


def _pointer_value(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value % (1 << 64)
    return id(value) % (1 << 64)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        return ""
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return "0x" + _hex(_pointer_value(value), upper=False)
    if spec in "di":
        return str(_wrap_signed32(int(value)))
    unsigned = int(value) % (1 << 32)
    if spec == "u":
        return str(unsigned)
    return _hex(unsigned, upper=spec == "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Expand a format string and return the result.

    Unknown conversions and a trailing '%' produce no output.
    """
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), arguments))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: IO[str] | None = None) -> int:
    """Write the expanded format to stream (stdout by default); return the character count."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)