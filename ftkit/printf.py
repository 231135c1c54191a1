"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions.

Integers follow C's 32-bit int and unsigned int rules: ``%d`` and ``%i``
reject values outside the int range, and ``%u``, ``%x`` and ``%X`` reduce
their argument modulo 2**32 the way a conversion to unsigned int does.
Unknown conversions print nothing and consume no argument.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from ftkit.numbers import itoa

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFF_FFFF
_POINTER_MASK = 0xFFFF_FFFF_FFFF_FFFF
_MISSING = object()


def to_base(n: int, digits: str) -> str:
    """Render a non-negative integer using digits as the digit alphabet."""
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError("to_base only renders non-negative numbers")
    base = len(digits)
    out = []
    while True:
        n, rest = divmod(n, base)
        out.append(digits[rest])
        if n == 0:
            break
    return "".join(reversed(out))


def _as_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {len(value)} characters")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + to_base(_as_int(value, "p") & _POINTER_MASK, LOWER_HEX)


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{conversion}")
    return value


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion in ("d", "i"):
        return itoa(_as_int(_next_arg(args, conversion), conversion))
    if conversion == "u":
        return str(_as_int(_next_arg(args, conversion), conversion) & _UINT_MASK)
    if conversion == "x":
        return to_base(_as_int(_next_arg(args, conversion), conversion) & _UINT_MASK, LOWER_HEX)
    if conversion == "X":
        return to_base(_as_int(_next_arg(args, conversion), conversion) & _UINT_MASK, UPPER_HEX)
    if conversion == "s":
        return _string(_next_arg(args, conversion))
    if conversion == "c":
        return _char(_next_arg(args, conversion))
    if conversion == "p":
        return _pointer(_next_arg(args, conversion))
    return ""


def format(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    if fmt is None:
        raise TypeError("format string must not be None")
    pieces = []
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        pieces.append(_convert(conversion, arguments))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = format(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)