"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse(text: str, bits: int) -> int:
    stripped = text.lstrip(_SPACES)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    magnitude = _wrap(int("".join(digits)), bits) if digits else 0
    return _wrap(magnitude * sign, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does, as a 32-bit int.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Text without digits yields 0; values beyond the
    32-bit range wrap around.
    """
    return _parse(text, 32)


def atol(text: str) -> int:
    """Like atoi, but for a 64-bit long."""
    return _parse(text, 64)


def itoa(n: int) -> str:
    """Render a 32-bit integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(int(n))