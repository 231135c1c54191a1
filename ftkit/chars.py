"""Character classification and case conversion limited to the ASCII range.

Every function accepts either a one-character string or an integer code
point. Predicates return a bool. Case conversions return a value of the
same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})


def _code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 31 < _code(c) < 127


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c