"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ftkit.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character; standard output when no stream is given."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as is."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit integer in decimal."""
    put_str(itoa(n), stream)