"""Byte-buffer helpers with C library semantics.

Writable buffers are ``bytearray`` objects or writable ``memoryview`` slices.
Read-only arguments may be any bytes-like object. Every count is checked
against the buffers involved, so nothing is read or written out of range.
Searches return an index, or ``None`` when nothing matches.
"""

from __future__ import annotations

from typing import Optional, Union

ByteLike = Union[bytes, bytearray, memoryview]
Writable = Union[bytearray, memoryview]
ByteValue = Union[int, str, bytes]


def _byte(c: ByteValue) -> int:
    """Narrow c to an unsigned char the way C does."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (str, bytes)):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return ord(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _check_count(n: int, *buffers: ByteLike) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"n={n} exceeds the buffer length {len(buf)}")


def bzero(buf: Writable, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """A new zero-filled buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf: ByteLike, c: ByteValue, n: int) -> Optional[int]:
    """Index of the first byte equal to c among the first n bytes of buf."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: ByteLike, b: ByteLike, n: int) -> int:
    """Difference of the first pair of differing bytes in the first n, or 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Optional[Writable], src: Optional[ByteLike], n: int) -> Optional[Writable]:
    """Copy n bytes of src to the start of dest and return dest.

    With neither buffer given, nothing is copied and None comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Optional[Writable], src: Optional[ByteLike], n: int) -> Optional[Writable]:
    """Copy n bytes of src to dest, correct even when the two overlap.

    With neither buffer given, nothing is copied and None comes back.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memmove needs both a destination and a source")
    _check_count(n, dest, src)
    # Taking a snapshot first makes overlapping views safe.
    snapshot = bytes(src[:n])
    dest[:n] = snapshot
    return dest


def memset(buf: Writable, c: ByteValue, n: int) -> Writable:
    """Fill the first n bytes of buf with c and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf