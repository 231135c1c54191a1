"""String helpers with C library semantics.

Searches return an index rather than a pointer, or ``None`` when nothing is
found. The bounded copy helpers work on ``bytearray`` buffers that hold
NUL-terminated data. They never write past the size they are given.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[str, int]
Buffer = Union[bytearray, MutableSequence]


def _char(c: CharLike) -> str:
    """Normalise a search character the way C narrows an int to unsigned char."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a one-character string or an int, got {type(c).__name__}")


def _cstr(data: Union[bytes, bytearray, str]) -> bytes:
    """Return the bytes of data up to, not including, the first NUL."""
    if isinstance(data, str):
        data = data.encode()
    return bytes(data).split(b"\0", 1)[0]


def _is_nul(item: object) -> bool:
    return item == 0 or item == "\0" or item == b"\0"


def split(s: str, sep: str) -> List[str]:
    """Split s on the single character sep, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s; NUL matches the end of the string."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s; NUL matches the end of the string."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def _difference(a: str, b: str, limit: Optional[int]) -> int:
    stop = max(len(a), len(b)) + 1
    if limit is not None:
        stop = min(stop, limit)
    for i in range(stop):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first pair of differing characters, or 0 if equal."""
    return _difference(a, b, None)


def strncmp(a: str, b: str, n: int) -> int:
    """Like strcmp, looking at no more than n characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return _difference(a, b, n)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in the first length characters of big.

    An empty needle matches at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if a is None or b is None:
        raise TypeError("strjoin needs two strings")
    return a + b


def _check_room(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds the buffer length {len(dst)}")


def strlcpy(dst: bytearray, src: Union[bytes, bytearray, str], size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result of size or more signals truncation.
    """
    _check_room(dst, size)
    source = _cstr(src)
    if size > 0:
        count = min(len(source), size - 1)
        dst[:count] = source[:count]
        dst[count] = 0
    return len(source)


def strlcat(dst: bytearray, src: Union[bytes, bytearray, str], size: int) -> int:
    """Append src to the NUL-terminated data in dst within size bytes.

    Returns the length the full result would have had; when dst already
    holds size bytes or more, that is size plus the length of src.
    """
    _check_room(dst, size)
    source = _cstr(src)
    dest_len = len(_cstr(dst))
    if dest_len >= size:
        return size + len(source)
    count = min(len(source), size - 1 - dest_len)
    dst[dest_len:dest_len + count] = source[:count]
    dst[dest_len + count] = 0
    return dest_len + len(source)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(buf: Buffer, f: Callable[[int, object], object]) -> None:
    """Call f(index, item) on each item of buf up to the first NUL.

    A result other than None replaces the item in place.
    """
    for i, item in enumerate(list(buf)):
        if _is_nul(item):
            break
        result = f(i, item)
        if result is not None:
            buf[i] = result


def strtrim(s: str, chars: str) -> str:
    """Remove every character found in chars from both ends of s."""
    if s is None or chars is None:
        raise TypeError("strtrim needs a string and a set of characters")
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]