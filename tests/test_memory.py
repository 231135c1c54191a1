import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\0\0\0def")


def test_bzero_zero_count_changes_nothing():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == bytearray(b"xyz")


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_calloc_empty():
    assert calloc(0, 8) == bytearray()


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    assert memchr(b"hello", "l", 5) == 2


def test_memchr_respects_limit():
    assert memchr(b"hello", "o", 4) is None


def test_memchr_narrows_int():
    assert memchr(b"a\x01b", 0x101, 3) == 1


def test_memchr_finds_nul():
    assert memchr(b"ab\0cd", 0, 5) == 2


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", "a", 3)


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_past_nul():
    assert memcmp(b"a\0x", b"a\0y", 3) < 0


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(5)
    result = memcpy(dest, b"hello", 3)
    assert result is dest
    assert dest == bytearray(b"hel\0\0")


def test_memcpy_both_missing():
    assert memcpy(None, None, 4) is None


def test_memcpy_one_missing():
    with pytest.raises(TypeError):
        memcpy(bytearray(2), None, 1)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    target = view[2:]
    result = memmove(target, view[:4], 4)
    assert result is target
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    target = view[:4]
    result = memmove(target, view[2:], 4)
    assert result is target
    assert bytes(result) == b"cdef"
    assert buf == bytearray(b"cdefef")


def test_memmove_count_checked():
    with pytest.raises(ValueError):
        memmove(bytearray(2), b"abc", 3)


def test_memset_fills_and_returns():
    buf = bytearray(b"....")
    result = memset(buf, "x", 2)
    assert result is buf
    assert buf == bytearray(b"xx..")


def test_memset_narrows_int():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_memcpy_then_memcmp_round_trip():
    src = bytes(range(32))
    dest = calloc(32, 1)
    memcpy(dest, src, 32)
    assert memcmp(dest, src, 32) == 0