import sys

import pytest

from cfmtkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == bytes([ord("x")]) * 3
    assert buf[3:] == b"lo"


def test_memset_reduces_value_to_a_byte():
    assert memset(bytearray(2), -1, 2) == b"\xff\xff"


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, ord("z"), 0)
    assert buf == b"abc"


@pytest.mark.parametrize("n", [-1, 4])
def test_memset_rejects_bad_count(n):
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, n)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"cd"


def test_memcpy_copies_prefix():
    dest = bytearray(5)
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest[:3] == b"abc"
    assert dest[3:] == bytes(2)


def test_memcpy_rejects_count_past_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_overlapping_backward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_same_offset_is_noop():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 1, 1, 3) == b"abcdef"


def test_memmove_rejects_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    idx = memchr(data, ord("n"), len(data))
    assert data[idx] == ord("n")
    assert ord("n") not in data[:idx]


def test_memchr_limited_by_count():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_reduces_value_to_a_byte():
    assert memchr(b"\xff", -1, 1) == 0


def test_memcmp_equal_buffers():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_stops_at_count():
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_sign_and_antisymmetry():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abc", b"abd", 3) == -memcmp(b"abd", b"abc", 3)


def test_memcmp_compares_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert buf == bytes(12)


def test_calloc_zero_size():
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(sys.maxsize, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)