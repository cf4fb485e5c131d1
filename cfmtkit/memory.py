"""Byte-buffer filling, copying, searching and comparison.

Buffers are read as any bytes-like object and written as ``bytearray``.
Byte values are reduced modulo 256, as an unsigned char would be.
"""

from __future__ import annotations

import sys

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    """Reject a negative count or one running past the end of a buffer."""
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` and return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``dest`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source bytes were
    copied aside first. Returns ``dest``.
    """
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for name, offset in (("dest_offset", dest_offset), ("src_offset", src_offset)):
        if offset < 0 or offset + n > len(dest):
            raise ValueError(
                f"{name} {offset} with count {n} falls outside a buffer of length {len(dest)}"
            )
    dest[dest_offset : dest_offset + n] = bytes(dest[src_offset : src_offset + n])
    return dest


def memchr(buf: bytes | bytearray | memoryview, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first ``n``."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns the difference of the first differing bytes, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises OverflowError when the total size cannot be represented.
    """
    if nmemb < 0 or size < 0:
        raise ValueError(f"element count and size must not be negative, got {nmemb}, {size}")
    if size and nmemb > _SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes exceed the addressable size")
    return bytearray(nmemb * size)