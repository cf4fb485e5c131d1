"""Bounded string copying, searching, comparison and slicing helpers.

Searches return an index into the string, or None when nothing is found.
A NUL character is treated as the end of the string wherever the C string
conventions these helpers follow would treat it so.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _codes_until_nul(s: str) -> Iterator[int]:
    """Yield the code of each character of ``s``, then a terminating 0."""
    for ch in s:
        code = ord(ch)
        if code == 0:
            break
        yield code
    yield 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and the length of ``src``, the length the copy
    would have had with enough room. A size of 0 copies nothing.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` so the result fits a buffer of ``size``.

    Returns the new text and the length the full concatenation would have
    had. When ``size`` does not exceed ``len(dst)``, ``dst`` is returned
    unchanged and the reported length is ``size + len(src)``.
    """
    _check_size("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns a negative number, zero or a positive number: the difference
    of the first differing character codes, with the end of a string
    counting as code 0.
    """
    _check_size("n", n)
    for a, b in islice(zip(_codes_until_nul(s1), _codes_until_nul(s2)), n):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    for value in (s1, s2):
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``.

    An empty ``charset`` leaves ``s`` unchanged.
    """
    if not charset:
        return s
    return s.strip(charset)