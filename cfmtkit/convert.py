"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text with no digits
    yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and text[pos] in _DIGITS:
        result = result * 10 + _DIGITS.index(text[pos])
        pos += 1
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading '-' if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    magnitude = -n if n < 0 else n
    digits = []
    while True:
        magnitude, rem = divmod(magnitude, 10)
        digits.append(_DIGITS[rem])
        if not magnitude:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))