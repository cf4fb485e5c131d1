"""Formatting of character, string and pointer conversions."""

from __future__ import annotations

from typing import Optional

from cfmtkit.flags import Flags
from cfmtkit.radix import HEX_LOWER, to_base

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _pad(text: str, flags: Flags) -> str:
    """Pad ``text`` with spaces to the field width, on the side the flags ask."""
    if flags.minus:
        return text.ljust(flags.width)
    return text.rjust(flags.width)


def format_char(c: str | int, flags: Flags) -> str:
    """Format one character, given as a string or a code, in its field."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return _pad(ch, flags)


def format_str(s: Optional[str], flags: Flags) -> str:
    """Format a string, cut to the precision and padded to the width.

    The string ends at its first NUL. None prints as "(null)", or as
    nothing at all when a precision below 6 would cut it.
    """
    if s is None:
        if flags.precision is None or flags.precision > 5:
            return _pad(_NULL_STRING, flags)
        return " " * flags.width
    text = s.split("\0", 1)[0]
    if flags.precision is not None:
        text = text[: flags.precision]
    return _pad(text, flags)


def format_ptr(address: Optional[int], flags: Flags) -> str:
    """Format an address as "0x" and lowercase hex, or "(nil)" for a null one.

    The result is laid out like a string conversion, so a precision cuts it.
    """
    if address is None or address == 0:
        return format_str(_NULL_POINTER, flags)
    return format_str("0x" + to_base(address, HEX_LOWER), flags)