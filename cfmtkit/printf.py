"""Expanding a format string with the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from cfmtkit.flags import Flags, is_specifier
from cfmtkit.number_fields import format_hex, format_int, format_uint
from cfmtkit.text_fields import format_char, format_ptr, format_str


class FormatError(ValueError):
    """Raised for an unterminated conversion or a missing argument."""


def _convert(specifier: str, flags: Flags, values: Iterator[Any]) -> str:
    if specifier == "%":
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise FormatError(f"missing argument for conversion %{specifier}") from None
    if specifier == "c":
        return format_char(value, flags)
    if specifier == "s":
        return format_str(value, flags)
    if specifier == "p":
        return format_ptr(value, flags)
    if specifier in ("d", "i"):
        return format_int(value, flags)
    if specifier == "u":
        return format_uint(value, flags)
    return format_hex(value, flags, specifier)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by its formatted argument.

    The format ends at its first NUL. Characters between '%' and the
    conversion letter that are not flags, width or precision are skipped.
    Extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    text = fmt.split("\0", 1)[0]
    values = iter(args)
    pieces = []
    pos = 0
    while (start := text.find("%", pos)) >= 0:
        pieces.append(text[pos:start])
        flags = Flags()
        cur = start + 1
        while cur < len(text) and not is_specifier(text[cur]):
            flags.update(text, cur)
            cur += 1
        if cur >= len(text):
            raise FormatError(f"unterminated conversion at offset {start}")
        pieces.append(_convert(text[cur], flags, values))
        pos = cur + 1
    pieces.append(text[pos:])
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)