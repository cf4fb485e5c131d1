"""Conversion flags of a format directive and their parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

SPECIFIERS = "cspdiuxX%"
_DIGITS = "0123456789"


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    """Read decimal digits from ``pos``; return the value and the first position past them."""
    value = 0
    while pos < len(fmt) and fmt[pos] in _DIGITS:
        value = value * 10 + _DIGITS.index(fmt[pos])
        pos += 1
    return value, pos


@dataclass
class Flags:
    """Flags, minimum field width and precision of one conversion.

    ``precision`` is None when the directive gives none.
    """

    minus: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    zero: bool = False
    width: int = 0
    precision: Optional[int] = None

    def reset(self) -> None:
        """Restore every field to its default."""
        self.minus = False
        self.plus = False
        self.space = False
        self.hash = False
        self.zero = False
        self.width = 0
        self.precision = None

    def update(self, fmt: str, pos: int) -> None:
        """Fold the directive character at ``fmt[pos]`` into these flags.

        A digit that starts the width consumes the whole number, and a
        '.' directly after it starts the precision. A '0' counts as the
        zero flag only before any width or precision has been read.
        """
        ch = fmt[pos]
        if ch == "-":
            self.minus = True
        elif ch == "+":
            self.plus = True
        elif ch == " ":
            self.space = True
        elif ch == "#":
            self.hash = True

        fresh = self.width == 0 and self.precision is None
        if fresh and ch == "0":
            self.zero = True
        elif fresh and ch in "123456789":
            self.width, pos = _read_number(fmt, pos)

        if self.precision is None and pos < len(fmt) and fmt[pos] == ".":
            following = pos + 1
            if following < len(fmt) and fmt[following] in _DIGITS:
                self.precision, _ = _read_number(fmt, following)
            else:
                self.precision = 0


def is_specifier(c: str) -> bool:
    """Return True if ``c`` is one of the supported conversion characters."""
    return isinstance(c, str) and len(c) == 1 and c in SPECIFIERS