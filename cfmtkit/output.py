"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from cfmtkit.convert import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code, to ``stream``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    put_str(itoa(n), stream)