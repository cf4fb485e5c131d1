"""Splitting strings and applying per-character functions."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

_NUL = "\0"


def _separator(sep: str | int) -> str:
    """Return ``sep`` as a one-character string."""
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single separator character, got {sep!r}")
        return sep
    if isinstance(sep, int) and not isinstance(sep, bool):
        return chr(sep)
    raise TypeError(f"expected a character or an integer code, got {type(sep).__name__}")


def split(s: str, sep: str | int) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words.

    The string ends at its first NUL character.
    """
    ch = _separator(sep)
    text = s.split(_NUL, 1)[0]
    if ch == _NUL:
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` applied to each character of ``s``.

    ``f`` must return a single character.
    """

    def mapped(index: int, ch: str) -> str:
        result = f(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping function must return one character, got {result!r}")
        return result

    return "".join(mapped(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on each item of ``chars``, in place.

    A value returned by ``f`` replaces the item; None leaves it as it was.
    """
    for index, item in enumerate(chars):
        replacement = f(index, item)
        if replacement is not None:
            chars[index] = replacement