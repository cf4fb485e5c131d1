"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code.
"""

from __future__ import annotations

from typing import overload

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code of ``c``, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def is_alpha(c: str | int) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Return True for a 7-bit value (0 to 127)."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """Return True for a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c):
    """Convert an ASCII lowercase letter to uppercase; leave others unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c):
    """Convert an ASCII uppercase letter to lowercase; leave others unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code