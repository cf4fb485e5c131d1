"""Rendering non-negative integers in an arbitrary base."""

from __future__ import annotations

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


def to_base(nbr: int, digits: str) -> str:
    """Return ``nbr`` written with ``digits``; the base is ``len(digits)``."""
    if isinstance(nbr, bool) or not isinstance(nbr, int):
        raise TypeError(f"expected an integer, got {type(nbr).__name__}")
    if nbr < 0:
        raise ValueError(f"expected a non-negative integer, got {nbr}")
    base = len(digits)
    if base < 2:
        raise ValueError(f"a base needs at least two digits, got {digits!r}")
    out = []
    while True:
        nbr, rem = divmod(nbr, base)
        out.append(digits[rem])
        if not nbr:
            break
    return "".join(reversed(out))