"""Formatting of signed, unsigned and hexadecimal integer conversions.

Values are taken as 32-bit integers. Signed conversions wrap to the
signed range and unsigned ones to the unsigned range.
"""

from __future__ import annotations

from cfmtkit.flags import Flags
from cfmtkit.radix import DECIMAL, HEX_LOWER, HEX_UPPER, to_base

_MASK32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _require_int(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return n


def _as_int32(n: int) -> int:
    n = _require_int(n) & _MASK32
    return n - (_MASK32 + 1) if n & _SIGN_BIT else n


def _as_uint32(n: int) -> int:
    return _require_int(n) & _MASK32


def _layout(prefix: str, digits: str, flags: Flags) -> str:
    """Lay out ``prefix`` and ``digits`` under the width, precision and flags.

    The prefix (a sign or "0x") counts towards the precision, and zeros
    from the precision or the zero flag go between prefix and digits.
    """
    length = len(prefix) + len(digits)
    width = flags.width
    precision = None if flags.precision is None else flags.precision + len(prefix)

    if precision is not None and precision < width and length < width:
        precision = max(precision, length)
        body = prefix + "0" * (precision - length) + digits
        return body.ljust(width) if flags.minus else body.rjust(width)
    if precision is not None:
        return prefix + "0" * (precision - length) + digits
    if flags.zero and not flags.minus:
        return prefix + "0" * (width - length) + digits
    body = prefix + digits
    return body.ljust(width) if flags.minus else body.rjust(width)


def format_int(n: int, flags: Flags) -> str:
    """Format a signed decimal conversion (%d, %i).

    Zero with an explicit precision prints no digits. A '+' or ' ' flag
    puts that character in front of a non-negative value.
    """
    value = _as_int32(n)
    if value == 0 and flags.precision is not None:
        digits = ""
    else:
        digits = to_base(abs(value), DECIMAL)
    if value < 0:
        sign = "-"
    elif flags.plus:
        sign = "+"
    elif flags.space:
        sign = " "
    else:
        sign = ""
    return _layout(sign, digits, flags)


def format_uint(n: int, flags: Flags) -> str:
    """Format an unsigned decimal conversion (%u).

    Zero with an explicit precision prints no digits.
    """
    value = _as_uint32(n)
    if value == 0 and flags.precision is not None:
        digits = ""
    else:
        digits = to_base(value, DECIMAL)
    return _layout("", digits, flags)


def format_hex(n: int, flags: Flags, specifier: str) -> str:
    """Format a hexadecimal conversion; ``specifier`` is 'x' or 'X'.

    The '#' flag adds "0x" or "0X" to a non-zero value. Zero with an
    explicit precision prints no digits.
    """
    if specifier not in ("x", "X"):
        raise ValueError(f"hexadecimal specifier must be 'x' or 'X', got {specifier!r}")
    value = _as_uint32(n)
    if value == 0 and flags.precision is not None:
        digits = ""
    else:
        digits = to_base(value, HEX_LOWER if specifier == "x" else HEX_UPPER)
    prefix = "0" + specifier if flags.hash and value != 0 else ""
    return _layout(prefix, digits, flags)