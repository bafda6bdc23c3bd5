"""
utils/numbers.py

Permissive number parsing for spreadsheet cells.

Sheet cells arrive as display strings ("95", " 77.5 %", "AB", "").
A cell is read by taking the longest numeric prefix after leading whitespace,
so "95abc" -> 95 and "12.7" -> 12 for integer columns. A cell with no numeric
prefix does not raise: it yields NaN, which the wire layer renders as null.
Only ASCII digits count.
"""

import math
import re
from typing import Optional, Union

Number = Union[int, float]

_INT_RE = re.compile(r"([+-]?)(\d+)", re.ASCII)
_HEX_PREFIX_RE = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]*)", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def parse_int(text: Optional[str]) -> Number:
    """Integer prefix of ``text`` (decimal or 0x-hex), NaN when there is none."""
    if text is None:
        return math.nan
    s = str(text).lstrip()

    m = _HEX_PREFIX_RE.match(s)
    if m:
        # "0x" with no hex digits after it is not a number
        if not m.group(2):
            return math.nan
        value = int(m.group(2), 16)
        return -value if m.group(1) == "-" else value

    m = _INT_RE.match(s)
    if not m:
        return math.nan
    sign, digits = m.groups()
    try:
        value = int(digits)
    except ValueError:
        # longer than the interpreter's int/str conversion limit
        return -math.inf if sign == "-" else math.inf
    return -value if sign == "-" else value


def parse_float(text: Optional[str]) -> float:
    """Decimal-literal prefix of ``text``, NaN when there is none."""
    if text is None:
        return math.nan
    s = str(text).lstrip()
    m = _FLOAT_RE.match(s)
    if not m:
        return math.nan
    token = m.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def nan_to_none(value):
    # JSON has no NaN / Infinity
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
