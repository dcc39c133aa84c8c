"""
numeric.py — Number helpers for statement amounts.

Booleans are never amounts even though bool subclasses int.
"""

from __future__ import annotations

import math
from typing import Any, Optional


def is_number(value: Any) -> bool:
    """
    True for finite int/float values, False for bool, None, strings, NaN, inf.

    Ints too large to convert to a float are not usable amounts either.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_out_of_range(value: Any) -> bool:
    """True for numeric values that are not finite (NaN, inf, oversized ints)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and not is_number(value)


def as_number(value: Any) -> Optional[float]:
    """Return value if it is a usable amount, else None."""
    return value if is_number(value) else None


def type_name(value: Any) -> str:
    """JSON-flavoured type name used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
