# isval/core/predicates/number.py
"""
Numeric predicates.

A number is any real that is not a bool. Infinities are numbers but
not integers; NaN is neither.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

from ..coerce import is_numeric_kind, to_number
from .presence import is_nan, is_present


def is_number(val: Any) -> bool:
    return is_present(val) and is_numeric_kind(val) and not is_nan(val)


def is_integer(val: Any) -> bool:
    if not is_number(val):
        return False
    if isinstance(val, numbers.Integral):
        return True
    number = to_number(val)
    return math.isfinite(number) and number.is_integer()


def is_positive_integer(val: Any) -> bool:
    return is_integer(val) and val > 0


def is_negative_integer(val: Any) -> bool:
    return is_integer(val) and val < 0


def is_non_negative_integer(val: Any) -> bool:
    return is_integer(val) and val >= 0
