# isval/core/predicates/presence.py
"""
Presence predicates.

Every other family is built on these: a value is "present" when it is
neither None nor UNDEFINED.
"""

from __future__ import annotations

import math
from typing import Any

from ..coerce import UNDEFINED, strict_equals, to_number


def is_null(val: Any) -> bool:
    """Check whether the value is None"""
    return val is None


def is_nan(val: Any) -> bool:
    """Check whether the numeric reading of the value is NaN"""
    return math.isnan(to_number(val))


def is_undefined(val: Any) -> bool:
    """Check whether the value is UNDEFINED"""
    return val is UNDEFINED


def is_missing(val: Any) -> bool:
    """Check whether the value is None or UNDEFINED"""
    return is_null(val) or is_undefined(val)


def is_present(val: Any) -> bool:
    """Check whether the value is neither None nor UNDEFINED"""
    return not is_missing(val)


def is_equal(val1: Any, val2: Any) -> bool:
    """
    Check whether two values are equal without coercion.

    ``1`` and ``1.0`` are equal, ``1`` and ``True`` are not, and
    containers are equal only to themselves.
    """
    return strict_equals(val1, val2)
