# isval/core/predicates/date.py
from __future__ import annotations

import math
from datetime import date
from typing import Any

from ..coerce import to_time_value
from .presence import is_nan, is_present


def is_date(val: Any) -> bool:
    """
    Check whether the value reads as a date.

    Deliberately permissive: a value passes when a date built from it is
    valid, OR when it has a numeric reading, OR when it already is a date.
    So ``0``, ``"42"``, ``True`` and ``""`` all pass.
    """
    if not is_present(val):
        return False
    return (
        not math.isnan(to_time_value(val))
        or not is_nan(val)
        or isinstance(val, date)
    )
