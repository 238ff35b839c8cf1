# isval/core/predicates/boolean.py
from __future__ import annotations

from typing import Any

from .presence import is_present


def is_boolean(val: Any) -> bool:
    return is_present(val) and isinstance(val, bool)


def is_true(val: Any) -> bool:
    return is_boolean(val) and val is True


def is_false(val: Any) -> bool:
    return is_boolean(val) and val is False
