# isval/core/predicates/string.py
from __future__ import annotations

from typing import Any

from .presence import is_equal, is_present


def is_string(val: Any) -> bool:
    """Check whether the value is a str"""
    return is_present(val) and isinstance(val, str)


def is_empty_string(val: Any) -> bool:
    """Check whether the value is a str with no characters"""
    return is_string(val) and is_equal(len(val), 0)


def is_non_empty_string(val: Any) -> bool:
    """Check whether the value is a str with at least one character"""
    return is_string(val) and len(val) > 0
