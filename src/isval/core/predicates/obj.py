# isval/core/predicates/obj.py
"""
Object predicates.

An object is any present value that is not a bool, number, str, array
or callable: mappings, sets, dates, bytes, modules and plain instances.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..coerce import is_numeric_kind, own_keys
from .array import is_array
from .presence import is_equal, is_present


def is_object(val: Any) -> bool:
    return (
        is_present(val)
        and not isinstance(val, (bool, str))
        and not is_numeric_kind(val)
        and not callable(val)
        and not is_array(val)
    )


def is_empty_object(val: Any) -> bool:
    """Check whether the value is an object without own keys"""
    if is_object(val):
        return is_equal(len(own_keys(val)), 0)
    return False


def is_non_empty_object(val: Any) -> bool:
    """
    Negation of ``is_empty_object``.

    Note this is also True for values that are not objects at all.
    """
    return not is_empty_object(val)


def _contains_key(keys: Sequence[Any], key: Any) -> bool:
    return any(is_equal(key, candidate) for candidate in keys)


def is_has_only_keys(val: Any, keys: Sequence[Any]) -> bool:
    """
    Check whether the object's own keys are exactly ``keys``.

    Args:
        val: Object to inspect
        keys: Expected keys (an array)

    Returns:
        True when both sides hold the same keys and the same number of
        entries; duplicates in ``keys`` therefore never match.
    """
    if is_object(val) and is_array(keys):
        obj_keys = own_keys(val)
        if not is_equal(len(obj_keys), len(keys)):
            return False
        keys_in_obj = [key for key in keys if _contains_key(obj_keys, key)]
        obj_in_keys = [key for key in obj_keys if _contains_key(keys, key)]
        return (
            is_equal(len(keys_in_obj), len(obj_keys))
            and is_equal(len(obj_in_keys), len(obj_keys))
        )
    return False
