# isval/core/predicates/array.py
"""
Array predicates.

Arrays are lists and tuples. Strings, bytes, sets and mappings are not.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..coerce import is_sequence_kind
from .presence import is_equal, is_present


def is_array(val: Any) -> bool:
    return is_present(val) and is_sequence_kind(val)


def is_empty_array(val: Any) -> bool:
    return is_array(val) and is_equal(len(val), 0)


def is_non_empty_array(val: Any) -> bool:
    return is_array(val) and len(val) > 0


def is_has_item(val: Any, count: Any = 1) -> bool:
    """
    Check whether the value is an array of exactly ``count`` items.

    ``count`` is compared strictly, so ``"1"`` or ``True`` never match.
    """
    return is_array(val) and is_equal(len(val), count)


def is_has_multiple_items(val: Any) -> bool:
    return is_array(val) and len(val) > 1


def is_in_array(val: Any, keys: Sequence[Any]) -> bool:
    """
    Check whether the value occurs in ``keys``.

    Args:
        val: Value to look for (must be present)
        keys: Array to search; anything else yields False

    Returns:
        True when some item of ``keys`` is strictly equal to ``val``
    """
    return (
        is_array(keys)
        and is_present(val)
        and any(is_equal(val, key) for key in keys)
    )
