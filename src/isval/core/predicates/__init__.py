# isval/core/predicates/__init__.py
"""
Built-in predicates.

Each family lives in its own module; BUILTIN_PREDICATES lists them all
under their public camelCase names, in family order.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from .presence import (
    is_null,
    is_nan,
    is_undefined,
    is_missing,
    is_present,
    is_equal,
)
from .boolean import is_boolean, is_true, is_false
from .string import is_string, is_empty_string, is_non_empty_string
from .number import (
    is_number,
    is_integer,
    is_positive_integer,
    is_negative_integer,
    is_non_negative_integer,
)
from .array import (
    is_array,
    is_empty_array,
    is_non_empty_array,
    is_has_item,
    is_has_multiple_items,
    is_in_array,
)
from .obj import is_object, is_empty_object, is_non_empty_object, is_has_only_keys
from .date import is_date
from .function import is_function, is_construct


# name -> (function, family)
BUILTIN_PREDICATES: Dict[str, Tuple[Callable[..., bool], str]] = {
    "isNull": (is_null, "presence"),
    "isNaN": (is_nan, "presence"),
    "isUndefined": (is_undefined, "presence"),
    "isMissing": (is_missing, "presence"),
    "isPresent": (is_present, "presence"),
    "isEqual": (is_equal, "presence"),
    "isBoolean": (is_boolean, "boolean"),
    "isTrue": (is_true, "boolean"),
    "isFalse": (is_false, "boolean"),
    "isString": (is_string, "string"),
    "isEmptyString": (is_empty_string, "string"),
    "isNonEmptyString": (is_non_empty_string, "string"),
    "isNumber": (is_number, "number"),
    "isInteger": (is_integer, "number"),
    "isPositiveInteger": (is_positive_integer, "number"),
    "isNegativeInteger": (is_negative_integer, "number"),
    "isNonNegativeInteger": (is_non_negative_integer, "number"),
    "isArray": (is_array, "array"),
    "isEmptyArray": (is_empty_array, "array"),
    "isNonEmptyArray": (is_non_empty_array, "array"),
    "isHasItem": (is_has_item, "array"),
    "isHasMultipleItems": (is_has_multiple_items, "array"),
    "isInArray": (is_in_array, "array"),
    "isObject": (is_object, "object"),
    "isEmptyObject": (is_empty_object, "object"),
    "isNonEmptyObject": (is_non_empty_object, "object"),
    "isHasOnlyKeys": (is_has_only_keys, "object"),
    "isDate": (is_date, "date"),
    "isFunction": (is_function, "function"),
    "isConstruct": (is_construct, "function"),
}

FAMILIES: Tuple[str, ...] = (
    "presence",
    "boolean",
    "string",
    "number",
    "array",
    "object",
    "date",
    "function",
)

__all__ = [
    "BUILTIN_PREDICATES",
    "FAMILIES",
    "is_null",
    "is_nan",
    "is_undefined",
    "is_missing",
    "is_present",
    "is_equal",
    "is_boolean",
    "is_true",
    "is_false",
    "is_string",
    "is_empty_string",
    "is_non_empty_string",
    "is_number",
    "is_integer",
    "is_positive_integer",
    "is_negative_integer",
    "is_non_negative_integer",
    "is_array",
    "is_empty_array",
    "is_non_empty_array",
    "is_has_item",
    "is_has_multiple_items",
    "is_in_array",
    "is_object",
    "is_empty_object",
    "is_non_empty_object",
    "is_has_only_keys",
    "is_date",
    "is_function",
    "is_construct",
]
