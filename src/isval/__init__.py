# isval/__init__.py
"""
isval - Type-checking and value-validation predicates

Every predicate is a pure function returning a bool; none of them raise.

Basic usage:

    >>> from isval import is_positive_integer, is_has_only_keys
    >>> is_positive_integer(3)
    True
    >>> is_has_only_keys({"a": 1, "b": 2}, ["a", "b"])
    True

By name (camelCase, as listed in PREDICATES):

    >>> from isval import PREDICATES, check
    >>> PREDICATES["isNonEmptyString"]("x")
    True
    >>> check("isInArray", 2, [1, 2, 3])
    True

Raising on failure:

    >>> from isval import ensure
    >>> ensure("isNonNegativeInteger", -1)
    Traceback (most recent call last):
    ...
    isval.core.errors.exceptions.PredicateFailedError: [PREDICATE_FAILED] isNonNegativeInteger failed for int

Absent values:

    >>> from isval import UNDEFINED, is_missing
    >>> is_missing(None), is_missing(UNDEFINED), is_missing(0)
    (True, True, False)
"""

from types import MappingProxyType

from .core.coerce import UNDEFINED
from .core.predicates import (
    BUILTIN_PREDICATES,
    FAMILIES,
    is_null,
    is_nan,
    is_undefined,
    is_missing,
    is_present,
    is_equal,
    is_boolean,
    is_true,
    is_false,
    is_string,
    is_empty_string,
    is_non_empty_string,
    is_number,
    is_integer,
    is_positive_integer,
    is_negative_integer,
    is_non_negative_integer,
    is_array,
    is_empty_array,
    is_non_empty_array,
    is_has_item,
    is_has_multiple_items,
    is_in_array,
    is_object,
    is_empty_object,
    is_non_empty_object,
    is_has_only_keys,
    is_date,
    is_function,
    is_construct,
)
from .core.registry import (
    PredicateSpec,
    PredicateRegistry,
    get_global_registry,
    reset_global_registry,
)
from .core.checks import check, evaluate, ensure
from .core.result import CheckResult
from .core.errors import IsvalError, PredicateFailedError
from .config import IsvalConfig, load_config

__version__ = "0.1.0"

# camelCase name -> predicate, for the built-ins
PREDICATES = MappingProxyType({name: func for name, (func, _) in BUILTIN_PREDICATES.items()})

__all__ = [
    "__version__",
    "PREDICATES",
    "FAMILIES",
    "UNDEFINED",
    # Presence
    "is_null",
    "is_nan",
    "is_undefined",
    "is_missing",
    "is_present",
    "is_equal",
    # Boolean
    "is_boolean",
    "is_true",
    "is_false",
    # String
    "is_string",
    "is_empty_string",
    "is_non_empty_string",
    # Number
    "is_number",
    "is_integer",
    "is_positive_integer",
    "is_negative_integer",
    "is_non_negative_integer",
    # Array
    "is_array",
    "is_empty_array",
    "is_non_empty_array",
    "is_has_item",
    "is_has_multiple_items",
    "is_in_array",
    # Object
    "is_object",
    "is_empty_object",
    "is_non_empty_object",
    "is_has_only_keys",
    # Date / function
    "is_date",
    "is_function",
    "is_construct",
    # Registry & checks
    "PredicateSpec",
    "PredicateRegistry",
    "get_global_registry",
    "reset_global_registry",
    "check",
    "evaluate",
    "ensure",
    "CheckResult",
    "IsvalError",
    "PredicateFailedError",
    # Config
    "IsvalConfig",
    "load_config",
]
