# isval/core/__init__.py
"""
Core components: value model, predicates, registry and checks API.
"""

from .coerce import UNDEFINED, strict_equals, to_number, own_keys, to_time_value
from .registry import (
    PredicateSpec,
    PredicateRegistry,
    get_global_registry,
    set_global_registry,
    reset_global_registry,
)
from .bootstrap import build_registry, default_registry, register_builtin_predicates
from .checks import check, evaluate, ensure
from .result import CheckResult
from .plugins import load_plugins, discover_plugin_predicates, PREDICATE_ENTRY_POINT_GROUP
from .errors import IsvalError, PredicateFailedError

__all__ = [
    "UNDEFINED",
    "strict_equals",
    "to_number",
    "own_keys",
    "to_time_value",
    "PredicateSpec",
    "PredicateRegistry",
    "get_global_registry",
    "set_global_registry",
    "reset_global_registry",
    "build_registry",
    "default_registry",
    "register_builtin_predicates",
    "check",
    "evaluate",
    "ensure",
    "CheckResult",
    "load_plugins",
    "discover_plugin_predicates",
    "PREDICATE_ENTRY_POINT_GROUP",
    "IsvalError",
    "PredicateFailedError",
]
