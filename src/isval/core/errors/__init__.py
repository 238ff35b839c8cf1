# isval/core/errors/__init__.py
"""
Error types for isval.

Predicates never raise; these errors cover the registry and the
checks API only.

No side effects on import.
"""

from . import codes
from .exceptions import IsvalError, PredicateFailedError

__all__ = [
    "codes",
    "IsvalError",
    "PredicateFailedError",
]
