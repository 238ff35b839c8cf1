# isval/core/predicates/function.py
"""
Callable predicates.

Construction means calling a class. Any other callable is "not a
constructor"; a class whose construction fails for another reason
(missing arguments, abstract methods, SystemExit, ...) still counts as
constructible. Only KeyboardInterrupt escapes.
"""

from __future__ import annotations

from typing import Any, Final

from ..coerce import safe_str
from .presence import is_present


NOT_A_CONSTRUCTOR: Final[str] = "is not a constructor"


def is_function(val: Any) -> bool:
    return is_present(val) and callable(val)


def _callable_name(val: Any) -> str:
    name = getattr(val, "__qualname__", None) or getattr(val, "__name__", None)
    return name if isinstance(name, str) else type(val).__name__


def _construct(val: Any) -> Any:
    if not isinstance(val, type):
        raise TypeError(f"{_callable_name(val)} {NOT_A_CONSTRUCTOR}")
    return val()


def is_construct(val: Any) -> bool:
    result = is_function(val)
    if result:
        try:
            _construct(val)
            result = True
        except KeyboardInterrupt:
            raise
        except BaseException as err:
            result = NOT_A_CONSTRUCTOR not in safe_str(err)
    return result
