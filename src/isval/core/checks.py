# isval/core/checks.py
"""
Checks API: run predicates by name.

- check(): plain bool
- evaluate(): CheckResult with evidence
- ensure(): returns the value, raises PredicateFailedError otherwise
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple
import logging

from .errors import PredicateFailedError
from .coerce import safe_str
from .registry import PredicateRegistry, PredicateSpec, get_global_registry
from .result import CheckResult


logger = logging.getLogger(__name__)


def _lookup(name: str, registry: Optional[PredicateRegistry]) -> PredicateSpec:
    if registry is None:
        registry = get_global_registry()
    return registry.require(name)


def _evidence(value: Any, params: Tuple[Any, ...]) -> Dict[str, Any]:
    evidence: Dict[str, Any] = {"value_type": type(value).__name__}
    if params:
        evidence["params"] = [safe_str(p) for p in params]
    return evidence


def check(
    name: str,
    value: Any,
    *params: Any,
    registry: Optional[PredicateRegistry] = None,
) -> bool:
    """
    Run the predicate registered under ``name``.

    Raises:
        IsvalError: UNKNOWN_PREDICATE if no such predicate exists
    """
    return bool(_lookup(name, registry)(value, *params))


def evaluate(
    name: str,
    value: Any,
    *params: Any,
    registry: Optional[PredicateRegistry] = None,
) -> CheckResult:
    spec = _lookup(name, registry)
    evidence = _evidence(value, params)
    if spec(value, *params):
        return CheckResult.success(spec.name, evidence)
    return CheckResult.failure(spec.name, evidence)


def ensure(
    name: str,
    value: Any,
    *params: Any,
    registry: Optional[PredicateRegistry] = None,
) -> Any:
    """
    Return ``value`` if the predicate accepts it.

    Example:
        >>> port = ensure("isPositiveInteger", config["port"])

    Raises:
        PredicateFailedError: carrying the failed CheckResult
        IsvalError: UNKNOWN_PREDICATE if no such predicate exists
    """
    result = evaluate(name, value, *params, registry=registry)
    if not result.passed:
        logger.debug("ensure failed: %s", result.message)
        raise PredicateFailedError(result)
    return value
