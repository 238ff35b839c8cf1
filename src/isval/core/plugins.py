# isval/core/plugins.py
"""
Plugin System: Load external predicates via entry_points.

Entry point group: "isval.predicates"

An entry point may load:
- a callable, registered under the entry point name (family "plugin")
- a PredicateSpec
- a list/tuple of PredicateSpec

Example plugin pyproject.toml:
```toml
[project.entry-points."isval.predicates"]
isEven = "my_plugin:is_even"
```

Plugins that fail to load are logged and skipped.
"""

from __future__ import annotations

from typing import Any, List, Optional
import importlib.metadata
import logging

from .errors import IsvalError
from .registry import PredicateRegistry, PredicateSpec, get_global_registry


PREDICATE_ENTRY_POINT_GROUP = "isval.predicates"

logger = logging.getLogger(__name__)


def _entry_points():
    return importlib.metadata.entry_points(group=PREDICATE_ENTRY_POINT_GROUP)


def _to_specs(name: str, loaded: Any) -> List[PredicateSpec]:
    if isinstance(loaded, PredicateSpec):
        return [loaded]
    if isinstance(loaded, (list, tuple)) and all(isinstance(item, PredicateSpec) for item in loaded):
        return list(loaded)
    if callable(loaded):
        return [PredicateSpec(name=name, func=loaded, family="plugin")]
    raise TypeError(f"expected a callable or PredicateSpec, got {type(loaded).__name__}")


def discover_plugin_predicates(
    failures: Optional[List[IsvalError]] = None,
) -> List[PredicateSpec]:
    """
    Discover plugin predicates via entry_points.

    Args:
        failures: If given, receives a PLUGIN_LOAD_FAILED error per
            entry point that could not be loaded

    Returns:
        List of PredicateSpec from all loadable plugins
    """
    specs: List[PredicateSpec] = []

    for ep in _entry_points():
        try:
            specs.extend(_to_specs(ep.name, ep.load()))
        except Exception as e:
            error = IsvalError.plugin_load_failed(ep.name, ep.value, e)
            logger.warning(str(error), exc_info=True)
            if failures is not None:
                failures.append(error)
            continue
        logger.info(f"Loaded plugin predicate(s) '{ep.name}' from {ep.value}")

    return specs


def load_plugins(
    registry: Optional[PredicateRegistry] = None,
    allow_override: bool = False,
) -> int:
    """
    Discover and register plugin predicates.

    Args:
        registry: Registry to register into (if None, uses global registry)
        allow_override: Let plugins replace existing predicates

    Returns:
        Number of predicates successfully registered
    """
    if registry is None:
        registry = get_global_registry()

    loaded_count = 0
    for spec in discover_plugin_predicates():
        try:
            registry.register(spec, override=allow_override)
        except IsvalError as e:
            logger.warning(f"Skipping plugin predicate '{spec.name}': {e}")
            continue
        loaded_count += 1

    return loaded_count
