# isval/core/bootstrap.py
"""
Bootstrap: build a registry holding the built-in predicates.

Plugins are added on top when the configuration enables them.
"""

from __future__ import annotations

from typing import Optional
import logging

from .predicates import BUILTIN_PREDICATES
from .registry import PredicateRegistry, PredicateSpec


logger = logging.getLogger(__name__)


def builtin_specs():
    return [
        PredicateSpec(name=name, func=func, family=family)
        for name, (func, family) in BUILTIN_PREDICATES.items()
    ]


def register_builtin_predicates(registry: PredicateRegistry) -> None:
    registry.register_multiple(builtin_specs())
    logger.debug(f"Registered {len(BUILTIN_PREDICATES)} built-in predicates")


def build_registry(config=None) -> PredicateRegistry:
    """
    Build a registry from configuration.

    Args:
        config: IsvalConfig; code defaults when None

    Returns:
        Registry with built-ins (and plugins if plugins.enabled)
    """
    if config is None:
        from ..config import IsvalConfig
        config = IsvalConfig.default()

    registry = PredicateRegistry(snake_case_aliases=config.registry.snake_case_aliases)
    register_builtin_predicates(registry)

    if config.plugins.enabled:
        from .plugins import load_plugins
        count = load_plugins(registry, allow_override=config.plugins.allow_override)
        logger.info(f"Loaded {count} plugin predicate(s)")

    return registry


def default_registry(snake_case_aliases: Optional[bool] = True) -> PredicateRegistry:
    """Registry with built-ins only, ignoring configuration"""
    registry = PredicateRegistry(snake_case_aliases=bool(snake_case_aliases))
    register_builtin_predicates(registry)
    return registry
