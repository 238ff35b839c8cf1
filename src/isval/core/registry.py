# isval/core/registry.py
"""
Predicate Registry: the flat name -> predicate mapping.

The registry provides:
- Predicate registration (register)
- Lookup by camelCase name or snake_case alias (get)
- Family filtering (get_by_family)
- A read-only name -> function view (as_mapping)

Design principles:
- Single source of truth for available predicates
- Built-ins and plugins go through the same register() path
- Thread-safe (uses locks for registration)
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional
import logging
import re
import threading

from .errors import IsvalError


logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """isHasOnlyKeys -> is_has_only_keys"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class PredicateSpec:
    """
    One registry entry.

    name: Public camelCase name (e.g. "isNull")
    func: The predicate itself
    family: Grouping used by get_by_family (e.g. "presence")
    alias: snake_case name; derived from func or name when omitted
    description: First docstring line when omitted
    """
    name: str
    func: Callable[..., bool]
    family: str = "custom"
    alias: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise ValueError(f"Predicate name must be a non-empty string, got: {self.name!r}")
        if not callable(self.func):
            raise ValueError(f"Predicate '{self.name}' is not callable: {self.func!r}")
        if not self.alias:
            func_name = getattr(self.func, "__name__", "")
            alias = func_name if func_name.isidentifier() else to_snake_case(self.name)
            object.__setattr__(self, "alias", alias)
        if not self.description:
            doc = (getattr(self.func, "__doc__", None) or "").strip()
            object.__setattr__(self, "description", doc.splitlines()[0] if doc else "")

    def __call__(self, *args, **kwargs) -> bool:
        return self.func(*args, **kwargs)


class PredicateRegistry:
    """
    Central registry of predicates.

    Usage:
    ```python
    registry = PredicateRegistry()
    registry.register(PredicateSpec("isEven", lambda v: v % 2 == 0, family="number"))

    registry.get("isEven")(4)        # True
    registry.get("is_even")          # same spec, via the alias
    registry.get_by_family("number")
    ```
    """

    def __init__(self, snake_case_aliases: bool = True):
        self._predicates: Dict[str, PredicateSpec] = {}
        self._aliases: Dict[str, str] = {}
        self._snake_case_aliases = snake_case_aliases
        self._lock = threading.Lock()

    def register(self, spec: PredicateSpec, override: bool = False) -> None:
        """
        Register a predicate.

        Args:
            spec: Predicate to register
            override: Replace an existing entry with the same name

        Raises:
            IsvalError: DUPLICATE_PREDICATE if the name or alias is taken
        """
        with self._lock:
            existing = self._predicates.get(spec.name)
            if existing is not None and not override:
                raise IsvalError.duplicate_predicate(spec.name, existing)

            owner = self._aliases.get(spec.alias)
            if owner is not None and owner != spec.name:
                if not override:
                    raise IsvalError.duplicate_predicate(spec.alias, self._predicates[owner])
                self._drop(owner)

            if existing is not None:
                self._drop(spec.name)

            self._predicates[spec.name] = spec
            self._aliases[spec.alias] = spec.name
            logger.debug("Registered predicate %s (%s)", spec.name, spec.family)

    def register_multiple(self, specs: List[PredicateSpec], override: bool = False) -> None:
        for spec in specs:
            self.register(spec, override=override)

    def _drop(self, name: str) -> None:
        spec = self._predicates.pop(name, None)
        if spec is not None and self._aliases.get(spec.alias) == name:
            del self._aliases[spec.alias]

    def unregister(self, name: str) -> None:
        with self._lock:
            self._drop(self._resolve(name) or name)

    def _resolve(self, name: str) -> Optional[str]:
        if name in self._predicates:
            return name
        if self._snake_case_aliases:
            return self._aliases.get(name)
        return None

    def get(self, name: str) -> Optional[PredicateSpec]:
        """
        Get a predicate by name or alias.

        Returns:
            The PredicateSpec, or None if not found
        """
        resolved = self._resolve(name)
        return self._predicates.get(resolved) if resolved else None

    def require(self, name: str) -> PredicateSpec:
        """Like get(), but raises IsvalError(UNKNOWN_PREDICATE) when missing"""
        spec = self.get(name)
        if spec is None:
            raise IsvalError.unknown_predicate(name)
        return spec

    def has(self, name: str) -> bool:
        return self._resolve(name) is not None

    def names(self) -> List[str]:
        """camelCase names in registration order"""
        return list(self._predicates)

    def list_predicates(self) -> List[PredicateSpec]:
        return list(self._predicates.values())

    def get_by_family(self, family: str) -> List[PredicateSpec]:
        return [spec for spec in self._predicates.values() if spec.family == family]

    def families(self) -> List[str]:
        seen: Dict[str, None] = {}
        for spec in self._predicates.values():
            seen.setdefault(spec.family, None)
        return list(seen)

    def as_mapping(self) -> Mapping[str, Callable[..., bool]]:
        """Read-only snapshot of name -> function"""
        return MappingProxyType({name: spec.func for name, spec in self._predicates.items()})

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        return f"PredicateRegistry({len(self)} predicates)"


# Global registry

_global_registry: Optional[PredicateRegistry] = None
_global_lock = threading.Lock()


def get_global_registry() -> PredicateRegistry:
    """
    Get the global predicate registry.

    Created on first use with the built-ins only. Nothing is read from
    disk or the environment; install a configured registry with
    set_global_registry(build_registry(load_config(path))).
    """
    global _global_registry
    if _global_registry is None:
        with _global_lock:
            if _global_registry is None:
                from .bootstrap import default_registry
                _global_registry = default_registry()
    return _global_registry


def set_global_registry(registry: PredicateRegistry) -> None:
    global _global_registry
    with _global_lock:
        _global_registry = registry


def reset_global_registry() -> None:
    """Drop the global registry (mainly for tests)"""
    global _global_registry
    with _global_lock:
        _global_registry = None
