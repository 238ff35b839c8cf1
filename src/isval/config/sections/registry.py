# isval/config/sections/registry.py
"""
Registry Section Configuration
"""

from dataclasses import dataclass
from .base import SectionConfig


@dataclass(frozen=True)
class RegistryConfig(SectionConfig):
    """
    snake_case_aliases: If True, predicates can also be looked up by
        their snake_case alias (is_null as well as isNull)
    """

    snake_case_aliases: bool = True

    @classmethod
    def default(cls) -> "RegistryConfig":
        return cls(snake_case_aliases=True)
