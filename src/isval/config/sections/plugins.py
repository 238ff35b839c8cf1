# isval/config/sections/plugins.py
"""
Plugins Section Configuration
"""

from dataclasses import dataclass
from .base import SectionConfig


@dataclass(frozen=True)
class PluginsConfig(SectionConfig):
    """
    enabled: If True, entry-point predicates are registered when the
        global registry is built
    allow_override: If True, a plugin may replace a built-in predicate
        of the same name
    """

    enabled: bool = False
    allow_override: bool = False

    @classmethod
    def default(cls) -> "PluginsConfig":
        return cls(enabled=False, allow_override=False)
