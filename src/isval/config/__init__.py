# isval/config/__init__.py
"""
isval Configuration

Design principles:
1. YAML is input parameters, code has defaults (YAML can be deleted)
2. Sections are frozen dataclasses; loading builds new instances
"""

from .sections import (
    SectionConfig,
    RegistryConfig,
    PluginsConfig,
    LoggingConfig,
    LOG_LEVELS,
)
from .loader import IsvalConfig, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "SectionConfig",
    "RegistryConfig",
    "PluginsConfig",
    "LoggingConfig",
    "LOG_LEVELS",
    "IsvalConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
