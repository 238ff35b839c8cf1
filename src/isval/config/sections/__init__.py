# isval/config/sections/__init__.py
"""
Section Configuration

Configuration for the registry, plugin loading and logging.
"""

from .base import SectionConfig
from .registry import RegistryConfig
from .plugins import PluginsConfig
from .log import LoggingConfig, LOG_LEVELS

__all__ = [
    "SectionConfig",
    "RegistryConfig",
    "PluginsConfig",
    "LoggingConfig",
    "LOG_LEVELS",
]
