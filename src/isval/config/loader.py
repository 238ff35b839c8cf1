# isval/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Library works without YAML
- Only files the caller names are read; there is no default location
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Dict, Any, List
import logging

import yaml

from .sections import RegistryConfig, PluginsConfig, LoggingConfig
from .validator import validate_config, ConfigIssue


logger = logging.getLogger(__name__)


class IsvalConfig:
    """
    Unified isval configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        registry: Optional[RegistryConfig] = None,
        plugins: Optional[PluginsConfig] = None,
        logging: Optional[LoggingConfig] = None,
    ):
        self.registry = registry or RegistryConfig.default()
        self.plugins = plugins or PluginsConfig.default()
        self.logging = logging or LoggingConfig.default()

    @classmethod
    def default(cls) -> "IsvalConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "IsvalConfig":
        """Overlay a parsed YAML document on the defaults"""
        config = cls.default()
        if not isinstance(data, dict):
            return config

        if "registry" in data:
            config.registry = RegistryConfig.merged(config.registry, data["registry"])

        if "plugins" in data:
            config.plugins = PluginsConfig.merged(config.plugins, data["plugins"])

        if "logging" in data:
            config.logging = LoggingConfig.merged(config.logging, data["logging"])

        return config

    @classmethod
    def from_yaml(cls, config_path: Path) -> "IsvalConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file

        Returns:
            IsvalConfig instance (always has code defaults as fallback)
        """
        return cls.from_dict(_load_yaml(config_path))

    def validate(self) -> List[ConfigIssue]:
        return validate_config(self)

    def apply_logging(self) -> None:
        """Apply logging.level to the "isval" logger"""
        level = self.logging.level
        if isinstance(level, str) and hasattr(logging, level.upper()):
            logging.getLogger("isval").setLevel(getattr(logging, level.upper()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "registry": self.registry.to_dict(),
            "plugins": self.plugins.to_dict(),
            "logging": self.logging.to_dict(),
        }


def _load_yaml(config_path: Path) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path)
    if not path.exists():
        return None  # No YAML found, use code defaults

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        # Unreadable YAML, use code defaults
        logger.warning(f"Failed to read config {path}: {e}")
        return None


def load_config(config_path: Path) -> IsvalConfig:
    """
    Load isval configuration.

    Args:
        config_path: Path to YAML file

    Returns:
        IsvalConfig instance (always has code defaults)

    Note:
        - If YAML is not found or invalid, returns code defaults
        - Issues found by validate_config() are logged, not raised
        - logging.level is applied only when the caller runs apply_logging()
    """
    config = IsvalConfig.from_yaml(config_path)
    for issue in config.validate():
        if issue.level == "error":
            logger.error(str(issue))
        else:
            logger.warning(str(issue))
    return config


__all__ = [
    "IsvalConfig",
    "load_config",
]
