# isval/config/sections/log.py
"""
Logging Section Configuration
"""

from dataclasses import dataclass
from .base import SectionConfig


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig(SectionConfig):
    """
    level: Level applied to the "isval" logger
    """

    level: str = "WARNING"

    @classmethod
    def default(cls) -> "LoggingConfig":
        return cls(level="WARNING")
