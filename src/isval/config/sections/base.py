# isval/config/sections/base.py
"""
Base Section Configuration

Base class for all configuration sections.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any


@dataclass(frozen=True)
class SectionConfig:
    """
    Base configuration for all sections.

    Sections are frozen; merging YAML produces a new instance.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, SectionConfig):
                result[f.name] = value.to_dict()
            elif isinstance(value, (dict, list, str, int, float, bool, type(None))):
                result[f.name] = value
            else:
                result[f.name] = str(value)
        return result

    @classmethod
    def merged(cls, default: "SectionConfig", data: Any) -> "SectionConfig":
        """Overlay YAML data on a default instance, ignoring unknown keys"""
        if not isinstance(data, dict):
            return default
        names = {f.name for f in fields(cls)}
        merged = {**default.to_dict(), **{k: v for k, v in data.items() if k in names}}
        return cls(**merged)
