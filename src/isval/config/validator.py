# isval/config/validator.py
"""
Configuration Validator

Validates configuration for illegal/misleading combinations.
Returns structured issues with level (warn/error), path, message, hint.
"""

from __future__ import annotations

from typing import List, Literal, TYPE_CHECKING
from dataclasses import dataclass

from .sections import LOG_LEVELS

if TYPE_CHECKING:
    from .loader import IsvalConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "plugins.allow_override"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: "IsvalConfig") -> List[ConfigIssue]:
    """
    Validate configuration for illegal/misleading combinations.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    # Plugins: allow_override without enabled (warning)
    if not config.plugins.enabled and config.plugins.allow_override:
        issues.append(ConfigIssue(
            level="warn",
            path="plugins.allow_override",
            message="allow_override=true has no effect when enabled=false (plugins not loaded)",
            hint="Set plugins.enabled=true to load entry-point predicates",
        ))

    # Logging: unknown level (error)
    level = config.logging.level
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        issues.append(ConfigIssue(
            level="error",
            path="logging.level",
            message=f"Unknown logging level: {level!r}",
            hint=f"Use one of: {', '.join(LOG_LEVELS)}",
        ))

    # Types: booleans must be booleans (error)
    for path, value in (
        ("registry.snake_case_aliases", config.registry.snake_case_aliases),
        ("plugins.enabled", config.plugins.enabled),
        ("plugins.allow_override", config.plugins.allow_override),
    ):
        if not isinstance(value, bool):
            issues.append(ConfigIssue(
                level="error",
                path=path,
                message=f"Expected true/false, got {value!r}",
            ))

    return issues
