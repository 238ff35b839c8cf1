# isval/core/result.py
"""
CheckResult: structured outcome of running a named predicate.

Core fields:
- predicate: camelCase name that was run
- passed: the predicate's boolean outcome
- message: human-readable explanation
- evidence: value type and extra arguments, for logs and error reports
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class CheckResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    predicate: str = Field(description="Predicate name (e.g. isPositiveInteger)")
    passed: bool = Field(description="Outcome of the predicate")
    message: str = Field(default="", description="Human-readable explanation")
    evidence: Dict[str, Any] = Field(
        default_factory=dict,
        description="Value type and extra arguments",
    )

    @classmethod
    def success(cls, predicate: str, evidence: Dict[str, Any]) -> "CheckResult":
        return cls(
            predicate=predicate,
            passed=True,
            message=f"{predicate} passed",
            evidence=evidence,
        )

    @classmethod
    def failure(cls, predicate: str, evidence: Dict[str, Any]) -> "CheckResult":
        value_type = evidence.get("value_type", "value")
        return cls(
            predicate=predicate,
            passed=False,
            message=f"{predicate} failed for {value_type}",
            evidence=evidence,
        )

    def __bool__(self) -> bool:
        return self.passed
