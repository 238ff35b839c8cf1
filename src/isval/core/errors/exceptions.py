# isval/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

from . import codes
from ..coerce import safe_str

if TYPE_CHECKING:
    from ..result import CheckResult


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded to UNKNOWN.
    """
    c = safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass
class IsvalError(Exception):
    """
    The one public exception type for isval.

    Predicates never raise it; it is reserved for misuse of the
    registry and checks API (unknown names, duplicate registration,
    failed ``ensure`` calls).
    """
    message: str
    error_code: str = codes.UNKNOWN
    details: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.error_code = _normalize_error_code(self.error_code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    @property
    def is_registry_error(self) -> bool:
        return self.error_code in codes.REGISTRY_CODES

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def unknown_predicate(cls, name: str) -> "IsvalError":
        return cls(
            message=f"Unknown predicate '{name}'",
            error_code=codes.UNKNOWN_PREDICATE,
            details={"name": name},
        )

    @classmethod
    def duplicate_predicate(cls, name: str, existing: Any) -> "IsvalError":
        return cls(
            message=f"Predicate '{name}' is already registered",
            error_code=codes.DUPLICATE_PREDICATE,
            details={"name": name, "existing": safe_str(existing)},
        )

    @classmethod
    def plugin_load_failed(cls, name: str, source: str, cause: BaseException) -> "IsvalError":
        return cls(
            message=f"Failed to load plugin predicate '{name}' from '{source}': {safe_str(cause)}",
            error_code=codes.PLUGIN_LOAD_FAILED,
            details={"name": name, "source": source},
            cause=cause,
        )


class PredicateFailedError(IsvalError):
    """Raised by ``ensure`` when a predicate returns False."""

    def __init__(self, result: "CheckResult"):
        super().__init__(
            message=result.message,
            error_code=codes.PREDICATE_FAILED,
            details=dict(result.evidence, predicate=result.predicate),
        )
        self.result = result
