# isval/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"

# registry
UNKNOWN_PREDICATE: Final[str] = "UNKNOWN_PREDICATE"
DUPLICATE_PREDICATE: Final[str] = "DUPLICATE_PREDICATE"

# checks
PREDICATE_FAILED: Final[str] = "PREDICATE_FAILED"

# plugins
PLUGIN_LOAD_FAILED: Final[str] = "PLUGIN_LOAD_FAILED"


# ---- semantic groups (internal helpers) ----

REGISTRY_CODES: Final[set[str]] = {
    UNKNOWN_PREDICATE,
    DUPLICATE_PREDICATE,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    PREDICATE_FAILED,
    PLUGIN_LOAD_FAILED,
} | REGISTRY_CODES
