# isval/core/coerce.py
"""
Value model shared by the predicates.

Python has no separate "undefined" value, no strict-equality operator and
no implicit numeric coercion, so this module defines them once:

- UNDEFINED: the absent-value sentinel (distinct from None)
- strict_equals(): equality without cross-kind coercion
- to_number(): numeric coercion (NaN when the value has no numeric reading)
- own_keys(): keys that belong directly to a value
- to_time_value(): epoch milliseconds a date built from the value would hold

Nothing here raises for any input.
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, List


class _UndefinedType:
    """Singleton type of UNDEFINED."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_UndefinedType, ())


UNDEFINED = _UndefinedType()

NAN = float("nan")

# Largest time value a date can hold (100,000,000 days in ms)
MAX_TIME_VALUE = 8.64e15

_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_RADIX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")

# Layouts tried after ISO 8601 and RFC 2822
_DATE_LAYOUTS = (
    "%Y",
    "%Y-%m",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a %b %d %Y",
    "%a %b %d %Y %H:%M:%S",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


# ---- kind helpers ----

def is_missing_value(val: Any) -> bool:
    return val is None or val is UNDEFINED


def is_numeric_kind(val: Any) -> bool:
    """Numbers are reals that are not booleans."""
    return isinstance(val, numbers.Real) and not isinstance(val, bool)


def is_sequence_kind(val: Any) -> bool:
    return isinstance(val, (list, tuple))


# ---- equality ----

def strict_equals(a: Any, b: Any) -> bool:
    """
    Equality without coercion.

    Numbers compare by value across numeric types (NaN equals nothing),
    strings and booleans compare by value within their own kind, and
    every other pair compares by identity.
    """
    if is_numeric_kind(a) and is_numeric_kind(b):
        try:
            return bool(a == b)
        except Exception:
            return False
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, bool) and isinstance(b, bool):
        return a is b
    return a is b


# ---- string form ----

def _number_to_string(val: Any) -> str:
    number = to_number(val)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if isinstance(val, numbers.Integral):
        return str(int(val))
    if number.is_integer():
        return str(int(number))
    return repr(number)


def to_primitive_string(val: Any, _seen: Any = None) -> str:
    """String form used when a sequence is read as a primitive."""
    if isinstance(val, str):
        return val
    if isinstance(val, bool):
        return "true" if val else "false"
    if is_numeric_kind(val):
        return _number_to_string(val)
    if val is None:
        return "null"
    if val is UNDEFINED:
        return "undefined"
    if is_sequence_kind(val):
        seen = _seen if _seen is not None else set()
        if id(val) in seen:
            return ""
        seen.add(id(val))
        parts = []
        for item in val:
            if is_missing_value(item):
                parts.append("")
            else:
                parts.append(to_primitive_string(item, seen))
        seen.discard(id(val))
        return ",".join(parts)
    if isinstance(val, (date, datetime)):
        return val.isoformat()
    if callable(val):
        return f"function {getattr(val, '__name__', '')}"
    return "[object Object]"


# ---- numeric coercion ----

def string_to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if _RADIX_LITERAL.fullmatch(text):
        return _real_to_float(int(text, 0))
    if _DECIMAL_LITERAL.fullmatch(text):
        if text.lstrip("+-") == "Infinity":
            return -math.inf if text.startswith("-") else math.inf
        try:
            return float(text)
        except ValueError:
            return NAN
    return NAN


def _real_to_float(val: Any) -> float:
    try:
        return float(val)
    except OverflowError:
        return math.inf if val > 0 else -math.inf
    except (TypeError, ValueError):
        return NAN


def date_to_time_value(val: date) -> float:
    if isinstance(val, datetime):
        moment = val
    else:
        moment = datetime(val.year, val.month, val.day, tzinfo=timezone.utc)
    try:
        return moment.timestamp() * 1000.0
    except (OverflowError, OSError, ValueError):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return (moment - _EPOCH).total_seconds() * 1000.0


def to_number(val: Any) -> float:
    """
    Numeric reading of any value.

    Returns NaN when the value has none; never raises.
    """
    if val is UNDEFINED:
        return NAN
    if val is None:
        return 0.0
    if isinstance(val, bool):
        return 1.0 if val else 0.0
    if is_numeric_kind(val):
        return _real_to_float(val)
    if isinstance(val, str):
        return string_to_number(val)
    if is_sequence_kind(val):
        return string_to_number(to_primitive_string(val))
    if isinstance(val, date):
        return date_to_time_value(val)
    if hasattr(type(val), "__float__"):
        return _real_to_float(val)
    return NAN


# ---- keys ----

def own_keys(val: Any) -> List[Any]:
    """
    Keys that belong directly to a value.

    Mappings report all their keys (non-string keys included). Other
    objects report their instance attributes, from ``__dict__`` and
    populated ``__slots__``.
    """
    if isinstance(val, Mapping):
        try:
            return list(val.keys())
        except Exception:
            return []

    keys: List[Any] = []
    try:
        attrs = object.__getattribute__(val, "__dict__")
    except AttributeError:
        attrs = None
    if isinstance(attrs, Mapping):
        keys.extend(attrs.keys())

    for klass in type(val).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__") or slot in keys:
                continue
            try:
                object.__getattribute__(val, slot)
            except AttributeError:
                continue
            keys.append(slot)
    return keys


# ---- dates ----

def _parse_iso(text: str):
    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(candidate)
    except (ValueError, OverflowError):
        return None


def _parse_rfc2822(text: str):
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None


def _parse_layouts(text: str):
    for layout in _DATE_LAYOUTS:
        try:
            return datetime.strptime(text, layout)
        except (ValueError, OverflowError):
            continue
    return None


def parse_date_string(text: str) -> float:
    """Epoch milliseconds for a date string, NaN if it is not one."""
    text = text.strip()
    if not text:
        return NAN
    for parser in (_parse_iso, _parse_rfc2822, _parse_layouts):
        moment = parser(text)
        if moment is not None:
            return date_to_time_value(moment)
    return NAN


def time_clip(value: float) -> float:
    if math.isnan(value) or math.isinf(value) or abs(value) > MAX_TIME_VALUE:
        return NAN
    return value


def to_time_value(val: Any) -> float:
    """
    Time value of a date constructed from ``val``.

    Strings (and sequences, through their string form) are parsed; dates
    keep their own instant; everything else goes through ``to_number``.
    """
    if isinstance(val, date):
        return time_clip(date_to_time_value(val))
    if isinstance(val, str):
        return time_clip(parse_date_string(val))
    if is_sequence_kind(val):
        return time_clip(parse_date_string(to_primitive_string(val)))
    if val is UNDEFINED or val is None or isinstance(val, bool) or is_numeric_kind(val):
        return time_clip(to_number(val))
    if hasattr(type(val), "__float__"):
        return time_clip(to_number(val))
    return NAN
