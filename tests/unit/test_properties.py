"""
Cross-predicate properties checked over a shared pool of sample values.
"""

import math
from datetime import datetime
from types import SimpleNamespace

import pytest

from isval import (
    PREDICATES,
    UNDEFINED,
    is_missing,
    is_present,
    is_string,
    is_number,
    is_array,
    is_object,
    is_boolean,
    is_function,
)


class Sample:
    def __init__(self):
        self.a = 1


SAMPLES = [
    None, UNDEFINED, True, False, 0, -1, 3, 2.5, math.nan, math.inf,
    "", "a", "3", "2020-01-01", [], [1], [1, 2], (), {}, {"a": 1},
    set(), b"x", datetime(2020, 1, 1), SimpleNamespace(), Sample(), Sample, len, lambda: None,
    "Mon, 1 Jan 2020 10:00:00 +99999999999999999999",
    "1 Jan 2020 99999999999999999999:00:00 +0000",
]

TYPE_KIND_PREDICATES = [is_string, is_number, is_array, is_object, is_boolean, is_function]


@pytest.mark.parametrize("value", SAMPLES)
def test_present_is_complement_of_missing(value):
    assert is_present(value) == (not is_missing(value))


@pytest.mark.parametrize("value", [None, UNDEFINED])
def test_missing_values_fail_every_kind(value):
    for predicate in TYPE_KIND_PREDICATES:
        assert not predicate(value), predicate.__name__


@pytest.mark.parametrize("name", sorted(PREDICATES))
def test_never_raises_and_is_idempotent(name):
    predicate = PREDICATES[name]
    for value in SAMPLES:
        args = (value, SAMPLES) if name in ("isEqual", "isInArray", "isHasOnlyKeys") else (value,)
        first = predicate(*args)
        assert isinstance(first, bool)
        assert predicate(*args) == first


def test_mapping_lists_every_predicate():
    assert len(PREDICATES) == 30
    assert list(PREDICATES)[:6] == ["isNull", "isNaN", "isUndefined", "isMissing", "isPresent", "isEqual"]
    assert PREDICATES["isConstruct"].__name__ == "is_construct"
    with pytest.raises(TypeError):
        PREDICATES["isNull"] = None
