"""
Date and callable predicates.
"""

import abc
import math
from datetime import date, datetime, timezone

import pytest

from isval import UNDEFINED, is_date, is_function, is_construct


OVERSIZED_DATE_STRINGS = [
    "Mon, 1 Jan 2020 10:00:00 +99999999999999999999",
    "Mon, 99999999999999999999 Jan 2020 10:00:00 +0000",
    "Mon, 1 Jan 99999999999999999999 10:00:00 +0000",
    "1 Jan 2020 99999999999999999999:00:00 +0000",
]


class TestIsDate:
    @pytest.mark.parametrize("value", [
        datetime(2020, 1, 1, 12, 30),
        datetime.now(timezone.utc),
        date(2020, 1, 1),
        "2020-01-01",
        "2020-01-01T10:00:00Z",
        "2020-01-01T10:00:00.123+02:00",
        "Tue, 01 Nov 2022 10:00:00 GMT",
        "March 7, 2021",
        "2021/03/07",
    ])
    def test_date_values(self, value):
        assert is_date(value)

    @pytest.mark.parametrize("value", [0, "42", True, "", [], 1e20])
    def test_numeric_readings_pass(self, value):
        # any value with a numeric reading counts as a date
        assert is_date(value)

    @pytest.mark.parametrize("value", [
        None, UNDEFINED, "not a date", math.nan, {}, object(), "2020-13-45", [1, 2],
    ])
    def test_non_dates(self, value):
        assert not is_date(value)

    @pytest.mark.parametrize("value", OVERSIZED_DATE_STRINGS)
    def test_oversized_fields_are_not_dates(self, value):
        assert is_date(value) is False


class Widget:
    pass


class NeedsArgs:
    def __init__(self, a, b):
        self.a = a
        self.b = b


class Exploding:
    def __init__(self):
        raise ValueError("boom")


class Refusing:
    def __init__(self):
        raise TypeError("Refusing is not a constructor")


class Exiting:
    def __init__(self):
        raise SystemExit(1)


class Closing:
    def __init__(self):
        raise GeneratorExit("Closing is not a constructor")


class Interrupted:
    def __init__(self):
        raise KeyboardInterrupt


class Base(abc.ABC):
    @abc.abstractmethod
    def run(self):
        ...


class CallableThing:
    def __call__(self):
        return 1


def plain_function():
    return None


class TestIsFunction:
    @pytest.mark.parametrize("value", [len, plain_function, lambda: None, Widget, CallableThing(), Widget.__init__])
    def test_callables(self, value):
        assert is_function(value)

    @pytest.mark.parametrize("value", [None, UNDEFINED, 5, "len", [len], {}])
    def test_non_callables(self, value):
        assert not is_function(value)


class TestIsConstruct:
    def test_classes_construct(self):
        assert is_construct(Widget)
        assert is_construct(int)
        assert is_construct(dict)

    def test_other_callables_do_not(self):
        assert not is_construct(lambda: None)
        assert not is_construct(plain_function)
        assert not is_construct(len)
        assert not is_construct(CallableThing())

    def test_non_callables(self):
        assert not is_construct(42)
        assert not is_construct(None)
        assert not is_construct(UNDEFINED)

    def test_unrelated_failures_still_count(self):
        assert is_construct(NeedsArgs)
        assert is_construct(Exploding)
        assert is_construct(Base)

    def test_not_a_constructor_failure(self):
        assert not is_construct(Refusing)

    def test_base_exceptions_are_caught(self):
        assert is_construct(Exiting) is True
        assert is_construct(Closing) is False

    def test_keyboard_interrupt_propagates(self):
        with pytest.raises(KeyboardInterrupt):
            is_construct(Interrupted)
