"""
Tests for check / evaluate / ensure.
"""

import logging

import pytest

from isval import (
    CheckResult,
    IsvalError,
    PredicateFailedError,
    check,
    ensure,
    evaluate,
    get_global_registry,
)
from isval.core import PredicateSpec, default_registry, reset_global_registry, set_global_registry
from isval.core.errors import codes


@pytest.fixture(autouse=True)
def builtin_registry():
    """Use a built-ins-only global registry for each test"""
    set_global_registry(default_registry())
    yield
    reset_global_registry()


class TestCheck:
    def test_runs_by_name(self):
        assert check("isPositiveInteger", 3)
        assert not check("isPositiveInteger", "3")
        assert check("isInArray", 2, [1, 2, 3])
        assert check("isHasItem", [1, 2], 2)

    def test_runs_by_alias(self):
        assert check("is_non_empty_string", "x")

    def test_unknown_name(self):
        with pytest.raises(IsvalError) as exc_info:
            check("isNope", 1)
        assert exc_info.value.error_code == codes.UNKNOWN_PREDICATE

    def test_explicit_registry(self):
        registry = default_registry()
        registry.register(PredicateSpec(name="isShort", func=lambda v: isinstance(v, str) and len(v) < 3))
        assert check("isShort", "ab", registry=registry)
        with pytest.raises(IsvalError):
            check("isShort", "ab")

    def test_global_registry_is_shared(self):
        get_global_registry().register(PredicateSpec(name="isZero", func=lambda v: v == 0))
        assert check("isZero", 0)


class TestEvaluate:
    def test_success(self):
        result = evaluate("isString", "a")
        assert isinstance(result, CheckResult)
        assert result.passed
        assert result
        assert result.predicate == "isString"
        assert result.message == "isString passed"
        assert result.evidence == {"value_type": "str"}

    def test_failure_reports_canonical_name(self):
        result = evaluate("is_positive_integer", "3")
        assert not result.passed
        assert not result
        assert result.predicate == "isPositiveInteger"
        assert result.message == "isPositiveInteger failed for str"

    def test_params_in_evidence(self):
        result = evaluate("isHasItem", [1], 2)
        assert not result.passed
        assert result.evidence == {"value_type": "list", "params": ["2"]}

    def test_serializes(self):
        data = evaluate("isNull", None).model_dump()
        assert data == {
            "predicate": "isNull",
            "passed": True,
            "message": "isNull passed",
            "evidence": {"value_type": "NoneType"},
        }


class TestEnsure:
    def test_returns_value(self):
        payload = {"a": 1}
        assert ensure("isHasOnlyKeys", payload, ["a"]) is payload

    def test_raises_with_result(self):
        with pytest.raises(PredicateFailedError) as exc_info:
            ensure("isNonNegativeInteger", -1)
        err = exc_info.value
        assert isinstance(err, IsvalError)
        assert err.error_code == codes.PREDICATE_FAILED
        assert err.result.predicate == "isNonNegativeInteger"
        assert err.details["predicate"] == "isNonNegativeInteger"
        assert str(err) == "[PREDICATE_FAILED] isNonNegativeInteger failed for int"


class TestGlobalRegistry:
    def test_built_lazily_from_builtins_without_io(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        (home / ".isval").mkdir(parents=True)
        (home / ".isval" / "config.yml").write_text(
            "registry:\n  snake_case_aliases: false\nlogging:\n  level: DEBUG\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.setenv("ISVAL_CONFIG", str(home / ".isval" / "config.yml"))

        def fail(*args, **kwargs):
            raise AssertionError("config file read")

        monkeypatch.setattr("isval.config.loader._load_yaml", fail)
        logger = logging.getLogger("isval")
        level_before = logger.level

        reset_global_registry()
        assert check("is_null", None)
        assert len(get_global_registry()) == 30
        assert logger.level == level_before
