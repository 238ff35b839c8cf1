"""
Tests for entry-point predicate plugins.
"""

import logging

import pytest

from isval import is_null
from isval.config import IsvalConfig, PluginsConfig
from isval.core import PredicateSpec, default_registry
from isval.core import plugins
from isval.core.bootstrap import build_registry
from isval.core.errors import codes


class FakeEntryPoint:
    def __init__(self, name, target, value="fake_plugin:target"):
        self.name = name
        self.value = value
        self._target = target

    def load(self):
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


def is_even(val):
    return isinstance(val, int) and val % 2 == 0


def is_odd(val):
    return isinstance(val, int) and val % 2 == 1


@pytest.fixture
def entry_points(monkeypatch):
    installed = []
    monkeypatch.setattr(plugins, "_entry_points", lambda: list(installed))
    return installed


def test_group_name():
    assert plugins.PREDICATE_ENTRY_POINT_GROUP == "isval.predicates"


def test_callable_is_registered_under_entry_point_name(entry_points):
    entry_points.append(FakeEntryPoint("isEven", is_even))
    registry = default_registry()

    assert plugins.load_plugins(registry) == 1
    spec = registry.get("isEven")
    assert spec.family == "plugin"
    assert spec.alias == "is_even"
    assert spec(2)


def test_specs_and_spec_lists(entry_points):
    entry_points.append(FakeEntryPoint("one", PredicateSpec(name="isEvenNumber", func=is_even, family="number")))
    entry_points.append(FakeEntryPoint("many", [
        PredicateSpec(name="isOddNumber", func=is_odd, family="number"),
        PredicateSpec(name="isOddAgain", func=lambda v: is_odd(v), family="number"),
    ]))
    registry = default_registry()

    assert plugins.load_plugins(registry) == 3
    assert [s.name for s in registry.get_by_family("number")][-3:] == ["isEvenNumber", "isOddNumber", "isOddAgain"]


def test_broken_plugins_are_skipped(entry_points, caplog):
    entry_points.append(FakeEntryPoint("isBroken", ImportError("no module named fake_plugin")))
    entry_points.append(FakeEntryPoint("isNumberish", 42))
    entry_points.append(FakeEntryPoint("isEven", is_even))
    registry = default_registry()

    with caplog.at_level(logging.WARNING, logger="isval.core.plugins"):
        assert plugins.load_plugins(registry) == 1
    assert "isBroken" in caplog.text
    assert "isNumberish" in caplog.text
    assert registry.has("isEven")


def test_load_failures_are_reported(entry_points):
    cause = ImportError("no module named fake_plugin")
    entry_points.append(FakeEntryPoint("isBroken", cause, value="fake_plugin:is_broken"))
    entry_points.append(FakeEntryPoint("isEven", is_even))

    failures = []
    specs = plugins.discover_plugin_predicates(failures)

    assert [s.name for s in specs] == ["isEven"]
    assert len(failures) == 1
    error = failures[0]
    assert error.error_code == codes.PLUGIN_LOAD_FAILED
    assert error.details == {"name": "isBroken", "source": "fake_plugin:is_broken"}
    assert error.cause is cause
    assert not error.is_registry_error


def test_builtins_protected_unless_override(entry_points):
    entry_points.append(FakeEntryPoint("isNull", is_even))

    registry = default_registry()
    assert plugins.load_plugins(registry) == 0
    assert registry.get("isNull").func is is_null

    registry = default_registry()
    assert plugins.load_plugins(registry, allow_override=True) == 1
    assert registry.get("isNull").func is is_even


def test_build_registry_loads_plugins_when_enabled(entry_points):
    entry_points.append(FakeEntryPoint("isEven", is_even))

    disabled = build_registry(IsvalConfig())
    assert not disabled.has("isEven")

    enabled = build_registry(IsvalConfig(plugins=PluginsConfig(enabled=True)))
    assert enabled.has("isEven")
    assert len(enabled) == 31
