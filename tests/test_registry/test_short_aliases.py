import itertools

import pytest

from clopts.exceptions import RegistrationError
from clopts.option import ShortState
from clopts.registry import OptionRegistry


def build(declarations):
    registry = OptionRegistry(declarations)
    registry.assign_short_aliases()
    return registry


def shorts(registry):
    return {spec.name: spec.short for spec in registry}


def test_first_free_prefix_in_name_order():
    registry = build({"port": {"value": 0}, "path": "", "print": "Print it."})
    assert shorts(registry) == {
        "help": "h",
        "path": "p",
        "port": "po",
        "print": "pr",
        "version": "v",
    }


def test_explicit_shorts_reserved_before_assignment():
    registry = build({"path": "", "port": {"value": 0, "short": "p"}})
    assert registry.get("port").short == "p"
    assert registry.get("path").short == "pa"


def test_injected_shorts_reserved():
    registry = build({"host": "", "verbose": "Talk more."})
    assert registry.get("host").short == "ho"
    assert registry.get("verbose").short == "ve"


def test_full_name_never_becomes_short():
    registry = build({"x": "Single letter."})
    assert registry.get("x").short_alias.state is ShortState.NONE
    assert registry.get("x").short is None


def test_prefix_exhausted_gives_none():
    registry = build({"ab": "", "a": "", "abc": ""})
    assert registry.get("a").short is None
    assert registry.get("ab").short is None
    assert registry.get("abc").short is None


def test_prefix_equal_to_other_name_skipped():
    registry = build({"p": "", "port": {"value": 0}})
    assert registry.get("p").short is None
    assert registry.get("port").short == "po"


def test_explicit_none_kept():
    registry = build({"port": {"value": 0, "short": None}})
    assert registry.get("port").short_alias.state is ShortState.NONE


def test_all_aliases_resolved():
    registry = build({"alpha": "", "beta": "", "gamma": {"value": "", "short": None}})
    assert all(spec.short_alias.is_resolved for spec in registry)


def test_duplicate_explicit_short():
    with pytest.raises(RegistrationError, match="Duplicate value 'x' for short option"):
        build({"a": {"short": "x"}, "b": {"short": "x"}})


def test_duplicate_with_injected_short():
    with pytest.raises(RegistrationError, match="Duplicate value 'h'"):
        build({"host": {"value": "", "short": "h"}})


def test_explicit_short_equal_to_other_name():
    with pytest.raises(RegistrationError, match="duplicates option name"):
        build({"port": {"value": 0, "short": "p"}, "p": "Another option."})


def test_aliases_unique_and_distinct_from_names():
    names = ["a", "ab", "abc", "b", "ba", "help", "hello", "verbose", "port", "p"]
    registry = build({name: "" for name in names})
    specs = list(registry)
    for first, second in itertools.permutations(specs, 2):
        if first.short is not None:
            assert first.short != second.short
            assert first.short != second.name
