from types import MappingProxyType

import pytest

from coreopts.matches import Matches
from coreopts.parser import OptionDescriptor
from coreopts.parser.engine import RawMatches
from coreopts.resolver import NameResolver


@pytest.fixture
def resolver():
    return NameResolver.from_descriptors(
        [
            OptionDescriptor("v", "verbose"),
            OptionDescriptor("o", "output", arity="required"),
            OptionDescriptor("I", "include", arity="repeated"),
            OptionDescriptor("x", ""),
        ]
    )


@pytest.fixture
def matches(resolver):
    raw = RawMatches(
        occurrences={"verbose": 1, "output": 1, "include": 2, "x": 1},
        values={"output": ["out.txt"], "include": ["a", "b"], "ARGS": ["in.txt"]},
    )
    return Matches.from_raw(raw, resolver, "ARGS")


def test_free_split_off(matches):
    assert matches.free == ("in.txt",)
    assert "ARGS" not in matches.values
    assert not matches.is_present("ARGS")


def test_is_present_by_any_name(matches):
    assert matches.is_present("v")
    assert matches.is_present("verbose")
    assert matches.is_present("x")
    assert not matches.is_present("missing")
    assert not matches.is_present("z")


def test_any_present(matches):
    assert matches.any_present(["missing", "v"])
    assert not matches.any_present(["missing", "z"])
    assert not matches.any_present([])


def test_value_of(matches):
    assert matches.value_of("o") == "out.txt"
    assert matches.value_of("output") == "out.txt"
    assert matches.value_of("I") == "a"
    assert matches.value_of("v") is None
    assert matches.value_of("missing") is None


def test_values_of(matches):
    assert matches.values_of("I") == ["a", "b"]
    assert matches.values_of("include") == ["a", "b"]
    assert matches.values_of("v") == []
    assert matches.values_of("missing") == []


def test_matches_owns_its_copy(resolver):
    raw = RawMatches(occurrences={"include": 1}, values={"include": ["a"]})
    matches = Matches.from_raw(raw, resolver)
    raw.values["include"].append("b")
    raw.occurrences["verbose"] = 1
    assert matches.values_of("include") == ["a"]
    assert not matches.is_present("verbose")


def test_matches_is_immutable(matches):
    with pytest.raises(AttributeError):
        matches.free = ()
    with pytest.raises(TypeError):
        matches.occurrences["verbose"] = 2  # type: ignore[index]
    values = matches.values_of("include")
    values.append("c")
    assert matches.values_of("include") == ["a", "b"]


def test_queries_are_idempotent(matches):
    first = (matches.is_present("v"), matches.value_of("o"), matches.values_of("I"))
    second = (matches.is_present("v"), matches.value_of("o"), matches.values_of("I"))
    assert first == second


def test_empty_matches():
    matches = Matches()
    assert matches.free == ()
    assert not matches.is_present("v")
    assert matches.value_of("v") is None
    assert isinstance(matches.occurrences, MappingProxyType)
