#!/usr/bin/env python3
"""

"""
##-- imports
from __future__ import annotations

import logging as logmod
##-- end imports
logging = logmod.root

import pytest

from argconvert import errors
from argconvert.registry import ParamRegistry
from argconvert.structs import ParamSpec

class Point:

    def __init__(self, x:int, y:int):
        self.x = x
        self.y = y

    @classmethod
    def from_string(cls, arg:str) -> Point:
        x, y = arg.split(",")
        return cls(int(x), int(y))

def to_tuple(arg:str) -> tuple:
    return tuple(arg.split(":"))

@pytest.fixture(scope="function")
def registry():
    return (ParamRegistry()
            (ParamSpec.positional("FILES", 0).set_max(0))
            (ParamSpec.keyword(["--count", "-n"], int))
            (ParamSpec.keyword("--at", type=Point).set_max(2))
            (ParamSpec.keyword("--pair", to_tuple))
            (ParamSpec.keyword("--empty", float))
            (ParamSpec.flag("v"))
            (ParamSpec.flag(["--quiet"])))

class TestGetOne:

    def test_str(self, registry):
        registry.scan(["cmd", "a.txt", "b.txt"])
        assert(registry.get_one("FILES") == "a.txt")
        assert(registry.get_one("FILES", str) == "a.txt")

    def test_int(self, registry):
        registry.scan(["cmd", "-n", "3"])
        assert(registry.get_one("--count", int) == 3)
        assert(registry.get_one("-n", int) == 3)

    def test_from_string_type(self, registry):
        registry.scan(["cmd", "--at", "1,2", "3,4"])
        point = registry.get_one("--at", Point)
        assert((point.x, point.y) == (1, 2))

    def test_annotated_converter(self, registry):
        registry.scan(["cmd", "--pair", "a:b"])
        assert(registry.get_one("--pair", tuple) == ("a", "b"))

    def test_unknown_name(self, registry):
        registry.scan(["cmd"])
        with pytest.raises(errors.UnknownParameterName):
            registry.get_one("--nope", int)

    def test_flag(self, registry):
        registry.scan(["cmd", "-v"])
        with pytest.raises(errors.InvalidFlagConversion):
            registry.get_one("-v", bool)

    def test_unfilled(self, registry):
        registry.scan(["cmd"])
        with pytest.raises(errors.UnfilledParameter):
            registry.get_one("--empty", float)

    def test_mismatch(self, registry):
        registry.scan(["cmd", "-n", "3"])
        with pytest.raises(errors.MismatchedParameterType):
            registry.get_one("--count", str)

    def test_mismatch_before_unfilled(self, registry):
        registry.scan(["cmd"])
        with pytest.raises(errors.MismatchedParameterType):
            registry.get_one("--empty", int)

    def test_converter_errors_propagate(self, registry):
        registry.scan(["cmd", "-n", "three"])
        with pytest.raises(ValueError):
            registry.get_one("-n", int)

    def test_conversion_is_lazy(self, mocker):
        converter = mocker.Mock(return_value=42)
        registry  = ParamRegistry()(ParamSpec.keyword("--num", converter, type=int))
        registry.scan(["cmd", "--num", "7"])
        converter.assert_not_called()
        assert(registry.get_one("--num", int) == 42)
        converter.assert_called_once_with("7")

class TestGetAll:

    def test_all(self, registry):
        registry.scan(["cmd", "a", "b", "c"])
        assert(registry.get_all("FILES") == ["a", "b", "c"])

    def test_typed(self, registry):
        registry.scan(["cmd", "--at", "1,2", "3,4"])
        points = registry.get_all("--at", Point)
        assert([(p.x, p.y) for p in points] == [(1, 2), (3, 4)])

    def test_empty_is_not_an_error(self, registry):
        registry.scan(["cmd"])
        assert(registry.get_all("--empty", float) == [])

    def test_flag(self, registry):
        registry.scan(["cmd"])
        with pytest.raises(errors.InvalidFlagConversion):
            registry.get_all("--quiet", bool)

    def test_mismatch(self, registry):
        registry.scan(["cmd"])
        with pytest.raises(errors.MismatchedParameterType):
            registry.get_all("--at", str)

    def test_unknown(self, registry):
        with pytest.raises(errors.UnknownParameterName):
            registry.get_all("--nope")

class TestIsSet:

    def test_set(self, registry):
        registry.scan(["cmd", "-v"])
        assert(registry.is_set("v"))
        assert(registry.is_set("-v"))
        assert(not registry.is_set("--quiet"))

    def test_before_any_scan(self, registry):
        assert(not registry.is_set("v"))

    def test_not_a_flag(self, registry):
        with pytest.raises(errors.NoFlagWithName):
            registry.is_set("--count")

    def test_unknown(self, registry):
        with pytest.raises(errors.UnknownParameterName):
            registry.is_set("x")

class TestBoolParameters:

    @pytest.fixture(scope="function")
    def registry(self):
        return (ParamRegistry()
                (ParamSpec.keyword("--on", type=bool))
                (ParamSpec.keyword("--off", bool)))

    @pytest.mark.parametrize("val", ["false", "False", "FALSE", "0"])
    def test_false_words(self, registry, val):
        registry.scan(["cmd", "--on", val, "--off", val])
        assert(registry.get_one("--on", bool) is False)
        assert(registry.get_one("--off", bool) is False)

    @pytest.mark.parametrize("val", ["true", "True", "TRUE", "1"])
    def test_true_words(self, registry, val):
        registry.scan(["cmd", "--on", val])
        assert(registry.get_one("--on", bool) is True)

    def test_other_words_fail(self, registry):
        registry.scan(["cmd", "--on", "yes"])
        with pytest.raises(errors.UnconvertibleValue):
            registry.get_one("--on", bool)

    def test_from_toml(self, registry):
        registry.scan_toml('"--on" = false\n"--off" = true')
        assert(registry.get_one("--on", bool) is False)
        assert(registry.get_one("--off", bool) is True)

class TestRawAccess:

    def test_has_argument(self, registry):
        registry.scan(["cmd", "-n", "3"])
        assert(registry.has_argument("-n"))
        assert(not registry.has_argument("--at"))

    def test_arguments_is_a_copy(self, registry):
        registry.scan(["cmd", "a"])
        registry.arguments("FILES").append("b")
        assert(registry.arguments("FILES") == ["a"])
