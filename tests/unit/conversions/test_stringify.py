"""Unit tests for rzl_utils.conversions.stringify."""

import logging
import math
from collections import OrderedDict
from datetime import datetime

import pytest

from rzl_utils.conversions.stringify import safe_stable_stringify

# pylint: disable=magic-value-comparison


def test_keys_are_sorted_numbers_first():
    """Numeric-looking keys come first, in numeric order."""
    assert safe_stable_stringify({"b": 1, "10": 2, "9": 3, "a": 4}) == '{"9":3,"10":2,"a":4,"b":1}'
    assert safe_stable_stringify({"b": 1, "a": 2}, sort_keys=False) == '{"b":1,"a":2}'


def test_non_finite_numbers_become_null():
    """NaN and infinity have no JSON form."""
    assert safe_stable_stringify({"b": 1, "a": [math.nan, 2, -math.inf]}) == '{"a":[null,2,null],"b":1}'


def test_integral_floats_serialize_as_integers():
    assert safe_stable_stringify([1.0, -0.0, 2.5]) == "[1,0,2.5]"
    assert safe_stable_stringify(1e300) == "1e+300"


def test_cycles_are_marked():
    """A value containing itself is serialized once."""
    value: dict = {"x": 1}
    value["self"] = value
    assert safe_stable_stringify(value) == '{"self":"[Circular]","x":1}'


def test_shared_references_are_not_cycles():
    """The same object may appear twice side by side."""
    shared = [1]
    assert safe_stable_stringify([shared, shared]) == "[[1],[1]]"


def test_special_values():
    """Dates, sets, mappings, bytes and functions get stable forms."""
    assert safe_stable_stringify(datetime(2024, 1, 2, 3, 4, 5)) == '"2024-01-02T03:04:05"'
    assert safe_stable_stringify({3, 1, 2}) == '{"set":[1,2,3]}'
    assert safe_stable_stringify(OrderedDict(b=1)) == '{"map":[["b",1]]}'
    assert safe_stable_stringify(b"\x01\xff") == '"01ff"'
    assert safe_stable_stringify({"f": len, "a": 1}) == '{"a":1}'
    assert safe_stable_stringify([len]) == "[null]"
    assert safe_stable_stringify(ValueError("bad")) == '{"name":"ValueError","message":"bad"}'


def test_sort_list_orders_primitives_only():
    """Primitive items are sorted, numbers before strings; others follow."""
    assert safe_stable_stringify([3, "b", 1, {"a": 1}], sort_list=True) == '[1,3,"b",{"a":1}]'


def test_pretty():
    """Pretty output is indented by two spaces."""
    assert safe_stable_stringify({"a": 1}, pretty=True) == '{\n  "a": 1\n}'


def test_options_must_be_booleans():
    """Options are validated."""
    with pytest.raises(TypeError, match="sort_list"):
        safe_stable_stringify([], sort_list="yes")  # type: ignore[arg-type]


def test_unserializable_depth_falls_back(caplog: pytest.LogCaptureFixture):
    """Values too deep to serialize yield "{}" and a warning."""
    value: list = []
    for _ in range(10_000):
        value = [value]
    with caplog.at_level(logging.WARNING, logger="rzl_utils.conversions.stringify"):
        assert safe_stable_stringify(value) == "{}"
    assert "Could not serialize" in caplog.text
