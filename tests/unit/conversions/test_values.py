"""Unit tests for rzl_utils.conversions.values."""

import math
import re
from collections import OrderedDict
from datetime import UTC, date, datetime
from decimal import Decimal

import numpy as np
import pytest

from rzl_utils.conversions.values import to_number_deep, to_string_deep

# pylint: disable=magic-value-comparison

NESTED = {
    "id": "42",
    "price": 9.5,
    "flags": [True, None, "x"],
    "meta": {"note": "n/a", "empty": {}},
    "scores": ["1", "2.5", math.nan, math.inf],
}


class TestToNumberDeep:
    """Numbers out of nested structures."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("12", 12),
            (" -3.5 ", -3.5),
            ("1e3", 1000.0),
            (7, 7),
            (2**60, 2**60),
            (Decimal("1.25"), 1.25),
            ("12px", None),
            ("", None),
            ("1e999", None),
            (math.nan, None),
            (-math.inf, None),
            (True, None),
            (None, None),
            (object(), None),
        ],
    )
    def test_scalars(self, value, expected):
        """Numbers and numeric strings survive; everything else is dropped."""
        assert to_number_deep(value) == expected

    def test_nested_defaults(self):
        """Without options, containers left empty are kept."""
        assert to_number_deep(NESTED) == {
            "id": 42,
            "price": 9.5,
            "flags": [],
            "meta": {"empty": {}},
            "scores": [1, 2.5],
        }

    def test_remove_empty_objects(self):
        """Dicts left empty disappear, parents included."""
        assert to_number_deep(NESTED, remove_empty_objects=True) == {
            "id": 42,
            "price": 9.5,
            "flags": [],
            "scores": [1, 2.5],
        }

    def test_remove_empty_arrays(self):
        """Lists left empty disappear."""
        assert to_number_deep(NESTED, remove_empty_arrays=True) == {
            "id": 42,
            "price": 9.5,
            "meta": {"empty": {}},
            "scores": [1, 2.5],
        }

    def test_remove_both(self):
        """Both options together prune every empty branch."""
        value = {"a": [{"b": ["x"]}], "c": {"d": [None]}, "e": "5"}
        assert to_number_deep(
            value, remove_empty_objects=True, remove_empty_arrays=True
        ) == {"e": 5}

    def test_empty_root(self):
        """An empty root dict stays a dict; an empty root list goes away."""
        assert to_number_deep({"a": "x"}, remove_empty_objects=True) == {}
        assert to_number_deep(["x"], remove_empty_arrays=True) is None
        assert to_number_deep(["x"]) == []

    def test_other_containers_become_lists(self):
        """Tuples, sets, bytes and arrays become lists; mappings become pairs."""
        assert to_number_deep(("1", "a", 2)) == [1, 2]
        assert to_number_deep({"3"}) == [3]
        assert to_number_deep(b"\x01\x02") == [1, 2]
        assert to_number_deep(np.array([[1, 2], [3, 4]])) == [[1, 2], [3, 4]]
        assert to_number_deep(OrderedDict([("1", "2"), ("a", "3")])) == [[1, 2]]

    def test_dates_become_epoch_milliseconds(self):
        """Naive dates read as UTC."""
        assert to_number_deep(date(1970, 1, 2)) == 86_400_000
        assert to_number_deep(datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)) == 1000

    def test_cycles_are_dropped(self):
        """A list that contains itself does not recurse forever."""
        value: list = ["1"]
        value.append(value)
        assert to_number_deep(value) == [1]

    @pytest.mark.parametrize("option", ["remove_empty_objects", "remove_empty_arrays"])
    def test_rejects_non_boolean_options(self, option):
        """Options must be booleans."""
        with pytest.raises(TypeError, match=f"`{option}` must be of type `boolean`"):
            to_number_deep({}, **{option: "yes"})


class TestToStringDeep:
    """Strings out of nested structures."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "1"),
            (2.5, "2.5"),
            (True, "True"),
            ("a", "a"),
            (Decimal("1.10"), "1.10"),
            (date(2024, 5, 6), "2024-05-06"),
            (re.compile(r"\d+"), r"\d+"),
            (math.nan, None),
            (math.inf, None),
            (None, None),
        ],
    )
    def test_scalars(self, value, expected):
        """Scalars are rendered as text; missing and non-finite values are dropped."""
        assert to_string_deep(value) == expected

    def test_nested_defaults(self):
        """Without options, containers left empty are kept."""
        value = {"a": [1, None, {"b": None}], "c": {"d": math.nan}, "e": []}
        assert to_string_deep(value) == {"a": ["1", {}], "c": {}, "e": []}

    def test_nested_with_options(self):
        """Both options prune the same branches as for numbers."""
        value = {"a": [1, None, {"b": None}], "c": {"d": math.nan}, "e": []}
        assert to_string_deep(value, remove_empty_objects=True) == {"a": ["1"], "e": []}
        assert to_string_deep(value, remove_empty_arrays=True) == {
            "a": ["1", {}],
            "c": {},
        }
        assert to_string_deep(
            value, remove_empty_objects=True, remove_empty_arrays=True
        ) == {"a": ["1"]}

    def test_other_containers_become_lists(self):
        """Bytes become lists of digit strings; mappings become pairs."""
        assert to_string_deep(b"\x07") == ["7"]
        assert to_string_deep(np.array([1.5])) == ["1.5"]
        assert to_string_deep(OrderedDict([(1, True), (2, None)])) == [["1", "True"]]

    def test_rejects_non_boolean_options(self):
        """Options must be booleans."""
        with pytest.raises(TypeError):
            to_string_deep([], remove_empty_arrays=1)
