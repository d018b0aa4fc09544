"""Unit tests for rzl_utils.operations."""

import pytest

from rzl_utils.operations import (
    ObjectPath,
    find_duplicates,
    omit_keys,
    omit_keys_deep,
    remove_object_paths,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, [3], [3], 1], [1, 2, [3]]),
        ((1, 1.0, "1"), [1]),
        ([{"a": 1}, {"a": 1}, {"a": 2}], [{"a": 1}]),
        ([1, 2, 3], []),
        ([], []),
    ],
)
def test_find_duplicates(values, expected):
    """Repeated items are listed once, in first-occurrence order."""
    assert find_duplicates(values) == expected


def test_find_duplicates_requires_a_list():
    with pytest.raises(TypeError, match="First parameter"):
        find_duplicates("aab")  # type: ignore[arg-type]


class TestOmitKeys:
    """Shallow key removal."""

    def test_removes_keys(self):
        source = {"a": 1, "b": 2, "c": 3}
        assert omit_keys(source, ["a", "c", "missing"]) == {"b": 2}
        assert source == {"a": 1, "b": 2, "c": 3}

    def test_non_dict_yields_empty_dict(self):
        assert omit_keys([1, 2], ["a"]) == {}  # type: ignore[arg-type]

    def test_rejects_duplicate_keys(self):
        with pytest.raises(ValueError, match="duplicate keys detected"):
            omit_keys({"a": 1}, ["a", "a"])

    def test_rejects_non_list_keys(self):
        with pytest.raises(TypeError, match="Second parameter"):
            omit_keys({"a": 1}, "a")  # type: ignore[arg-type]


class TestOmitKeysDeep:
    """Dotted path removal."""

    def test_removes_paths_and_empty_containers(self):
        source = {"a": {"b": 1, "c": 2}, "d": [{"e": 1}]}
        assert omit_keys_deep(source, ["a.b", "d.0.e"]) == {"a": {"c": 2}}
        assert source == {"a": {"b": 1, "c": 2}, "d": [{"e": 1}]}

    def test_list_indexes_and_tuples(self):
        assert omit_keys_deep({"t": (1, 2), "u": [3, 4]}, ["t.0", "u.5"]) == {"t": [2], "u": [3, 4]}

    def test_drops_empty_containers_already_present(self):
        assert omit_keys_deep({"x": {}, "y": 1, "z": [[]]}, []) == {"y": 1}

    def test_ignores_missing_paths(self):
        assert omit_keys_deep({"a": 1}, ["a.b.c", "q"]) == {"a": 1}

    def test_rejects_duplicate_paths(self):
        with pytest.raises(ValueError, match="omit_keys_deep"):
            omit_keys_deep({"a": 1}, ("a", "a"))


class TestRemoveObjectPaths:
    """Exact and deep path removal."""

    @pytest.fixture
    def data(self):
        return {
            "user": {"password": "x", "name": "a"},
            "items": [{"id": 1, "price": 9}, {"id": 2, "price": 5}],
        }

    def test_exact_and_deep_paths(self, data):
        result = remove_object_paths(
            data, [ObjectPath("user.password"), {"key": "items.price", "deep": True}]
        )
        assert result == {"user": {"name": "a"}, "items": [{"id": 1}, {"id": 2}]}
        assert data["user"]["password"] == "x"

    def test_exact_path_through_list_index(self, data):
        result = remove_object_paths(data, [{"key": "items.0.price"}])
        assert result["items"] == [{"id": 1}, {"id": 2, "price": 5}]

    def test_in_place(self, data):
        result = remove_object_paths(data, [ObjectPath("user")], deep_clone=False)
        assert result is data
        assert "user" not in data

    @pytest.mark.parametrize("obj", [{}, [], None])
    def test_empty_or_non_dict(self, obj):
        assert remove_object_paths(obj, [ObjectPath("a")]) == {}

    @pytest.mark.parametrize(
        "paths",
        ["a", ["a"], [{"deep": True}], [{"key": 5}], [{"key": "a", "deep": "yes"}]],
    )
    def test_invalid_paths(self, data, paths):
        with pytest.raises(TypeError):
            remove_object_paths(data, paths)
