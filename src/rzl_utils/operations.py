"""Structural operations on lists and dicts.

Paths are dotted strings (``"user.emails.0"``); a numeric segment indexes a
list.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass

from .assertions import assert_is_list, assert_is_string
from .conversions.stringify import safe_stable_stringify
from .kinds import SEQUENCE_KINDS, Kind, get_kind, get_precise_type
from .predicates.emptiness import is_empty_object
from .predicates.equality import is_equal

type Path = list[str]


def find_duplicates(values: list | tuple) -> list:
    """Return the items that occur more than once, in first-occurrence order.

    Items are compared with `is_equal`, so unhashable items are supported.

    Raises:
        TypeError: If ``values`` is not a list or tuple.

    Examples:
        >>> find_duplicates([1, 2, 2, [3], [3], 1])
        [1, 2, [3]]
    """
    assert_is_list(
        values,
        message=lambda current_type, valid_type: (
            f"First parameter (`values`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    duplicates: list = []
    for index, item in enumerate(values):
        if any(is_equal(item, other) for other in values[index + 1 :]):
            if not any(is_equal(item, seen) for seen in duplicates):
                duplicates.append(item)
    return duplicates


def _check_keys(keys: object, function_name: str) -> None:
    assert_is_list(
        keys,
        message=lambda current_type, valid_type: (
            f"Second parameter (`keys`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    duplicates = find_duplicates(keys)  # type: ignore[arg-type]
    if duplicates:
        raise ValueError(
            f"`{function_name}`: duplicate keys detected: {safe_stable_stringify(duplicates)}."
        )


def omit_keys(obj: dict, keys: list | tuple) -> dict:
    """Return a shallow copy of ``obj`` without ``keys``.

    Returns:
        dict: The copy; ``{}`` when ``obj`` is not a dict.

    Raises:
        TypeError: If ``keys`` is not a list or tuple.
        ValueError: If ``keys`` holds duplicates.

    Examples:
        >>> omit_keys({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'b': 2}
    """
    if get_kind(obj) is not Kind.PLAIN_OBJECT:
        return {}
    _check_keys(keys, "omit_keys")
    return {key: value for key, value in obj.items() if key not in keys}


# ============================================================================
#                              Deep path removal
# ============================================================================


def _is_container(value: object) -> bool:
    return get_kind(value) in SEQUENCE_KINDS or get_kind(value) is Kind.PLAIN_OBJECT


def _omit_at_path(obj: object, path: Path) -> None:
    """Delete the item at ``path`` in place, if the path exists."""
    current, *rest = path
    if isinstance(obj, list):
        if not current.isdigit() or int(current) >= len(obj):
            return
        if not rest:
            del obj[int(current)]
        elif _is_container(obj[int(current)]):
            _omit_at_path(obj[int(current)], rest)
    elif isinstance(obj, dict):
        if not rest:
            obj.pop(current, None)
        elif _is_container(obj.get(current)):
            _omit_at_path(obj[current], rest)


def _drop_empty_containers(obj: object) -> object:
    if isinstance(obj, list):
        cleaned = (_drop_empty_containers(item) for item in obj)
        return [item for item in cleaned if not (_is_container(item) and not item)]
    if isinstance(obj, dict):
        cleaned_items = ((key, _drop_empty_containers(value)) for key, value in obj.items())
        return {
            key: value
            for key, value in cleaned_items
            if not (_is_container(value) and not value)
        }
    return obj


def _to_mutable(value: object) -> object:
    """Deep copy ``value``, turning tuples into lists so paths can be removed."""
    if get_kind(value) in SEQUENCE_KINDS:
        return [_to_mutable(item) for item in value]  # type: ignore[union-attr]
    if get_kind(value) is Kind.PLAIN_OBJECT:
        return {key: _to_mutable(item) for key, item in value.items()}  # type: ignore[union-attr]
    return copy.deepcopy(value)


def omit_keys_deep(obj: dict, paths: list | tuple) -> dict:
    """Return a deep copy of ``obj`` without the dotted ``paths``.

    Containers left empty by the removal (and empty containers that were
    already there) are dropped afterwards.

    Raises:
        TypeError: If ``paths`` is not a list or tuple.
        ValueError: If ``paths`` holds duplicates.

    Examples:
        >>> omit_keys_deep({"a": {"b": 1, "c": 2}, "d": [{"e": 1}]}, ["a.b", "d.0.e"])
        {'a': {'c': 2}}
    """
    if get_kind(obj) is not Kind.PLAIN_OBJECT:
        return {}
    _check_keys(paths, "omit_keys_deep")
    result = _to_mutable(obj)
    for path in paths:
        _omit_at_path(result, str(path).split("."))
    return _drop_empty_containers(result)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ObjectPath:
    """A dotted key path to remove, anywhere through lists when ``deep``."""

    key: str
    deep: bool = False

    def __post_init__(self) -> None:
        assert_is_string(
            self.key,
            message=lambda current_type, valid_type: (
                f"Path `key` must be of type `{valid_type}`, but received: `{current_type}`."
            ),
        )
        if not isinstance(self.deep, bool):
            raise TypeError(
                f"Path `deep` (key: {self.key!r}) must be of type `boolean`, "
                f"but received: `{get_precise_type(self.deep)}`."
            )

    @classmethod
    def from_value(cls, value: "ObjectPath | Mapping") -> "ObjectPath":
        """Build a path from an `ObjectPath` or a ``{"key": ..., "deep": ...}`` mapping."""
        if isinstance(value, ObjectPath):
            return value
        if isinstance(value, Mapping) and "key" in value:
            return cls(value["key"], value.get("deep", False))
        raise TypeError(
            'Each path must be an `ObjectPath` or a mapping with a "key" '
            f"(and optionally a \"deep\") entry, but received: `{get_precise_type(value)}`."
        )


def _delete_exact_path(obj: object, path: Path) -> None:
    current, *rest = path
    if isinstance(obj, dict):
        if not rest:
            obj.pop(current, None)
        elif current in obj:
            _delete_exact_path(obj[current], rest)
    elif isinstance(obj, list) and current.isdigit() and int(current) < len(obj):
        if not rest:
            del obj[int(current)]
        else:
            _delete_exact_path(obj[int(current)], rest)


def _delete_nested_path(obj: object, path: Path) -> None:
    if isinstance(obj, list):
        for item in obj:
            _delete_nested_path(item, path)
        return
    if not isinstance(obj, dict):
        return
    current, *rest = path
    if not rest:
        obj.pop(current, None)
    elif current in obj:
        _delete_nested_path(obj[current], rest)


def remove_object_paths(
    obj: dict, paths: list[ObjectPath | Mapping] | tuple, *, deep_clone: bool = True
) -> dict:
    """Remove key paths from ``obj``.

    A plain path is removed at that exact location. A ``deep`` path walks
    through every list it meets, so ``ObjectPath("items.price", deep=True)``
    removes ``price`` from every element of ``items``.

    Args:
        obj: The dict to clean.
        paths: `ObjectPath` values or ``{"key": ..., "deep": ...}`` mappings.
        deep_clone: Work on a deep copy; False mutates ``obj`` in place.

    Returns:
        dict: The cleaned dict; ``{}`` when ``obj`` is not a non-empty dict.

    Raises:
        TypeError: If ``paths`` is not a list or a path is malformed.

    Examples:
        >>> data = {"user": {"password": "x", "name": "a"}, "items": [{"id": 1, "price": 9}]}
        >>> remove_object_paths(data, [ObjectPath("user.password"), {"key": "items.price", "deep": True}])
        {'user': {'name': 'a'}, 'items': [{'id': 1}]}
    """
    if get_kind(obj) is not Kind.PLAIN_OBJECT or is_empty_object(obj):
        return {}
    assert_is_list(
        paths,
        message=lambda current_type, valid_type: (
            f"Second parameter (`paths`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    resolved = [ObjectPath.from_value(path) for path in paths]
    result = copy.deepcopy(obj) if deep_clone else obj
    for path in resolved:
        parts = path.key.split(".")
        if path.deep:
            _delete_nested_path(result, parts)
        else:
            _delete_exact_path(result, parts)
    return result
