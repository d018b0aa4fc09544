"""Emptiness predicates.

Three flavours with deliberately different conventions:

- `is_empty` follows the lodash convention: scalars (``None``, booleans,
  numbers) are empty, collections are empty when they have no items.
- `is_empty_value` treats "nothing meaningful" as empty: ``None``,
  ``False``, NaN, blank strings and empty lists or dicts. Numbers and
  ``True`` are not empty.
- `is_empty_deep` recurses into containers and reports whether everything
  inside them is empty.
"""

from collections.abc import Mapping, Sized

from ..assertions import assert_is_boolean
from ..kinds import NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind


def is_non_empty_string(value: object, *, trim: bool = True) -> bool:
    """Return True for strings that are not empty (after trimming by default).

    Raises:
        TypeError: If ``trim`` is not a boolean.
    """
    assert_is_boolean(
        trim,
        message=lambda current_type, valid_type: (
            f"Parameter `trim` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if get_kind(value) is not Kind.STRING:
        return False
    text: str = value.strip() if trim else value  # type: ignore[union-attr,assignment]
    return len(text) > 0


def is_empty_string(value: object, *, trim: bool = True) -> bool:
    """Return True unless ``value`` is a non-empty string."""
    return not is_non_empty_string(value, trim=trim)


def is_non_empty_list(value: object) -> bool:
    """Return True for lists or tuples with at least one item."""
    return get_kind(value) in SEQUENCE_KINDS and len(value) > 0  # type: ignore[arg-type]


def is_empty_list(value: object) -> bool:
    """Return True for lists or tuples without items."""
    return get_kind(value) in SEQUENCE_KINDS and len(value) == 0  # type: ignore[arg-type]


def is_empty_object(value: object) -> bool:
    """Return True unless ``value`` is an object with at least one key.

    Mappings are checked for keys, other objects for instance attributes.
    Non-objects (scalars, lists) are considered empty.
    """
    kind = get_kind(value)
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        return len(value) == 0  # type: ignore[arg-type]
    if kind is Kind.OBJECT:
        return not vars(value) if hasattr(value, "__dict__") else True
    return True


def is_empty(value: object) -> bool:  # pylint: disable=too-many-return-statements
    """Return True for scalars and for collections without items."""
    kind = get_kind(value)
    if kind in (Kind.NONE, Kind.BOOLEAN, Kind.NAN, Kind.INFINITY, Kind.DECIMAL):
        return True
    if kind in NUMBER_KINDS:
        return True
    if kind is Kind.NDARRAY:
        return value.size == 0  # type: ignore[union-attr]
    if kind in (Kind.STRING, Kind.BYTES, Kind.LIST, Kind.TUPLE, Kind.SET):
        return len(value) == 0  # type: ignore[arg-type]
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        return len(value) == 0  # type: ignore[arg-type]
    if kind is Kind.FUNCTION:
        return not getattr(value, "__dict__", None)
    return False


def is_empty_value(value: object) -> bool:
    """Return True for ``None``, ``False``, NaN, blank strings, empty lists and empty objects."""
    kind = get_kind(value)
    if kind in (Kind.NONE, Kind.NAN) or value is False:
        return True
    if kind is Kind.STRING:
        return is_empty_string(value)
    if kind in SEQUENCE_KINDS:
        return is_empty_list(value)
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING, Kind.OBJECT):
        return is_empty_object(value)
    return False


def is_non_empty_value(value: object) -> bool:
    """Negation of `is_empty_value`."""
    return not is_empty_value(value)


def is_empty_deep(value: object) -> bool:
    """Return True when ``value`` holds nothing but empty values, recursively.

    Blank strings, NaN, falsy scalars and containers whose items are all
    deeply empty are empty. Any non-NaN number, ``True`` or non-blank string
    makes the whole structure non-empty.

    Examples:
        >>> is_empty_deep({"a": [], "b": {"c": "  "}})
        True
        >>> is_empty_deep([[], [0]])
        False
    """
    kind = get_kind(value)
    if kind is Kind.STRING:
        return is_empty_string(value)
    if kind in NUMBER_KINDS or kind is Kind.INFINITY:
        return False
    if kind is Kind.NAN:
        return True
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        return all(is_empty_deep(v) for v in value.values())  # type: ignore[union-attr]
    if kind in SEQUENCE_KINDS or kind is Kind.SET:
        return all(is_empty_deep(v) for v in value)  # type: ignore[union-attr]
    if kind is Kind.OBJECT and hasattr(value, "__dict__"):
        return all(is_empty_deep(v) for v in vars(value).values())
    if isinstance(value, Sized) and not isinstance(value, Mapping):
        return len(value) == 0
    return not value
