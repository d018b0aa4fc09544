"""List transforms and casts."""

import re
from collections.abc import Iterable
from typing import Literal

from ..assertions import assert_is_boolean, assert_is_list
from ..kinds import NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind, get_precise_type
from ..predicates.equality import is_equal
from .stringify import safe_stable_stringify

type ForceToString = Literal[False, "string_or_number", "primitives", "all"]

FORCE_TO_STRING_OPTIONS: tuple[object, ...] = (False, "string_or_number", "primitives", "all")

_FIRST_NUMBER = re.compile(r"-?\d+(\.\d+)?")
_PRIMITIVES = frozenset({Kind.BOOLEAN, Kind.NONE})
_AS_TEXT_WHEN_ALL = frozenset(
    {
        Kind.FUNCTION,
        Kind.PATTERN,
        Kind.ERROR,
        Kind.DECIMAL,
        Kind.BYTES,
        Kind.NDARRAY,
        Kind.GENERATOR,
        Kind.OBJECT,
    }
)


def _check_force_to_string(force_to_string: object, parameter: str) -> None:
    # ``0 == False``, so False is matched by identity
    if force_to_string is not False and force_to_string not in FORCE_TO_STRING_OPTIONS[1:]:
        raise TypeError(
            f"{parameter} must be `False` or one of "
            '"string_or_number" | "primitives" | "all", but received: '
            f"`{get_precise_type(force_to_string)}`, with value: "
            f"`{safe_stable_stringify(force_to_string)}`."
        )


# ============================================================================
#                               Transforms
# ============================================================================


def filter_nil_list(values: object) -> list | None:
    """Remove ``None`` items recursively, dropping nested lists left empty.

    Returns:
        list | None: The filtered list; None for ``None``, ``[]`` for
        anything that is not a list or tuple.

    Examples:
        >>> filter_nil_list([1, None, [None, [None]], [2, None]])
        [1, [2]]
    """
    if values is None:
        return None
    if get_kind(values) not in SEQUENCE_KINDS:
        return []
    result = []
    for item in values:  # type: ignore[attr-defined]
        if item is None:
            continue
        if get_kind(item) in SEQUENCE_KINDS:
            nested = filter_nil_list(item)
            if nested:
                result.append(nested)
        else:
            result.append(item)
    return result


def to_string_deep_force(value: object, force_to_string: ForceToString) -> object:
    """Convert scalars nested in ``value`` to strings according to a level.

    Levels:
        - ``False``: leave everything untouched (lists are still copied).
        - ``"string_or_number"``: strings and numbers.
        - ``"primitives"``: additionally booleans, ``None`` and NaN.
        - ``"all"``: additionally dates (ISO format), patterns, errors,
          functions and other objects; sets become lists and non-dict
          mappings become lists of ``[key, value]`` pairs.

    Lists and tuples become lists and dicts are rebuilt, converting their
    items and values recursively.

    Raises:
        TypeError: If ``force_to_string`` is not a valid level.
    """
    _check_force_to_string(force_to_string, "Second parameter `force_to_string`")
    primitives = force_to_string in ("primitives", "all")
    everything = force_to_string == "all"
    kind = get_kind(value)

    if kind is Kind.NAN:
        return "nan" if primitives else value
    if kind is Kind.STRING or kind in NUMBER_KINDS or kind is Kind.INFINITY:
        return str(value) if force_to_string else value
    if kind in _PRIMITIVES:
        return str(value) if primitives else value
    if kind in SEQUENCE_KINDS:
        return [to_string_deep_force(v, force_to_string) for v in value]  # type: ignore[union-attr]
    if kind is Kind.PLAIN_OBJECT:
        return {k: to_string_deep_force(v, force_to_string) for k, v in value.items()}  # type: ignore[union-attr]
    if not everything:
        return value
    if kind in (Kind.DATE, Kind.DATE_TIME):
        return value.isoformat()  # type: ignore[union-attr]
    if kind is Kind.SET:
        return [to_string_deep_force(v, force_to_string) for v in value]  # type: ignore[union-attr]
    if kind is Kind.MAPPING:
        return [
            [to_string_deep_force(k, force_to_string), to_string_deep_force(v, force_to_string)]
            for k, v in value.items()  # type: ignore[union-attr]
        ]
    if kind in _AS_TEXT_WHEN_ALL:
        return str(value)
    return value


def _deep_flatten(value: object) -> list:
    kind = get_kind(value)
    if kind in SEQUENCE_KINDS or kind is Kind.SET:
        return [leaf for item in value for leaf in _deep_flatten(item)]  # type: ignore[union-attr]
    if kind is Kind.MAPPING:
        return [leaf for item in value.values() for leaf in _deep_flatten(item)]  # type: ignore[union-attr]
    return [value]


def _dedupe(values: Iterable, force_to_string: ForceToString) -> list:
    result: list = []
    for item in values:
        if get_kind(item) in SEQUENCE_KINDS:
            value: object = _dedupe(item, force_to_string)
        else:
            value = to_string_deep_force(item, force_to_string)
        if not any(is_equal(seen, value) for seen in result):
            result.append(value)
    return result


def dedupe_list(
    values: list | tuple, *, flatten: bool = False, force_to_string: ForceToString = False
) -> list:
    """Remove deeply equal duplicates, keeping first occurrences.

    Nested lists are deduplicated on their own and compared as wholes.

    Args:
        values: The list to deduplicate.
        flatten: Flatten nested lists, sets and non-dict mappings first.
        force_to_string: Stringify items first (see `to_string_deep_force`).

    Returns:
        list: A new list without duplicates.

    Raises:
        TypeError: If ``values`` is not a list or an option is invalid.

    Examples:
        >>> dedupe_list([1, "1", 1, [2, 2]])
        [1, '1', [2]]
        >>> dedupe_list([1, "1", [1, ["1"]]], flatten=True, force_to_string="string_or_number")
        ['1']
    """
    assert_is_list(
        values,
        message=lambda current_type, valid_type: (
            f"First parameter (`values`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    _check_force_to_string(force_to_string, "Parameter `force_to_string`")
    assert_is_boolean(
        flatten,
        message=lambda current_type, valid_type: (
            f"Parameter `flatten` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    return _dedupe(_deep_flatten(values) if flatten else values, force_to_string)


# ============================================================================
#                                  Casts
# ============================================================================


def _to_number(item: object) -> int | float | None:
    if get_kind(item) is Kind.BIG_INTEGER:
        return item  # type: ignore[return-value]
    if item is None or isinstance(item, bool):
        return None
    match = _FIRST_NUMBER.search(str(item).strip())
    if match is None:
        return None
    return float(match.group(0)) if match.group(1) else int(match.group(0))


def _to_string(item: object) -> str | None:
    kind = get_kind(item)
    if kind in (Kind.STRING, Kind.BOOLEAN) or kind in NUMBER_KINDS:
        return str(item)
    return None


def to_number_list(values: object, *, remove_invalid: bool = True) -> list | None:
    """Cast every item to the first number found in its text.

    Items without a number become ``None``, which ``remove_invalid``
    filters out (see `filter_nil_list`). Booleans are not numbers.

    Returns:
        list | None: The cast list, or None when ``values`` is not a list.

    Raises:
        TypeError: If ``remove_invalid`` is not a boolean.

    Examples:
        >>> to_number_list(["1", "2.5", "abc", "-3px", None])
        [1, 2.5, -3]
    """
    assert_is_boolean(
        remove_invalid,
        message=lambda current_type, valid_type: (
            f"Parameter `remove_invalid` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if get_kind(values) not in SEQUENCE_KINDS:
        return None
    result = [_to_number(item) for item in values]  # type: ignore[attr-defined]
    return filter_nil_list(result) if remove_invalid else result


def to_string_list(values: object, *, remove_invalid: bool = True) -> list | None:
    """Cast strings, booleans and finite numbers to `str`; other items become ``None``.

    Same conventions as `to_number_list`.
    """
    assert_is_boolean(
        remove_invalid,
        message=lambda current_type, valid_type: (
            f"Parameter `remove_invalid` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if get_kind(values) not in SEQUENCE_KINDS:
        return None
    result = [_to_string(item) for item in values]  # type: ignore[attr-defined]
    return filter_nil_list(result) if remove_invalid else result
