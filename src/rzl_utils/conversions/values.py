"""Deep conversion of nested values to numbers or strings.

Both converters walk lists, tuples, sets, mappings, byte buffers and numpy
arrays. Containers other than `dict` become lists: sets and sequences keep
their converted items, mappings become ``[key, value]`` pairs. Items that
cannot be converted are dropped, so the result only holds numbers (or only
strings) at its leaves.
"""

import math
from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

from ..assertions import assert_is_boolean
from ..kinds import NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind
from .numerics import parse_number_text

type ScalarConverter = Callable[[object, Kind], object]

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_TEXT_KINDS = NUMBER_KINDS | {Kind.STRING, Kind.BOOLEAN, Kind.DECIMAL}
_CONTAINER_KINDS = SEQUENCE_KINDS | {Kind.SET, Kind.MAPPING, Kind.PLAIN_OBJECT}


def _epoch_millis(value: date) -> int:
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def _number_scalar(value: object, kind: Kind) -> object:  # pylint: disable=too-many-return-statements
    if kind is Kind.FLOAT:
        return float(value)  # type: ignore[arg-type]
    if kind in NUMBER_KINDS:
        return int(value)  # type: ignore[call-overload]
    if kind is Kind.DECIMAL:
        return float(value) if value.is_finite() else None  # type: ignore[union-attr,arg-type]
    if kind is Kind.STRING:
        number = parse_number_text(value)  # type: ignore[arg-type]
        if isinstance(number, float) and not math.isfinite(number):
            return None
        return number
    if kind in (Kind.DATE, Kind.DATE_TIME):
        return _epoch_millis(value)  # type: ignore[arg-type]
    return None


def _string_scalar(value: object, kind: Kind) -> object:
    if kind in _TEXT_KINDS:
        return str(value)
    if kind in (Kind.DATE, Kind.DATE_TIME):
        return value.isoformat()  # type: ignore[union-attr]
    if kind is Kind.PATTERN:
        return value.pattern  # type: ignore[union-attr]
    return None


class _DeepConverter:
    """Walk a nested value, converting leaves with ``scalar``."""

    def __init__(
        self,
        scalar: ScalarConverter,
        *,
        remove_empty_objects: bool,
        remove_empty_arrays: bool,
    ) -> None:
        self.scalar = scalar
        self.remove_empty_objects = remove_empty_objects
        self.remove_empty_arrays = remove_empty_arrays
        self._in_flight: set[int] = set()

    def __call__(self, value: object, *, is_root: bool = False) -> object:
        kind = get_kind(value)
        if kind is Kind.BYTES:
            return self._items(list(bytes(value)))  # type: ignore[call-overload]
        if kind is Kind.NDARRAY:
            return self._items(value.tolist())  # type: ignore[union-attr]
        if kind not in _CONTAINER_KINDS:
            return self.scalar(value, kind)

        # a container met again inside itself is dropped
        if id(value) in self._in_flight:
            return None
        self._in_flight.add(id(value))
        try:
            if kind is Kind.PLAIN_OBJECT:
                return self._object(value, is_root=is_root)  # type: ignore[arg-type]
            if kind is Kind.MAPPING:
                return self._pairs(value)  # type: ignore[arg-type]
            return self._items(value)  # type: ignore[arg-type]
        finally:
            self._in_flight.discard(id(value))

    def _finish_list(self, items: list) -> list | None:
        if self.remove_empty_arrays and not items:
            return None
        return items

    def _items(self, values) -> list | None:
        converted = (self(item) for item in values)
        return self._finish_list([item for item in converted if item is not None])

    def _pairs(self, mapping) -> list | None:
        pairs = []
        for key, value in mapping.items():
            new_key, new_value = self(key), self(value)
            if new_key is not None and new_value is not None:
                pairs.append([new_key, new_value])
        return self._finish_list(pairs)

    def _object(self, mapping: dict, *, is_root: bool) -> dict | None:
        result = {}
        for key, value in mapping.items():
            converted = self(value)
            if converted is not None:
                result[key] = converted
        if self.remove_empty_objects and not result:
            return {} if is_root else None
        return result


def _check_options(remove_empty_objects: object, remove_empty_arrays: object) -> None:
    for name, option in (
        ("remove_empty_objects", remove_empty_objects),
        ("remove_empty_arrays", remove_empty_arrays),
    ):
        assert_is_boolean(
            option,
            message=lambda current_type, valid_type, name=name: (
                f"Parameter `{name}` must be of type `{valid_type}`, "
                f"but received: `{current_type}`."
            ),
        )


def to_number_deep(
    value: object,
    *,
    remove_empty_objects: bool = False,
    remove_empty_arrays: bool = False,
) -> object:
    """Convert every leaf of ``value`` to a number, dropping the rest.

    Numbers pass through and numeric strings are parsed. Dates become
    milliseconds since the Unix epoch, naive ones read as UTC. ``None``,
    booleans, NaN, infinities and non-numeric strings are dropped.

    Args:
        value: Any value.
        remove_empty_objects: Drop dicts left empty; an empty root dict is
            returned as ``{}``.
        remove_empty_arrays: Drop lists left empty, the root included.

    Returns:
        object: The converted structure, or None when nothing is left.

    Raises:
        TypeError: If an option is not a boolean.

    Examples:
        >>> to_number_deep({"a": "12", "b": ["3.5", "x", None], "c": True})
        {'a': 12, 'b': [3.5]}
        >>> to_number_deep({"a": {"b": "x"}}, remove_empty_objects=True)
        {}
    """
    _check_options(remove_empty_objects, remove_empty_arrays)
    convert = _DeepConverter(
        _number_scalar,
        remove_empty_objects=remove_empty_objects,
        remove_empty_arrays=remove_empty_arrays,
    )
    return convert(value, is_root=True)


def to_string_deep(
    value: object,
    *,
    remove_empty_objects: bool = False,
    remove_empty_arrays: bool = False,
) -> object:
    """Convert every leaf of ``value`` to a string, dropping the rest.

    Strings, numbers and booleans go through `str`. Dates become ISO 8601
    strings and compiled patterns their source. ``None``, NaN and
    infinities are dropped.

    Args:
        value: Any value.
        remove_empty_objects: Drop dicts left empty; an empty root dict is
            returned as ``{}``.
        remove_empty_arrays: Drop lists left empty, the root included.

    Returns:
        object: The converted structure, or None when nothing is left.

    Raises:
        TypeError: If an option is not a boolean.

    Examples:
        >>> to_string_deep([1, 2.5, None, {"ok": True}])
        ['1', '2.5', {'ok': 'True'}]
    """
    _check_options(remove_empty_objects, remove_empty_arrays)
    convert = _DeepConverter(
        _string_scalar,
        remove_empty_objects=remove_empty_objects,
        remove_empty_arrays=remove_empty_arrays,
    )
    return convert(value, is_root=True)
