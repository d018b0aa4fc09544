"""Deterministic, cycle-safe JSON serialization.

`safe_stable_stringify` never raises for odd inputs: cycles are replaced by
``"[Circular]"``, non-finite numbers become ``null``, dates become ISO
strings, and sets are serialized in a stable order. It is the canonical
form used to compare and sort arbitrary values elsewhere in the package.
"""

import json
import logging
import math

from ..assertions import assert_is_boolean
from ..kinds import MAX_SAFE_INTEGER, NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind

logger = logging.getLogger(__name__)

CIRCULAR = "[Circular]"  # pragma: no mutate

_PRIMITIVE_KINDS = NUMBER_KINDS | {Kind.NONE, Kind.BOOLEAN, Kind.STRING}


class _Omit:  # pylint: disable=too-few-public-methods
    """Marker for values that have no JSON form (functions, generators)."""


_OMIT = _Omit()


def _key_order(key: str) -> tuple[int, float, str]:
    try:
        number = float(key)
    except ValueError:
        return (1, 0.0, key)
    if math.isnan(number):
        return (1, 0.0, key)
    return (0, number, key)


def _primitive_order(value: object) -> tuple[int, float, str]:
    if get_kind(value) in NUMBER_KINDS:
        return (0, float(value), "")  # type: ignore[arg-type]
    return (1, 0.0, str(value))


class _Normalizer:
    """Turn arbitrary values into JSON-ready structures."""

    def __init__(self, *, sort_keys: bool, sort_list: bool) -> None:
        self.sort_keys = sort_keys
        self.sort_list = sort_list
        self._in_flight: set[int] = set()

    def __call__(self, value: object) -> object:  # pylint: disable=too-many-return-statements
        kind = get_kind(value)
        if kind in (Kind.NAN, Kind.INFINITY):
            return None
        if kind is Kind.FLOAT:
            number = float(value)  # type: ignore[arg-type]
            # integral floats serialize like integers, as in JSON
            if number.is_integer() and abs(number) <= MAX_SAFE_INTEGER:
                return int(number)
            return number
        if kind in NUMBER_KINDS:
            return int(value)  # type: ignore[call-overload]
        if kind in _PRIMITIVE_KINDS:
            return value
        if kind is Kind.DECIMAL:
            return str(value)
        if kind in (Kind.FUNCTION, Kind.GENERATOR):
            return _OMIT
        if kind is Kind.DATE_TIME or kind is Kind.DATE:
            return value.isoformat()  # type: ignore[union-attr]
        if kind is Kind.PATTERN:
            return value.pattern  # type: ignore[union-attr]
        if kind is Kind.BYTES:
            return bytes(value).hex()  # type: ignore[arg-type]
        if kind is Kind.ERROR:
            return {"name": type(value).__name__, "message": str(value)}

        if id(value) in self._in_flight:
            return CIRCULAR
        self._in_flight.add(id(value))
        try:
            return self._container(kind, value)
        finally:
            self._in_flight.discard(id(value))

    def _container(self, kind: Kind, value: object) -> object:
        if kind is Kind.NDARRAY:
            return self(value.tolist())  # type: ignore[union-attr]
        if kind in SEQUENCE_KINDS:
            return self._sequence(value)  # type: ignore[arg-type]
        if kind is Kind.SET:
            items = [self._item(v) for v in value]  # type: ignore[union-attr]
            return {"set": sorted(items, key=_dumps_compact)}
        if kind is Kind.MAPPING:
            return {
                "map": [[self._item(k), self._item(v)] for k, v in value.items()]  # type: ignore[union-attr]
            }
        if kind is Kind.PLAIN_OBJECT:
            return self._object(value)  # type: ignore[arg-type]
        if hasattr(value, "__dict__"):
            return self._object(vars(value))
        return str(value)

    def _item(self, value: object) -> object:
        result = self(value)
        return None if result is _OMIT else result

    def _sequence(self, values: list | tuple) -> list:
        items = [self._item(v) for v in values]
        if not self.sort_list:
            return items
        primitives = [i for i in items if get_kind(i) in _PRIMITIVE_KINDS]
        others = [i for i in items if get_kind(i) not in _PRIMITIVE_KINDS]
        return sorted(primitives, key=_primitive_order) + others

    def _object(self, mapping: dict) -> dict:
        keys = [str(k) for k in mapping]
        pairs = dict(zip(keys, mapping.values()))
        if self.sort_keys:
            keys.sort(key=_key_order)
        result = {}
        for key in keys:
            processed = self(pairs[key])
            if processed is not _OMIT:
                result[key] = processed
        return result


def _dumps_compact(value: object) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)


def safe_stable_stringify(
    value: object,
    *,
    sort_keys: bool = True,
    sort_list: bool = False,
    pretty: bool = False,
) -> str:
    """Serialize ``value`` to a stable JSON string.

    Args:
        value: Any value.
        sort_keys: Sort object keys (numeric-looking keys first, numerically).
        sort_list: Sort primitive list items; non-primitive items keep their
            order after the primitives.
        pretty: Indent the output with two spaces.

    Returns:
        str: The JSON text. ``"{}"`` if serialization fails unexpectedly.

    Raises:
        TypeError: If an option is not a boolean.

    Examples:
        >>> safe_stable_stringify({"b": 1, "a": [float("nan"), 2]})
        '{"a":[null,2],"b":1}'
    """
    for name, option in (
        ("sort_keys", sort_keys),
        ("sort_list", sort_list),
        ("pretty", pretty),
    ):
        assert_is_boolean(
            option,
            message=lambda current_type, valid_type, name=name: (
                f"Parameter `{name}` must be of type `{valid_type}`, "
                f"but received: `{current_type}`."
            ),
        )

    normalize = _Normalizer(sort_keys=sort_keys, sort_list=sort_list)
    try:
        data = normalize(value)
        if data is _OMIT:
            data = None
        if pretty:
            return json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
        return json.dumps(
            data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Could not serialize value of type %s: %s", type(value).__name__, e)
        return "{}"
