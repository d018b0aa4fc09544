"""Kind predicates.

Thin, total predicates over the runtime kind of a value. None of them raise
for an unexpected input kind; they answer ``False`` instead. Boundary
conventions:

- `bool` is never a number.
- NaN is a number only when ``include_nan`` is set; infinity always is.
- Plain objects are exactly `dict`; other mappings are not plain objects.
"""

import math
from collections.abc import Sized

from ..assertions import assert_is_boolean
from ..conversions.currency import parse_currency_string
from ..kinds import (
    MAX_SAFE_INTEGER,
    NUMBER_KINDS,
    SEQUENCE_KINDS,
    Kind,
    get_kind,
)


def is_nil(value: object) -> bool:
    """Return True for ``None``."""
    return value is None


def is_string(value: object) -> bool:
    """Return True for `str` values."""
    return get_kind(value) is Kind.STRING


def is_boolean(value: object) -> bool:
    """Return True for `bool` values."""
    return get_kind(value) is Kind.BOOLEAN


def is_number(value: object, *, include_nan: bool = False) -> bool:
    """Return True for real numbers (`int`, `float`), never for `bool`.

    Args:
        value: Value to check.
        include_nan: Also accept NaN.

    Returns:
        bool: Whether ``value`` is a number.

    Raises:
        TypeError: If ``include_nan`` is not a boolean.
    """
    assert_is_boolean(
        include_nan,
        message=lambda current_type, valid_type: (
            f"Parameter `include_nan` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    kind = get_kind(value)
    if kind in NUMBER_KINDS or kind is Kind.INFINITY:
        return True
    return include_nan and kind is Kind.NAN


def is_nan(value: object) -> bool:
    """Return True for a floating point NaN."""
    return get_kind(value) is Kind.NAN


def is_infinity_number(value: object) -> bool:
    """Return True for positive or negative infinity."""
    return get_kind(value) is Kind.INFINITY


def is_finite(value: object) -> bool:
    """Return True for numbers that are neither NaN nor infinite."""
    return get_kind(value) in NUMBER_KINDS


def is_integer(value: object) -> bool:
    """Return True for `int` values (booleans excluded)."""
    return get_kind(value) in (Kind.INTEGER, Kind.BIG_INTEGER)


def is_float(value: object) -> bool:
    """Return True for finite `float` values with a fractional part."""
    return get_kind(value) is Kind.FLOAT and not float(value).is_integer()  # type: ignore[arg-type]


def is_big_integer(value: object) -> bool:
    """Return True for integers outside the safe-integer range."""
    return get_kind(value) is Kind.BIG_INTEGER


def is_safe_integer(value: object) -> bool:
    """Return True for integral numbers within ``±MAX_SAFE_INTEGER``.

    Integral floats such as ``3.0`` count, as they do for the usual
    ``Number.isSafeInteger`` convention.
    """
    kind = get_kind(value)
    if kind is Kind.INTEGER:
        return True
    if kind is Kind.FLOAT:
        number = float(value)  # type: ignore[arg-type]
        return number.is_integer() and abs(number) <= MAX_SAFE_INTEGER
    return False


def is_length(value: object) -> bool:
    """Return True for valid sequence lengths: ints in ``[0, MAX_SAFE_INTEGER]``."""
    return get_kind(value) is Kind.INTEGER and 0 <= value <= MAX_SAFE_INTEGER  # type: ignore[operator]


def is_property_key(value: object) -> bool:
    """Return True for values usable as a mapping key in a path (str or number)."""
    return get_kind(value) in (Kind.STRING, Kind.INTEGER, Kind.FLOAT)


def is_list(value: object) -> bool:
    """Return True for `list` values."""
    return get_kind(value) is Kind.LIST


def is_array(value: object) -> bool:
    """Return True for `list` or `tuple` values."""
    return get_kind(value) in SEQUENCE_KINDS


def is_plain_object(value: object) -> bool:
    """Return True when ``value`` is exactly a `dict`."""
    return get_kind(value) is Kind.PLAIN_OBJECT


def is_mapping(value: object) -> bool:
    """Return True for any mapping, plain dicts included."""
    return get_kind(value) in (Kind.PLAIN_OBJECT, Kind.MAPPING)


def is_set(value: object) -> bool:
    """Return True for `set` and `frozenset` values."""
    return get_kind(value) is Kind.SET


def is_date(value: object) -> bool:
    """Return True for `datetime.date` and `datetime.datetime` values."""
    return get_kind(value) in (Kind.DATE, Kind.DATE_TIME)


def is_pattern(value: object) -> bool:
    """Return True for compiled regular expressions."""
    return get_kind(value) is Kind.PATTERN


def is_error(value: object) -> bool:
    """Return True for exception instances."""
    return get_kind(value) is Kind.ERROR


def is_bytes_like(value: object) -> bool:
    """Return True for `bytes`, `bytearray` and `memoryview` values."""
    return get_kind(value) is Kind.BYTES


def is_typed_array(value: object) -> bool:
    """Return True for numpy arrays."""
    return get_kind(value) is Kind.NDARRAY


def is_function(value: object) -> bool:
    """Return True for callables other than generators."""
    return get_kind(value) is Kind.FUNCTION


def is_object(value: object) -> bool:
    """Return True for non-None, non-sequence objects.

    Scalars (numbers, strings, booleans) and functions are not objects.
    """
    return get_kind(value) in (
        Kind.PLAIN_OBJECT,
        Kind.MAPPING,
        Kind.SET,
        Kind.DATE,
        Kind.DATE_TIME,
        Kind.PATTERN,
        Kind.ERROR,
        Kind.BYTES,
        Kind.NDARRAY,
        Kind.DECIMAL,
        Kind.GENERATOR,
        Kind.OBJECT,
    )


def is_object_or_array(value: object) -> bool:
    """Return True for objects (see `is_object`) and lists/tuples."""
    return is_object(value) or is_array(value)


def is_object_loose(value: object) -> bool:
    """Return True for objects, lists/tuples and functions."""
    return is_object_or_array(value) or is_function(value)


def is_array_like(value: object) -> bool:
    """Return True for sized, indexable values other than str, mappings and callables."""
    kind = get_kind(value)
    if kind in (Kind.STRING, Kind.PLAIN_OBJECT, Kind.MAPPING, Kind.FUNCTION):
        return False
    if not is_object_or_array(value):
        return False
    return isinstance(value, Sized) and hasattr(value, "__getitem__")


def is_currency_like(value: object) -> bool:
    """Return True for strings or numbers that read as a currency amount.

    A value qualifies when `parse_currency_string` yields a non-zero amount,
    or when the value is literally ``"0"``.
    """
    kind = get_kind(value)
    if kind not in (Kind.STRING, Kind.INTEGER, Kind.BIG_INTEGER, Kind.FLOAT, Kind.INFINITY):
        return False
    text = str(value)
    parsed = parse_currency_string(text)
    if parsed != 0 and not math.isnan(parsed):
        return True
    return text.strip() == "0"
