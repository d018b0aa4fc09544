"""Runtime kind classification.

`get_kind` maps any value onto a closed `Kind` tag. Helpers compute the tag
once per call and dispatch on it instead of repeating `isinstance` chains.
Detection order matters and is fixed here: booleans before integers, NaN
and infinity before other floats, date-times before dates, lists and tuples
before mappings, plain dicts before other mappings, generators before other
callables.

`get_precise_type` renders a readable kind name for error messages.
"""

import math
import numbers
import re
import types
from collections.abc import Mapping, Set
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

import numpy as np

from .strings.cases import CASE_CONVERTERS

MAX_SAFE_INTEGER = 2**53 - 1  # pragma: no mutate
MIN_SAFE_INTEGER = -(2**53 - 1)  # pragma: no mutate

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class Kind(Enum):
    """Closed set of runtime value categories."""

    NONE = "none"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    BIG_INTEGER = "big integer"
    FLOAT = "float"
    NAN = "nan"
    INFINITY = "infinity"
    DECIMAL = "decimal"
    STRING = "string"
    BYTES = "bytes"
    NDARRAY = "ndarray"
    DATE_TIME = "date time"
    DATE = "date"
    PATTERN = "pattern"
    ERROR = "error"
    LIST = "list"
    TUPLE = "tuple"
    PLAIN_OBJECT = "plain object"
    MAPPING = "mapping"
    SET = "set"
    GENERATOR = "generator"
    FUNCTION = "function"
    OBJECT = "object"


NUMBER_KINDS = frozenset({Kind.INTEGER, Kind.BIG_INTEGER, Kind.FLOAT})
SEQUENCE_KINDS = frozenset({Kind.LIST, Kind.TUPLE})

# kinds whose readable name is taken from the value's class
_CLASS_NAMED = frozenset({Kind.BYTES, Kind.ERROR, Kind.MAPPING, Kind.SET, Kind.OBJECT})


def get_kind(value: object) -> Kind:  # pylint: disable=too-many-return-statements
    """Classify ``value`` into a `Kind`.

    Args:
        value: Any value.

    Returns:
        Kind: The runtime category of ``value``.
    """
    if value is None:
        return Kind.NONE
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Integral):
        if MIN_SAFE_INTEGER <= int(value) <= MAX_SAFE_INTEGER:
            return Kind.INTEGER
        return Kind.BIG_INTEGER
    if isinstance(value, numbers.Real):
        number = float(value)
        if math.isnan(number):
            return Kind.NAN
        if math.isinf(number):
            return Kind.INFINITY
        return Kind.FLOAT
    if isinstance(value, Decimal):
        return Kind.DECIMAL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if isinstance(value, np.ndarray):
        return Kind.NDARRAY
    if isinstance(value, datetime):
        return Kind.DATE_TIME
    if isinstance(value, date):
        return Kind.DATE
    if isinstance(value, re.Pattern):
        return Kind.PATTERN
    if isinstance(value, BaseException):
        return Kind.ERROR
    if isinstance(value, list):
        return Kind.LIST
    if isinstance(value, tuple):
        return Kind.TUPLE
    if type(value) is dict:  # pylint: disable=unidiomatic-typecheck
        return Kind.PLAIN_OBJECT
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Set):
        return Kind.SET
    if isinstance(value, types.GeneratorType):
        return Kind.GENERATOR
    if callable(value):
        return Kind.FUNCTION
    return Kind.OBJECT


def get_precise_type(value: object, format_case: str = "kebab") -> str:
    """Return a readable name for the kind of ``value``.

    Containers, errors and arbitrary objects are named after their class
    (``OrderedDict`` -> ``"ordered-dict"``); everything else after its
    `Kind` (``{}`` -> ``"plain-object"``).

    Args:
        value: Any value.
        format_case: One of the keys of `CASE_CONVERTERS`
            (``"kebab"``, ``"snake"``, ``"camel"``, ``"lower"``...).

    Returns:
        str: The formatted kind name.

    Raises:
        ValueError: If ``format_case`` is not a known case.
    """
    try:
        converter = CASE_CONVERTERS[format_case]
    except KeyError as e:
        raise ValueError(
            f"Unknown format_case {format_case!r}, expected one of "
            f"{sorted(CASE_CONVERTERS)}."
        ) from e

    kind = get_kind(value)
    if kind in _CLASS_NAMED:
        name = _CAMEL_BOUNDARY.sub(" ", type(value).__name__)
    else:
        name = kind.value
    return converter(name, None)
