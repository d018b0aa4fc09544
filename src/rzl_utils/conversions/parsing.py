"""Forgiving JSON parsing with optional value cleanup.

`safe_json_parse` accepts the loose JSON found in logs and hand-written
config: single-quoted strings, ``undefined`` and ``NaN`` values and
trailing commas. The parsed tree then goes through `clean_parsed_data`,
which can turn numeric, boolean and date strings into real values and
prune nulls and empty containers. Parsing never raises; failures are
logged and reported through ``JsonParseOptions.on_error``.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from ..kinds import NUMBER_KINDS, Kind, get_kind, get_precise_type
from .numerics import parse_number_text

logger = logging.getLogger(__name__)

DATE_FORMATS = ("DD/MM/YYYY", "MM/DD/YYYY")

_ISO_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")
_DATE_PARTS = re.compile(r"[-/]")
_DIGITS = re.compile(r"\d+")

_UNDEFINED_AFTER_COMMA = re.compile(r',\s*"[^"]*"\s*:\s*undefined(?=\s*[},])')
_UNDEFINED_MEMBER = re.compile(r'"[^"]*"\s*:\s*undefined\s*,?')
_UNDEFINED_VALUE = re.compile(r":\s*undefined(?=\s*[,}])")
_NAN_VALUE = re.compile(r":\s*NaN(?=\s*[,}])")
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")

_VALID_ESCAPES = frozenset('\\"/bfnrtu')


def _require(condition: bool, field_name: str, expected: str, value: object) -> None:
    if not condition:
        raise TypeError(
            f"Option `{field_name}` must be {expected}, but received: "
            f"`{get_precise_type(value)}` ({value!r})."
        )


@dataclass(frozen=True, slots=True)
class JsonParseOptions:  # pylint: disable=too-many-instance-attributes
    """Options for `safe_json_parse` and `clean_parsed_data`.

    Attributes:
        convert_numbers: Turn numeric strings into numbers.
        convert_nan: Turn ``"NaN"`` into ``float("nan")``.
        convert_booleans: Turn ``"true"`` and ``"false"`` into booleans.
        convert_dates: Turn ISO timestamps (``2024-01-02T03:04:05.678Z``)
            into aware datetimes, and strings matching
            ``custom_date_formats`` into dates.
        custom_date_formats: Formats tried by `parse_custom_date`.
        remove_nulls: Drop ``null`` values.
        remove_undefined: Drop ``undefined`` members instead of reading
            them as ``null``.
        remove_empty_objects: Drop objects left empty.
        remove_empty_arrays: Drop arrays left empty.
        strict_mode: Drop strings that no conversion applies to.
        logging_on_fail: Log parse failures at ERROR instead of DEBUG.
        on_error: Called with a `ValueError` when parsing fails.
    """

    convert_numbers: bool = False
    convert_nan: bool = False
    convert_booleans: bool = False
    convert_dates: bool = False
    custom_date_formats: tuple[str, ...] = ()
    remove_nulls: bool = False
    remove_undefined: bool = False
    remove_empty_objects: bool = False
    remove_empty_arrays: bool = False
    strict_mode: bool = False
    logging_on_fail: bool = False
    on_error: Callable[[Exception], object] | None = None

    def __post_init__(self) -> None:
        for name in (
            "convert_numbers",
            "convert_nan",
            "convert_booleans",
            "convert_dates",
            "remove_nulls",
            "remove_undefined",
            "remove_empty_objects",
            "remove_empty_arrays",
            "strict_mode",
            "logging_on_fail",
        ):
            value = getattr(self, name)
            _require(isinstance(value, bool), name, "a boolean", value)
        _require(
            isinstance(self.custom_date_formats, tuple)
            and all(isinstance(f, str) and f.strip() for f in self.custom_date_formats),
            "custom_date_formats",
            "a tuple of non-empty strings",
            self.custom_date_formats,
        )
        _require(
            self.on_error is None or callable(self.on_error),
            "on_error",
            "None or a callable",
            self.on_error,
        )


DEFAULT_OPTIONS = JsonParseOptions()


# ============================================================================
#                               Dates
# ============================================================================


def parse_custom_date(date_string: str, fmt: str) -> date | None:
    """Parse a day-month-year string in one of `DATE_FORMATS`.

    Parts may be separated by ``-`` or ``/``.

    Returns:
        date | None: The date, or None when the string does not hold a
        valid calendar date in that format or the format is unknown.

    Raises:
        TypeError: If either argument is not a non-empty string.

    Examples:
        >>> parse_custom_date("25/12/2000", "DD/MM/YYYY")
        datetime.date(2000, 12, 25)
        >>> parse_custom_date("02-30-2024", "MM/DD/YYYY") is None
        True
    """
    if not (isinstance(date_string, str) and date_string.strip()) or not (
        isinstance(fmt, str) and fmt.strip()
    ):
        raise TypeError(
            "Parameters `date_string` and `format` must be of type `string` and not "
            f"empty, but received: ['date_string': `{get_precise_type(date_string)}`, "
            f"'format': `{get_precise_type(fmt)}`]."
        )
    parts = [part.strip() for part in _DATE_PARTS.split(date_string)]
    if len(parts) != 3 or not all(_DIGITS.fullmatch(part) for part in parts):
        return None
    first, second, year = (int(part) for part in parts)
    match fmt:
        case "DD/MM/YYYY":
            day, month = first, second
        case "MM/DD/YYYY":
            month, day = first, second
        case _:
            return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


# ============================================================================
#                               Cleanup
# ============================================================================


class _Omit:  # pylint: disable=too-few-public-methods
    """Marker for values removed during cleanup."""


_OMIT = _Omit()


def _clean_string(text: str, options: JsonParseOptions) -> object:  # pylint: disable=too-many-return-statements
    trimmed = text.strip()
    if options.convert_nan and trimmed == "NaN":
        return math.nan
    if options.convert_numbers:
        number = parse_number_text(trimmed)
        if number is not None:
            return number
    if options.convert_booleans and trimmed in ("true", "false"):
        return trimmed == "true"
    if options.convert_dates:
        if _ISO_TIMESTAMP.match(trimmed):
            return datetime.fromisoformat(trimmed)
        for fmt in options.custom_date_formats if trimmed else ():
            parsed = parse_custom_date(trimmed, fmt)
            if parsed is not None:
                return parsed
    return _OMIT if options.strict_mode else trimmed


def _clean(data: object, options: JsonParseOptions) -> object:
    if data is None:
        return _OMIT if options.remove_nulls else None
    if isinstance(data, str):
        return _clean_string(data, options)
    if isinstance(data, list):
        items = [item for item in (_clean(i, options) for i in data) if item is not _OMIT]
        return _OMIT if options.remove_empty_arrays and not items else items
    if isinstance(data, dict):
        members = {}
        for key, value in data.items():
            cleaned = _clean(value, options)
            if cleaned is not _OMIT:
                members[key] = cleaned
        return _OMIT if options.remove_empty_objects and not members else members
    return data


def clean_parsed_data(data: object, options: JsonParseOptions | None = None) -> object:
    """Clean a parsed JSON tree according to ``options``.

    Strings are trimmed and converted as the options allow; lists and
    dicts are cleaned recursively. Numbers, booleans and other values are
    kept as they are.

    Returns:
        object: The cleaned tree, or None when the root itself was removed.

    Raises:
        TypeError: If ``options`` is not a `JsonParseOptions`.

    Examples:
        >>> opts = JsonParseOptions(convert_numbers=True, remove_nulls=True)
        >>> clean_parsed_data({"a": " 5 ", "b": None}, opts)
        {'a': 5}
    """
    options = _check_options(options)
    cleaned = _clean(data, options)
    return None if cleaned is _OMIT else cleaned


# ============================================================================
#                               Parsing
# ============================================================================


def _normalize_quotes(text: str) -> str:  # pylint: disable=too-many-branches
    """Rewrite single-quoted strings as double-quoted ones.

    Escapes JSON does not know (``\\x``) are kept as literal backslashes.
    """
    output: list[str] = []
    quote: str | None = None
    escape_next = False
    for char in text:
        if escape_next:
            escape_next = False
            if quote is None:
                output.append("\\" + char)
            elif quote == "'" and char == "'":
                output.append("'")
            elif char in _VALID_ESCAPES:
                output.append("\\" + char)
            else:
                output.append("\\\\" + char)
            continue
        if char == "\\":
            escape_next = True
            continue
        if quote is None and char in "'\"":
            quote = char
            output.append('"')
        elif char == quote:
            quote = None
            output.append('"')
        elif quote == "'" and char == '"':
            output.append('\\"')
        else:
            output.append(char)
    if escape_next:
        output.append("\\")
    return "".join(output)


def _reject_constant(name: str) -> object:
    raise ValueError(f"Unexpected constant {name!r}")


def _prepare(text: str, options: JsonParseOptions) -> str:
    normalized = _normalize_quotes(text)
    if options.remove_undefined:
        normalized = _UNDEFINED_AFTER_COMMA.sub("", normalized)
        normalized = _UNDEFINED_MEMBER.sub("", normalized)
    else:
        normalized = _UNDEFINED_VALUE.sub(":null", normalized)
    normalized = _NAN_VALUE.sub(':"NaN"', normalized)
    return _TRAILING_COMMA.sub(r"\1", normalized)


def _check_options(options: object) -> JsonParseOptions:
    if options is None:
        return DEFAULT_OPTIONS
    if not isinstance(options, JsonParseOptions):
        raise TypeError(
            "Parameter `options` must be of type `JsonParseOptions`, but received: "
            f"`{get_precise_type(options)}`."
        )
    return options


def safe_json_parse(value: object, options: JsonParseOptions | None = None) -> object:
    """Parse loose JSON text without raising.

    Before parsing, single-quoted strings become double-quoted,
    ``undefined`` values become ``null`` (or are removed with
    ``remove_undefined``), ``NaN`` values become the string ``"NaN"`` and
    trailing commas are dropped. The result goes through
    `clean_parsed_data`.

    Args:
        value: The text to parse. With ``convert_numbers`` a number or a
            numeric string is returned as a number; with ``convert_nan``
            NaN or ``"NaN"`` is returned as NaN.
        options: Parsing and cleanup options.

    Returns:
        object: The parsed value, or None for ``None``, non-string input
        and text that is not valid JSON.

    Raises:
        TypeError: If ``options`` is not a `JsonParseOptions`.

    Examples:
        >>> safe_json_parse("{'a': 1, 'b': undefined,}")
        {'a': 1, 'b': None}
        >>> safe_json_parse('{"age": "30"}', JsonParseOptions(convert_numbers=True))
        {'age': 30}
    """
    options = _check_options(options)
    if value is None:
        return None
    kind = get_kind(value)
    if options.convert_nan and (kind is Kind.NAN or (kind is Kind.STRING and value == "NaN")):
        return math.nan
    if options.convert_numbers:
        if kind in NUMBER_KINDS:
            return value
        if kind is Kind.STRING:
            number = parse_number_text(value)  # type: ignore[arg-type]
            if number is not None:
                return number
    if kind is not Kind.STRING:
        return None

    try:
        parsed = json.loads(_prepare(value, options), parse_constant=_reject_constant)  # type: ignore[arg-type]
    except ValueError as e:
        if options.logging_on_fail:
            logger.error("Failed to parse JSON: %s", e)
        else:
            logger.debug("Failed to parse JSON: %s", e)
        if options.on_error is not None:
            options.on_error(ValueError(f"Failed to parse JSON: {e}"))
        return None
    return clean_parsed_data(parsed, options)
