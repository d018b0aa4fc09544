"""Numeric extraction and loose type conversion."""

import re

import numpy as np

from ..kinds import NUMBER_KINDS, Kind, get_kind

_NON_DIGITS = re.compile(r"[^0-9]")
_NUMERIC = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?$")
_INTEGER = re.compile(r"[+-]?\d+")

KEYWORDS: dict[str, object] = {
    "undefined": None,
    "null": None,
    "none": None,
    "nan": float("nan"),
    "true": True,
    "false": False,
    "yes": True,
    "no": False,
}


def extract_digits(value: object) -> int:
    """Return the digits of a string or number as an integer.

    Every non-digit character (signs and decimal points included) is
    dropped, so ``"-12.5"`` yields ``125``.

    Examples:
        >>> extract_digits("abc123def456")
        123456
        >>> extract_digits(None)
        0
    """
    if get_kind(value) not in NUMBER_KINDS | {Kind.STRING}:
        return 0
    text = np.format_float_positional(value, trim="-") if isinstance(value, float) else str(value)
    cleaned = _NON_DIGITS.sub("", text.strip())
    return int(cleaned) if cleaned else 0


def parse_number_text(text: str) -> int | float | None:
    """Return the number spelled by ``text``, or None if it is not numeric.

    Surrounding whitespace is ignored. Integers stay `int`; anything with a
    point or an exponent becomes `float`.

    Examples:
        >>> parse_number_text(" -12 ")
        -12
        >>> parse_number_text("1e3")
        1000.0
        >>> parse_number_text("12px") is None
        True
    """
    numeric = text.strip().lower()
    if not _NUMERIC.match(numeric):
        return None
    if _INTEGER.fullmatch(numeric):
        return int(numeric)
    return float(numeric)


def convert_type(value: object) -> object:
    """Convert a string to the value it spells out.

    Keywords (``"true"``, ``"yes"``, ``"false"``, ``"no"``, ``"null"``,
    ``"none"``, ``"undefined"``, ``"nan"``) are matched case-insensitively.
    Numeric strings, thousands commas allowed, become `int` or `float`.
    Other strings are returned trimmed; non-strings are returned unchanged.

    Examples:
        >>> convert_type(" 1,234 ")
        1234
        >>> convert_type("Yes")
        True
        >>> convert_type("hello ")
        'hello'
    """
    if not isinstance(value, str):
        return value
    normalized = value.strip().lower()
    if normalized in KEYWORDS:
        return KEYWORDS[normalized]
    number = parse_number_text(normalized.replace(",", ""))
    if number is not None:
        return number
    return value.strip()
