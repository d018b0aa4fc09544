"""Number formatting."""

import numbers
import re

import numpy as np

from ..kinds import NUMBER_KINDS, Kind, get_kind, get_precise_type

THOUSANDS = re.compile(r"\B(?=(?:\d{3})+(?!\d))")
_NON_DIGITS = re.compile(r"\D")


def group_thousands(digits: str, separator: str) -> str:
    """Insert ``separator`` between every group of three digits, from the right."""
    return THOUSANDS.sub(separator, digits)


def _plain_number(value: int | float) -> str:
    """Render a number in positional notation, without an exponent."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    return np.format_float_positional(float(value), trim="-")


def format_number(value: str | int | float, separator: str = ",") -> str:
    """Group the integer digits of ``value`` with ``separator``.

    The decimal separator of the input is whichever of ``.`` or ``,``
    appears last; every other separator is treated as grouping and
    dropped. The output decimal separator is the complement of
    ``separator`` (``,`` for ``.``, ``.`` otherwise). Fraction digits are
    kept as they are, without rounding, and a leading minus sign is kept.

    Args:
        value: A finite number or a (possibly already formatted) numeric string.
        separator: Thousands separator of the output.

    Returns:
        str: The formatted number.

    Raises:
        TypeError: If ``value`` is neither a string nor a finite number, or
            ``separator`` is not a string.

    Examples:
        >>> format_number(1234567.89)
        '1,234,567.89'
        >>> format_number("1234567,89", ",")
        '1,234,567.89'
        >>> format_number(1234567.89, ".")
        '1.234.567,89'
    """
    kind = get_kind(value)
    if kind is not Kind.STRING and kind not in NUMBER_KINDS:
        raise TypeError(
            "First parameter (`value`) must be of type `string` or `number`, "
            f"but received: `{get_precise_type(value)}`."
        )
    if not isinstance(separator, str):
        raise TypeError(
            "Second parameter (`separator`) must be of type `string`, "
            f"but received: `{get_precise_type(separator)}`."
        )

    decimal_separator = "," if separator == "." else "."
    text = value.strip() if isinstance(value, str) else _plain_number(value)

    last_dot, last_comma = text.rfind("."), text.rfind(",")
    integer_part, fraction = text, ""
    if last_dot != last_comma:
        cut = max(last_dot, last_comma)
        integer_part, fraction = text[:cut], text[cut + 1 :]

    sign = "-" if integer_part.lstrip().startswith("-") else ""
    formatted = sign + group_thousands(_NON_DIGITS.sub("", integer_part), separator)
    return f"{formatted}{decimal_separator}{fraction}" if fraction else formatted
