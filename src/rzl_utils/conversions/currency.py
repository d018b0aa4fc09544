"""Parsing of human formatted currency strings.

`parse_currency_string` turns strings such as ``"Rp 15.000,10"``,
``"$1,234.56"``, ``"(1.000)"`` or ``"1,23,456.78"`` into floats. It does not
know about locales: it strips every non-numeric decoration and decides
which separator is the decimal point with a "last separator wins" rule.
"""

import re

_INVISIBLE_SPACES = re.compile("[\u00a0\u202f]")
_BRACKETED = re.compile(r"^\(.*\)$", re.DOTALL)
_LEADING_SIGN = re.compile(r"^[-\s]+")
_TRAILING_NOISE = re.compile(r"[\s.,-]+$")
_SIGN_BEFORE_DIGITS = re.compile(r"^[^\d]*-")
_NON_NUMERIC = re.compile(r"[^0-9.,'\s]")
_SPACES_AND_APOSTROPHES = re.compile(r"[\s']")
_INDIAN_GROUP = re.compile(r",\d{2}")
_FLOAT_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _normalize_separators(digits: str) -> str:
    """Reduce ``digits`` to at most one ``.`` acting as the decimal point."""
    if len(_INDIAN_GROUP.findall(digits)) > 1:
        return digits.replace(",", "")

    dots, commas = digits.count("."), digits.count(",")
    if dots > 1 and commas == 0:
        return digits.replace(".", "")
    if commas > 1 and dots == 0:
        return digits.replace(",", "")

    last_comma, last_dot = digits.rfind(","), digits.rfind(".")
    if last_comma > last_dot:
        head = digits[:last_comma].replace(".", "").replace(",", "")
        return f"{head}.{digits[last_comma + 1 :]}"
    # dot is the decimal point, or there is no separator at all
    return digits.replace(",", "")


def parse_currency_string(value: str | None) -> float:
    """Parse a formatted currency string into a float.

    Bracketed amounts (accounting style) and amounts with a minus sign
    before the first digit are negative. Thousands separators may be dots,
    commas, spaces (including non-breaking and full-width spaces) or
    apostrophes. Indian grouping (``1,23,456``) is recognised.

    Args:
        value: The string to parse.

    Returns:
        float: The parsed amount; ``0.0`` for ``None``, blank, non-string or
        unparseable input.

    Examples:
        >>> parse_currency_string("Rp 15.000,10")
        15000.1
        >>> parse_currency_string("(1,234.50)")
        -1234.5
    """
    if not isinstance(value, str) or not value.strip():
        return 0.0

    text = _INVISIBLE_SPACES.sub("", value.strip())

    negative = False
    if _BRACKETED.match(text):
        negative = True
        text = text[1:-1].strip()

    text = _LEADING_SIGN.sub(lambda m: "-" if "-" in m.group() else "", text)
    text = _TRAILING_NOISE.sub("", text)
    negative = negative or text.startswith("-") or bool(_SIGN_BEFORE_DIGITS.match(text))

    digits = _SPACES_AND_APOSTROPHES.sub("", _NON_NUMERIC.sub("", text))
    digits = _normalize_separators(digits)

    match = _FLOAT_PREFIX.match(digits)
    amount = float(match.group()) if match else 0.0
    return -amount if negative and amount else amount
