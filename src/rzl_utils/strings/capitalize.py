"""Capitalization helpers."""

import re

_WHITESPACE = re.compile(r"\s+")
_LEADING_WS = re.compile(r"^\s*")
_TRAILING_WS = re.compile(r"\s*$")


def capitalize_first(
    value: str | None, *, lower_rest: bool = True, trim: bool = False
) -> str:
    """Upper-case the first character of ``value``.

    Args:
        value: The string to capitalize.
        lower_rest: Lower-case the remaining characters.
        trim: Trim the string first.

    Returns:
        str: The capitalized string, ``""`` for non-string or blank input.
    """
    if not isinstance(value, str) or not value.strip():
        return ""
    if trim:
        value = value.strip()
    rest = value[1:].lower() if lower_rest else value[1:]
    return value[0].upper() + rest


def capitalize_words(
    value: str | None, *, trim: bool = False, collapse_spaces: bool = False
) -> str:
    """Capitalize every space separated word and lower-case the rest.

    Args:
        value: The string to capitalize.
        trim: Trim the string first.
        collapse_spaces: Collapse inner whitespace runs into single spaces
            (leading and trailing whitespace is kept unless ``trim`` is set).

    Returns:
        str: The capitalized string, ``""`` for non-string or blank input.

    Examples:
        >>> capitalize_words("  hello   world  ", trim=True, collapse_spaces=True)
        'Hello World'
    """
    if not isinstance(value, str) or not value.strip():
        return ""
    result = value.strip() if trim else value
    if collapse_spaces:
        leading = _LEADING_WS.match(result).group()  # type: ignore[union-attr]
        trailing = _TRAILING_WS.search(result).group()  # type: ignore[union-attr]
        result = f"{leading}{_WHITESPACE.sub(' ', result.strip())}{trailing}"
    return " ".join(word[:1].upper() + word[1:] for word in result.lower().split(" "))
