"""String sanitizers.

Sanitizers normalize whitespace and markup without changing what a string
means. They are lenient: ``None`` and other non-string input yield ``""``
(or ``None`` for `strip_html_tags`) instead of raising.
"""

import re

_WHITESPACE = re.compile(r"\s+")
_HTML_TAG = re.compile(r"</?[a-zA-Z][^<>]*/?>")


def normalize_spaces(
    value: str | None, *, with_trim: bool = True, trim_only: bool = False
) -> str:
    """Collapse every whitespace run into a single space.

    Args:
        value: The string to normalize.
        with_trim: Trim leading and trailing whitespace first.
        trim_only: Only trim, leave inner whitespace untouched.

    Returns:
        str: The normalized string, ``""`` for non-string or blank input.
    """
    if not isinstance(value, str) or not value.strip():
        return ""
    if trim_only:
        return value.strip()
    if with_trim:
        value = value.strip()
    return _WHITESPACE.sub(" ", value)


def normalize_string(value: str | None) -> str:
    """Return the trimmed string, or ``""`` for non-string or blank input."""
    return value.strip() if isinstance(value, str) else ""


def remove_spaces(value: str | None, *, trim_only: bool = False) -> str:
    """Remove all whitespace (including full-width spaces) from ``value``.

    Examples:
        >>> remove_spaces("  a b\\u3000c ")
        'abc'
        >>> remove_spaces(None)
        ''
    """
    if not isinstance(value, str) or not value.strip():
        return ""
    if trim_only:
        return value.strip()
    return _WHITESPACE.sub("", value)


def strip_html_tags(value: object) -> str | None:
    """Remove HTML tags, keeping the text content.

    Each tag is replaced by a space and whitespace is then collapsed, so
    adjacent blocks do not glue their words together. Text that merely
    contains ``<`` or ``>`` is left alone.

    Returns:
        str | None: The text, ``""`` for an empty string, None for non-strings.

    Examples:
        >>> strip_html_tags("<div><b>Bold</b> text</div>")
        'Bold text'
        >>> strip_html_tags("2 < 5 and 5 > 2")
        '2 < 5 and 5 > 2'
    """
    if not isinstance(value, str):
        return None
    if not value:
        return ""
    return _WHITESPACE.sub(" ", _HTML_TAG.sub(" ", value)).strip()
