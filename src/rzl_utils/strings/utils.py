"""Miscellaneous string helpers."""

import re

from ..errors import RangeError
from ..kinds import Kind, get_kind, get_precise_type

_WHITESPACE = re.compile(r"\s+")


def get_initials_name(name: str | None) -> str:
    """Return up to two upper-case initials for ``name``.

    Multi-word names give the first letter of the first two words; single
    words give their first two letters.

    Examples:
        >>> get_initials_name("John Doe")
        'JD'
        >>> get_initials_name("Alice")
        'AL'
        >>> get_initials_name(None)
        ''
    """
    if not isinstance(name, str) or not name.strip():
        return ""
    parts = _WHITESPACE.sub(" ", name).strip().split(" ")
    if len(parts) > 1:
        return (parts[0][0] + parts[1][0]).upper()
    return parts[0][:2].upper()


def replace_at(index: int, original: str, replacement: str) -> str:
    """Replace the character at ``index`` of ``original`` with ``replacement``.

    Args:
        index: Zero-based position of the character to replace.
        original: The source string.
        replacement: Text inserted in place of that character.

    Returns:
        str: The new string.

    Raises:
        TypeError: If ``index`` is not an integer or a string argument is not a `str`.
        RangeError: If ``index`` is outside ``[0, len(original))``.

    Examples:
        >>> replace_at(3, "hello", "X")
        'helXo'
    """
    if (
        get_kind(index) is not Kind.INTEGER
        or not isinstance(original, str)
        or not isinstance(replacement, str)
    ):
        raise TypeError(
            "First parameter (`index`) must be of type `integer`, second parameter "
            "(`original`) and third parameter (`replacement`) must be of type "
            f"`string`, but received: ['index': `{get_precise_type(index)}`, "
            f"'original': `{get_precise_type(original)}`, "
            f"'replacement': `{get_precise_type(replacement)}`]."
        )
    if index < 0 or index >= len(original):
        raise RangeError(
            f"First parameter (`index`) {index} is out of range for a string "
            f"of length {len(original)}."
        )
    return original[:index] + replacement + original[index + 1 :]
