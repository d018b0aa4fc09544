"""Word search predicates."""

import re
from collections.abc import Sequence

from ..assertions import assert_is_boolean
from ..kinds import SEQUENCE_KINDS, Kind, get_kind


def _word_patterns(words: Sequence[str], exact_match: bool) -> list[str]:
    escaped = [re.escape(w) for w in words if isinstance(w, str) and w.strip()]
    if exact_match:
        return [rf"(?<!\S){w}(?!\S)" for w in escaped]
    return escaped


def _prepare(
    text: str | None, words: Sequence[str] | None, exact_match: bool, ignore_case: bool
) -> tuple[list[str], int] | None:
    if get_kind(text) is not Kind.STRING or not text.strip():  # type: ignore[union-attr]
        return None
    if get_kind(words) not in SEQUENCE_KINDS:
        return None
    for name, option in (("exact_match", exact_match), ("ignore_case", ignore_case)):
        assert_is_boolean(
            option,
            message=lambda current_type, valid_type, name=name: (
                f"Parameter `{name}` must be of type `{valid_type}`, "
                f"but received: `{current_type}`."
            ),
        )
    patterns = _word_patterns(words, exact_match)  # type: ignore[arg-type]
    if not patterns:
        return None
    return patterns, re.IGNORECASE if ignore_case else 0


def text_contains_all(
    text: str | None,
    words: Sequence[str] | None,
    *,
    exact_match: bool = False,
    ignore_case: bool = True,
) -> bool:
    """Return True if ``text`` contains every non-blank word of ``words``.

    Args:
        text: Text to search.
        words: Words to look for; blank entries are ignored.
        exact_match: Only match whole whitespace-delimited words.
        ignore_case: Match case-insensitively.

    Returns:
        bool: False for blank text, a non-list ``words`` or no usable words.

    Raises:
        TypeError: If an option is not a boolean.
    """
    prepared = _prepare(text, words, exact_match, ignore_case)
    if prepared is None:
        return False
    patterns, flags = prepared
    return all(re.search(p, text, flags) for p in patterns)  # type: ignore[arg-type]


def text_contains_any(
    text: str | None,
    words: Sequence[str] | None,
    *,
    exact_match: bool = False,
    ignore_case: bool = True,
) -> bool:
    """Return True if ``text`` contains at least one non-blank word of ``words``.

    Takes the same arguments as `text_contains_all`.
    """
    prepared = _prepare(text, words, exact_match, ignore_case)
    if prepared is None:
        return False
    patterns, flags = prepared
    return re.search("|".join(f"(?:{p})" for p in patterns), text, flags) is not None  # type: ignore[arg-type]
