"""Boolean coercion.

Four strategies, from the most lenient to the strictest:

- `to_boolean_loose`: Python truthiness, except that blank strings are
  false.
- `to_boolean_content`: like `to_boolean_loose`, but containers are true
  only when they hold something meaningful (see `is_non_empty_value`).
- `to_boolean_content_deep`: true if anything nested inside the value is
  true.
- `to_boolean_explicit`: only explicit markers (``True``, ``1``, ``"true"``,
  ``"on"``, ``"yes"``, ``"1"``) are true.
"""

from ..kinds import NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind, get_precise_type
from ..predicates.emptiness import is_non_empty_string, is_non_empty_value

TRUE_STRINGS = ("true", "on", "yes", "1")
INDETERMINATE = "indeterminate"

_NUMBERS = NUMBER_KINDS | {Kind.NAN, Kind.INFINITY}
_OBJECTS = (Kind.PLAIN_OBJECT, Kind.MAPPING, Kind.OBJECT)


def to_boolean_loose(value: object) -> bool:
    """Truthiness with blank strings counted as false."""
    kind = get_kind(value)
    if kind is Kind.NONE:
        return False
    if kind is Kind.STRING:
        return is_non_empty_string(value)
    if kind is Kind.BOOLEAN:
        return value  # type: ignore[return-value]
    if kind in _NUMBERS:
        return value != 0
    if kind in SEQUENCE_KINDS:
        return len(value) > 0  # type: ignore[arg-type]
    if kind is Kind.NDARRAY:
        return value.size > 0  # type: ignore[union-attr]
    return bool(value)


def to_boolean_content(value: object) -> bool:
    """Return True if ``value`` carries meaningful content.

    Examples:
        >>> to_boolean_content({})
        False
        >>> to_boolean_content("  ")
        False
        >>> to_boolean_content(0.5)
        True
    """
    kind = get_kind(value)
    if kind is Kind.NONE:
        return False
    if kind is Kind.STRING:
        return is_non_empty_string(value)
    if kind is Kind.BOOLEAN:
        return value  # type: ignore[return-value]
    if kind in _NUMBERS:
        return value != 0
    if kind in SEQUENCE_KINDS or kind in _OBJECTS:
        return is_non_empty_value(value)
    if kind is Kind.NDARRAY:
        return value.size > 0  # type: ignore[union-attr]
    return bool(value)


def to_boolean_content_deep(value: object) -> bool:
    """Return True if ``value``, or anything nested in it, carries content.

    Examples:
        >>> to_boolean_content_deep({"a": [0, "", {"b": None}]})
        False
        >>> to_boolean_content_deep([[], [[" x "]]])
        True
    """
    kind = get_kind(value)
    if kind is Kind.NONE:
        return False
    if kind is Kind.STRING:
        return is_non_empty_string(value)
    if kind is Kind.BOOLEAN:
        return value  # type: ignore[return-value]
    if kind in _NUMBERS:
        return value != 0
    if kind in SEQUENCE_KINDS or kind is Kind.SET:
        return any(to_boolean_content_deep(item) for item in value)  # type: ignore[union-attr]
    if kind is Kind.NDARRAY:
        return any(to_boolean_content_deep(item) for item in value.ravel().tolist())  # type: ignore[union-attr]
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        return any(to_boolean_content_deep(v) for v in value.values())  # type: ignore[union-attr]
    if kind is Kind.OBJECT and hasattr(value, "__dict__"):
        return any(to_boolean_content_deep(v) for v in vars(value).values())
    return False


def to_boolean_explicit(
    value: object,
    *,
    case_insensitive: bool = False,
    trim_string: bool = True,
    include_indeterminate: bool = False,
) -> bool:
    """Return True only for explicit "yes" markers.

    Args:
        value: Value to convert.
        case_insensitive: Lower-case strings before matching.
        trim_string: Trim strings before matching.
        include_indeterminate: Also accept ``"indeterminate"``.

    Returns:
        bool: True for ``True``, the number ``1`` and the strings ``"true"``,
        ``"on"``, ``"yes"`` and ``"1"``; False otherwise.

    Raises:
        TypeError: If any option is not a boolean.

    Examples:
        >>> to_boolean_explicit(" yes ")
        True
        >>> to_boolean_explicit("YES")
        False
        >>> to_boolean_explicit("YES", case_insensitive=True)
        True
    """
    options = (case_insensitive, trim_string, include_indeterminate)
    if any(get_kind(option) is not Kind.BOOLEAN for option in options):
        raise TypeError(
            "Parameters `case_insensitive`, `trim_string` and `include_indeterminate` "
            "must be of type `boolean`, but received: "
            f"['case_insensitive': `{get_precise_type(case_insensitive)}`, "
            f"'trim_string': `{get_precise_type(trim_string)}`, "
            f"'include_indeterminate': `{get_precise_type(include_indeterminate)}`]."
        )

    kind = get_kind(value)
    if kind is Kind.STRING:
        text: str = value  # type: ignore[assignment]
        if trim_string:
            text = text.strip()
        if case_insensitive:
            text = text.lower()
        accepted = TRUE_STRINGS + (INDETERMINATE,) if include_indeterminate else TRUE_STRINGS
        return text in accepted
    if kind in NUMBER_KINDS:
        return value == 1
    if kind is Kind.BOOLEAN:
        return value  # type: ignore[return-value]
    return False
