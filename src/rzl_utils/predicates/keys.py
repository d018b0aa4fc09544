"""Key and membership predicates for nested containers."""

import re

from ..assertions import assert_is_boolean, fail
from ..kinds import SEQUENCE_KINDS, Kind, get_kind

_BRACKET_INDEX = re.compile(r"^\[(\d+)\]$")
_MAPPING_KINDS = (Kind.PLAIN_OBJECT, Kind.MAPPING)


def _parse_path(key: str | int) -> list[str | int]:
    """Split a dotted path such as ``"a.b.[0].c"`` into its segments.

    Bracketed or all-digit segments become integers.
    """
    segments: list[str | int] = []
    for part in str(key).split("."):
        if match := _BRACKET_INDEX.match(part):
            segments.append(int(match.group(1)))
        elif part.isdigit():
            segments.append(int(part))
        else:
            segments.append(part)
    return segments


def _step(current: object, segment: str | int) -> tuple[bool, object]:
    kind = get_kind(current)
    if kind in _MAPPING_KINDS:
        for candidate in (segment, str(segment)):
            if candidate in current:  # type: ignore[operator]
                return (True, current[candidate])  # type: ignore[index]
        return (False, None)
    if kind in SEQUENCE_KINDS or kind is Kind.STRING:
        if isinstance(segment, int) and segment < len(current):  # type: ignore[arg-type]
            return (True, current[segment])  # type: ignore[index]
        return (False, None)
    if kind in (Kind.NONE, Kind.BOOLEAN) or not isinstance(segment, str):
        return (False, None)
    if segment and hasattr(current, "__dict__") and segment in vars(current):
        return (True, vars(current)[segment])
    return (False, None)


def has_own_prop(obj: object, key: str | int, *, discard_none: bool = False) -> bool:
    """Return True if ``obj`` holds ``key``, a dotted path through nested containers.

    Path segments address mapping keys, sequence indexes (``"items.0"`` or
    ``"items.[0]"``) and instance attributes.

    Args:
        obj: Mapping, sequence, string or object to look into.
        key: Key or dotted path.
        discard_none: Report False when the final value is ``None``.

    Returns:
        bool: Whether the path exists.

    Raises:
        TypeError: If ``discard_none`` is not a boolean.

    Examples:
        >>> has_own_prop({"user": {"emails": ["a@b.co"]}}, "user.emails.[0]")
        True
        >>> has_own_prop({"a": None}, "a", discard_none=True)
        False
    """
    assert_is_boolean(
        discard_none,
        message=lambda current_type, valid_type: (
            f"Parameter `discard_none` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if get_kind(obj) in (Kind.NONE, Kind.BOOLEAN, Kind.INTEGER, Kind.FLOAT):
        return False
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        return False
    if isinstance(key, str) and not key.strip():
        return False

    current = obj
    for segment in _parse_path(key):
        found, current = _step(current, segment)
        if not found:
            return False
    return not (discard_none and current is None)


def does_key_exist(obj: object, key: str | int) -> bool:
    """Return True if ``key`` appears anywhere in nested dicts and lists.

    Raises:
        TypeError: If ``key`` is neither a string nor a number.

    Examples:
        >>> does_key_exist({"a": [{"b": 1}]}, "b")
        True
    """
    kind = get_kind(obj)
    if kind not in _MAPPING_KINDS and kind not in SEQUENCE_KINDS:
        return False
    if get_kind(key) not in (Kind.STRING, Kind.INTEGER, Kind.FLOAT):
        fail(
            key,
            "string` or `number",
            message=lambda current_type, valid_type: (
                f"Second parameter (`key`) must be of type `{valid_type}`, "
                f"but received: `{current_type}`."
            ),
        )
    if kind in _MAPPING_KINDS:
        if key in obj:  # type: ignore[operator]
            return True
        return any(does_key_exist(v, key) for v in obj.values())  # type: ignore[union-attr]
    return any(does_key_exist(item, key) for item in obj)  # type: ignore[union-attr]


def array_has_any_match(source: list | tuple | None, target: list | tuple | None) -> bool:
    """Return True if any item of ``target`` is also in ``source``.

    ``None``, empty or non-list arguments yield False.
    """
    if get_kind(source) not in SEQUENCE_KINDS or get_kind(target) not in SEQUENCE_KINDS:
        return False
    if not source or not target:
        return False
    return any(item in source for item in target)
