"""Deep structural equality.

`is_equal` compares two values by structure rather than identity:

- Numbers compare by value, NaN equals NaN and ``-0.0`` equals ``0.0``.
  `bool` is not a number, so ``True`` never equals ``1``.
- Values of different concrete kinds are never equal: a `list` never
  equals a `tuple`, a `dict` never equals an `OrderedDict`.
- Sequences compare element-wise, mappings by key set and values, sets by
  membership, dates by instant, patterns by source and flags, errors by
  type and message, byte buffers and numpy arrays byte for byte.
- Other objects must share their exact type and then compare their
  instance attributes (``__dict__`` and ``__slots__``); objects without
  instance state fall back to ``==``.

Cyclic structures are supported. Every container pair currently being
compared is kept in a per-call set of ``(id(a), id(b))`` pairs; meeting a
pair again means the comparison is already in progress higher up and is
assumed to hold.
"""

from collections.abc import Callable, Iterator, Mapping

from ..assertions import assert_is_boolean, fail
from ..conversions.stringify import safe_stable_stringify
from ..kinds import NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind, get_precise_type

type SeenPairs = set[tuple[int, int]]
type EqualCustomizer = Callable[
    [object, object, object, object, object, SeenPairs], bool | None
]
type MatchCustomizer = Callable[[object, object, object, object, object], bool | None]

_NUMERIC = NUMBER_KINDS | {Kind.INFINITY}
_CONTAINERS = frozenset(
    {Kind.LIST, Kind.TUPLE, Kind.PLAIN_OBJECT, Kind.MAPPING, Kind.SET, Kind.OBJECT}
)


# ============================================================================
#                           Instance state helpers
# ============================================================================


def _slot_names(cls: type) -> Iterator[str]:
    slots = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    for name in slots:
        if name in ("__dict__", "__weakref__"):
            continue
        if name.startswith("__") and not name.endswith("__"):
            name = f"_{cls.__name__.lstrip('_')}{name}"
        yield name


def instance_state(obj: object) -> dict[str, object] | None:
    """Return the attributes held by ``obj``, or None if it holds none.

    Collects ``__dict__`` entries and every populated ``__slots__`` entry
    along the MRO.
    """
    state: dict[str, object] = {}
    has_state = False
    if hasattr(obj, "__dict__"):
        state.update(vars(obj))
        has_state = True
    for cls in type(obj).__mro__:
        for name in _slot_names(cls):
            has_state = True
            if hasattr(obj, name):
                state[name] = getattr(obj, name)
    return state if has_state else None


# ============================================================================
#                               Deep equality
# ============================================================================


def _compare_child(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    value: object,
    other: object,
    key: object,
    parent: object,
    other_parent: object,
    customizer: EqualCustomizer | None,
    seen: SeenPairs,
) -> bool:
    if customizer is not None:
        result = customizer(value, other, key, parent, other_parent, seen)
        if result is not None:
            return bool(result)
    return _deep_equal(value, other, customizer, seen)


def _scalar_equal(kind: Kind, a: object, b: object) -> bool:  # pylint: disable=too-many-return-statements
    match kind:
        case Kind.DECIMAL:
            return a == b or (a.is_nan() and b.is_nan())  # type: ignore[union-attr]
        case Kind.PATTERN:
            return a.pattern == b.pattern and a.flags == b.flags  # type: ignore[union-attr]
        case Kind.ERROR:
            return type(a) is type(b) and str(a) == str(b)
        case Kind.BYTES:
            return bytes(a) == bytes(b)  # type: ignore[call-overload]
        case Kind.NDARRAY:
            return (
                a.dtype == b.dtype  # type: ignore[union-attr]
                and a.shape == b.shape  # type: ignore[union-attr]
                and a.tobytes() == b.tobytes()  # type: ignore[union-attr]
            )
        case Kind.FUNCTION | Kind.GENERATOR:
            return False
        case _:
            return bool(a == b)


def _deep_equal(
    a: object, b: object, customizer: EqualCustomizer | None, seen: SeenPairs
) -> bool:
    if a is b:
        return True
    kind_a, kind_b = get_kind(a), get_kind(b)
    if kind_a is Kind.NAN and kind_b is Kind.NAN:
        return True
    if kind_a in _NUMERIC and kind_b in _NUMERIC:
        return bool(a == b)
    if kind_a is not kind_b:
        return False
    if kind_a not in _CONTAINERS:
        return _scalar_equal(kind_a, a, b)
    if kind_a is not Kind.PLAIN_OBJECT and type(a) is not type(b):
        return False

    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)
    try:
        return _containers_equal(kind_a, a, b, customizer, seen)
    finally:
        seen.discard(pair)


def _containers_equal(
    kind: Kind, a: object, b: object, customizer: EqualCustomizer | None, seen: SeenPairs
) -> bool:
    if kind in SEQUENCE_KINDS:
        if len(a) != len(b):  # type: ignore[arg-type]
            return False
        return all(
            _compare_child(x, y, i, a, b, customizer, seen)
            for i, (x, y) in enumerate(zip(a, b))  # type: ignore[call-overload]
        )
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        return _mappings_equal(a, b, customizer, seen)  # type: ignore[arg-type]
    if kind is Kind.SET:
        return _sets_equal(a, b, customizer, seen)  # type: ignore[arg-type]

    state_a, state_b = instance_state(a), instance_state(b)
    if state_a is None or state_b is None:
        return bool(a == b)
    return _mappings_equal(state_a, state_b, customizer, seen)


def _mappings_equal(
    a: Mapping, b: Mapping, customizer: EqualCustomizer | None, seen: SeenPairs
) -> bool:
    if len(a) != len(b):
        return False
    # hash-equal keys such as 1 and True must also be deeply equal
    stored_keys = {key: key for key in b}
    for key, value in a.items():
        if key not in stored_keys or not _deep_equal(key, stored_keys[key], None, seen):
            return False
        if not _compare_child(value, b[key], key, a, b, customizer, seen):
            return False
    return True


def _sets_equal(
    a: set | frozenset, b: set | frozenset, customizer: EqualCustomizer | None, seen: SeenPairs
) -> bool:
    if len(a) != len(b):
        return False
    candidates = list(b)
    matched: set[int] = set()
    for value in a:
        for index, other in enumerate(candidates):
            if index in matched:
                continue
            if _deep_equal(value, other, customizer, seen):
                matched.add(index)
                break
        else:
            return False
    return True


def is_equal(a: object, b: object) -> bool:
    """Return True if ``a`` and ``b`` are deeply equal.

    Examples:
        >>> is_equal({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]})
        True
        >>> is_equal([1, 2], (1, 2))
        False
        >>> is_equal(float("nan"), float("nan"))
        True
    """
    return _deep_equal(a, b, None, set())


def is_equal_with(a: object, b: object, customizer: EqualCustomizer | None = None) -> bool:
    """Deep equality with a per-item override.

    ``customizer(value, other, key, parent, other_parent, seen)`` is called
    for every sequence item, mapping value and object attribute. A
    non-``None`` result decides that comparison; ``None`` falls back to the
    default rules.

    Raises:
        TypeError: If ``customizer`` is neither None nor callable.
    """
    if customizer is not None and not callable(customizer):
        fail(
            customizer,
            "function",
            message=lambda current_type, valid_type: (
                f"Parameter `customizer` must be of type `{valid_type}`, "
                f"but received: `{current_type}`."
            ),
        )
    return _deep_equal(a, b, customizer, set())


# ============================================================================
#                               Partial matching
# ============================================================================


def _entries(source: object) -> Iterator[tuple[object, object]]:
    kind = get_kind(source)
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        yield from source.items()  # type: ignore[union-attr]
    elif kind in SEQUENCE_KINDS:
        yield from enumerate(source)  # type: ignore[call-overload]
    else:
        yield from (instance_state(source) or {}).items()


def _lookup(obj: object, key: object) -> tuple[bool, object]:
    kind = get_kind(obj)
    if kind in (Kind.PLAIN_OBJECT, Kind.MAPPING):
        return (key in obj, obj.get(key))  # type: ignore[operator,union-attr]
    if kind in SEQUENCE_KINDS:
        if isinstance(key, int) and -len(obj) <= key < len(obj):  # type: ignore[arg-type]
            return (True, obj[key])  # type: ignore[index]
        return (False, None)
    if isinstance(key, str) and hasattr(obj, key):
        return (True, getattr(obj, key))
    return (False, None)


def _base_is_match(obj: object, source: object, customizer: MatchCustomizer | None) -> bool:
    if obj is source:
        return True
    if get_kind(source) not in _CONTAINERS:
        return _deep_equal(obj, source, None, set())
    if get_kind(obj) not in _CONTAINERS:
        return False
    if get_kind(source) is Kind.SET:
        return get_kind(obj) is Kind.SET and all(
            any(_deep_equal(s, o, None, set()) for o in obj) for s in source  # type: ignore[union-attr]
        )

    for key, src_value in _entries(source):
        found, obj_value = _lookup(obj, key)
        if not found:
            return False
        if customizer is not None:
            result = customizer(obj_value, src_value, key, obj, source)
            if result is not None:
                if not result:
                    return False
                continue
        if not _base_is_match(obj_value, src_value, customizer):
            return False
    return True


def is_match(obj: object, source: object) -> bool:
    """Return True if ``obj`` contains every key of ``source`` with a matching value.

    Matching is partial and recursive: nested containers in ``source`` only
    need to be a subset of the corresponding containers in ``obj``.

    Examples:
        >>> is_match({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 2}})
        True
    """
    return _base_is_match(obj, source, None)


def is_match_with(
    obj: object, source: object, customizer: MatchCustomizer | None = None
) -> bool:
    """Partial matching with a per-key override.

    ``customizer(obj_value, source_value, key, obj, source)`` decides a key
    when it returns a non-``None`` result.
    """
    return _base_is_match(obj, source, customizer)


# ============================================================================
#                               List comparison
# ============================================================================


def _deep_sorted(values: list | tuple) -> list:
    items = [_deep_sorted(v) if get_kind(v) in SEQUENCE_KINDS else v for v in values]
    return sorted(items, key=safe_stable_stringify)


def are_arrays_equal(a: list | tuple, b: list | tuple, *, ignore_order: bool = False) -> bool:
    """Compare two lists item by item through their stable serialization.

    Args:
        a: First list.
        b: Second list.
        ignore_order: Sort both lists (and nested lists) before comparing.

    Returns:
        bool: Whether the lists hold the same items.

    Raises:
        TypeError: If ``a`` or ``b`` is not a list/tuple, or ``ignore_order``
            is not a boolean.
    """
    if get_kind(a) not in SEQUENCE_KINDS or get_kind(b) not in SEQUENCE_KINDS:
        raise TypeError(
            "Parameters `a` and `b` must be of type `list`, but received: "
            f"['a': `{get_precise_type(a)}`, 'b': `{get_precise_type(b)}`]."
        )
    assert_is_boolean(
        ignore_order,
        message=lambda current_type, valid_type: (
            f"Parameter `ignore_order` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if len(a) != len(b):
        return False
    left, right = (_deep_sorted(a), _deep_sorted(b)) if ignore_order else (a, b)
    return all(
        safe_stable_stringify(x) == safe_stable_stringify(y) for x, y in zip(left, right)
    )
