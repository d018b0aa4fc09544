"""Random integers, strings and list items.

Randomness comes from `secrets`, so generated values are suitable for
tokens and one-time codes.
"""

from __future__ import annotations

import re
import secrets
import string
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from ..assertions import assert_is_boolean
from ..conversions.stringify import safe_stable_stringify
from ..errors import RangeError
from ..kinds import MAX_SAFE_INTEGER, SEQUENCE_KINDS, Kind, get_kind, get_precise_type

type StrKind = Literal["string", "number"]

MAX_STR_LENGTH = 5000  # pragma: no mutate
MAX_INT_LENGTH = 16  # pragma: no mutate
DEFAULT_STRING_CHARSET = string.ascii_letters + string.digits
DEFAULT_NUMBER_CHARSET = string.digits

_WHITESPACE = re.compile(r"\s")
_INTEGER_KINDS = (Kind.INTEGER, Kind.BIG_INTEGER)


def _describe(name: str, value: object) -> str:
    return f"'{name}': `{get_precise_type(value)}` (with value: {safe_stable_stringify(value)})"


def _require_integers(**values: object) -> None:
    if any(get_kind(value) not in _INTEGER_KINDS for value in values.values()):
        described = ", ".join(_describe(name, value) for name, value in values.items())
        raise TypeError(
            f"Parameters {' and '.join(f'`{name}`' for name in values)} must be of "
            f"type `integer`, but received: [{described}]."
        )


def random_int(min_value: int, max_value: int) -> int:
    """Return a random integer in ``[min_value, max_value]``.

    The range is clamped to ``[1, MAX_SAFE_INTEGER]``.

    Raises:
        TypeError: If either bound is not an integer.
        RangeError: If ``min_value > max_value``, before or after clamping.

    Examples:
        >>> 1 <= random_int(1, 6) <= 6
        True
    """
    _require_integers(min_value=min_value, max_value=max_value)
    if min_value > max_value:
        raise RangeError(
            "Parameter `min_value` must be less than or equal to `max_value`, "
            f"but received: ['min_value': {min_value}, 'max_value': {max_value}]."
        )
    low, high = max(1, min_value), min(MAX_SAFE_INTEGER, max_value)
    if low > high:
        raise RangeError(
            f"No integer of [{min_value}, {max_value}] lies in [1, {MAX_SAFE_INTEGER}]."
        )
    return low + secrets.randbelow(high - low + 1)


def random_int_by_length(
    *, min_length: int = 1, max_length: int = 16, avoid_zero: bool = False
) -> int:
    """Return a random integer with between ``min_length`` and ``max_length`` digits.

    Args:
        min_length: Minimum number of digits, at least 1.
        max_length: Maximum number of digits, at most 16.
        avoid_zero: Never return 0.

    Raises:
        TypeError: If a length is not an integer or ``avoid_zero`` is not a
            boolean.
        RangeError: If the lengths are out of range or inverted.

    Examples:
        >>> len(str(random_int_by_length(min_length=4, max_length=4)))
        4
    """
    assert_is_boolean(
        avoid_zero,
        message=lambda current_type, valid_type: (
            f"Parameter `avoid_zero` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    _require_integers(min_length=min_length, max_length=max_length)
    if min_length < 1 or max_length > MAX_INT_LENGTH or min_length > max_length:
        raise RangeError(
            f"Parameters must satisfy 1 <= `min_length` <= `max_length` <= {MAX_INT_LENGTH}, "
            f"but received: ['min_length': {min_length}, 'max_length': {max_length}]."
        )
    length = min_length if min_length == max_length else random_int(min_length, max_length)
    smallest = 10 ** (length - 1)
    result = random_int(smallest, 10**length - 1)
    if avoid_zero and result == 0:
        result = smallest
    return result


# ============================================================================
#                               Random strings
# ============================================================================


@dataclass(frozen=True, slots=True)
class RandomStrOptions:  # pylint: disable=too-many-instance-attributes
    """Options for `random_str`.

    Attributes:
        min_length: Minimum length, at least 1.
        max_length: Maximum length, at most 5000.
        kind: ``"string"`` (letters and digits) or ``"number"`` (digits).
        avoid_whitespace: Strip whitespace from the character set.
        replace_charset: Character set replacing the default one. For
            ``"number"`` it is used only when it consists of digits.
        add_chars: Extra characters appended to the character set.
    """

    min_length: int = 40
    max_length: int = 40
    kind: StrKind = "string"
    avoid_whitespace: bool = True
    replace_charset: str | None = None
    add_chars: str = ""

    def __post_init__(self) -> None:
        assert_is_boolean(
            self.avoid_whitespace,
            message=lambda current_type, valid_type: (
                f"Option `avoid_whitespace` must be of type `{valid_type}`, "
                f"but received: `{current_type}`."
            ),
        )
        _require_integers(min_length=self.min_length, max_length=self.max_length)
        if not 1 <= self.min_length <= self.max_length <= MAX_STR_LENGTH:
            raise RangeError(
                "Options must satisfy 1 <= `min_length` <= `max_length` <= "
                f"{MAX_STR_LENGTH}, but received: ['min_length': {self.min_length}, "
                f"'max_length': {self.max_length}]."
            )
        if self.kind not in ("string", "number"):
            raise TypeError(
                'Option `kind` must be one of "string" | "number", but received: '
                f"`{get_precise_type(self.kind)}`, with value: {safe_stable_stringify(self.kind)}."
            )
        for name in ("replace_charset", "add_chars"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise TypeError(
                    f"Option `{name}` must be of type `string`, "
                    f"but received: `{get_precise_type(value)}`."
                )

    def charset(self) -> str:
        """Return the characters to draw from.

        Raises:
            ValueError: If the resulting character set is empty.
        """
        if self.kind == "number":
            usable = self.replace_charset and self.replace_charset.strip().isdigit()
            base = self.replace_charset if usable else DEFAULT_NUMBER_CHARSET
        else:
            base = self.replace_charset or DEFAULT_STRING_CHARSET
        if self.avoid_whitespace:
            base = _WHITESPACE.sub("", base)  # type: ignore[arg-type]
        characters = f"{base}{self.add_chars or ''}"
        if not characters:
            raise ValueError(
                "Character set is empty, ensure `replace_charset` or `add_chars` "
                "holds at least one usable character."
            )
        return characters


def random_str(options: RandomStrOptions | None = None) -> str:
    """Return a random string drawn from the character set of ``options``.

    Raises:
        TypeError: If ``options`` is not a `RandomStrOptions`.
        ValueError: If the character set is empty.

    Examples:
        >>> len(random_str())
        40
        >>> random_str(RandomStrOptions(min_length=6, max_length=6, kind="number")).isdigit()
        True
    """
    if options is None:
        options = RandomStrOptions()
    if not isinstance(options, RandomStrOptions):
        raise TypeError(
            "Parameter `options` must be a `RandomStrOptions`, "
            f"but received: `{get_precise_type(options)}`."
        )
    characters = options.charset()
    length = random_int(options.min_length, options.max_length)
    return "".join(secrets.choice(characters) for _ in range(length))


def get_random_item(items: Sequence | None) -> object:
    """Return a random item of a non-empty list or tuple, otherwise None."""
    if get_kind(items) not in SEQUENCE_KINDS or not items:
        return None
    return secrets.choice(items)
