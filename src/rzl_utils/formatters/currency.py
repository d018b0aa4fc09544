"""Currency formatting.

`format_currency` renders an amount with configurable grouping, decimal
separator, rounding and negative style. Options live in a frozen
`CurrencyFormat` value object that validates itself on construction, so an
invalid option fails where it is written rather than where it is used.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext
from typing import Literal

from ..conversions.currency import parse_currency_string
from ..kinds import NUMBER_KINDS, Kind, get_kind, get_precise_type
from .numbers import group_thousands

type Rounding = Literal["round", "ceil", "floor"] | None
type NegativeStyle = Literal["dash", "brackets", "abs"]

ROUNDING_MODES = {"round": ROUND_HALF_UP, "ceil": ROUND_CEILING, "floor": ROUND_FLOOR}
NEGATIVE_STYLES = ("dash", "brackets", "abs")
MAX_PRECISION = 400  # pragma: no mutate

_INDIAN_GROUPS = re.compile(r"\B(?=(?:\d{2})+(?!\d))")


def _require(condition: bool, field_name: str, expected: str, value: object) -> None:
    if not condition:
        raise TypeError(
            f"Option `{field_name}` must be {expected}, but received: "
            f"`{get_precise_type(value)}` ({value!r})."
        )


@dataclass(frozen=True, slots=True)
class NegativeFormat:
    """Negative amount style with optional inner spacing.

    ``NegativeFormat("brackets", space=True)`` renders ``( 1.000 )``.
    """

    style: NegativeStyle = "dash"
    space: bool = False

    def __post_init__(self) -> None:
        _require(self.style in NEGATIVE_STYLES, "style", f"one of {NEGATIVE_STYLES}", self.style)
        _require(isinstance(self.space, bool), "space", "a boolean", self.space)

    def apply(self, formatted: str) -> str:
        """Wrap ``formatted`` (an absolute amount) in the negative style."""
        gap = " " if self.space else ""
        match self.style:
            case "dash":
                return f"-{gap}{formatted}"
            case "brackets":
                return f"({gap}{formatted}{gap})"
            case _:
                return formatted


@dataclass(frozen=True, slots=True)
class CurrencyFormat:  # pylint: disable=too-many-instance-attributes
    """Options for `format_currency`.

    Attributes:
        separator: Thousands separator.
        decimal_separator: Separator between integer and fraction digits.
        decimal: Render fraction digits.
        total_decimal: Number of fraction digits.
        end_decimal: Append ``suffix_decimal`` after the fraction digits.
        suffix_currency: Text put before the amount, e.g. ``"Rp "``.
        suffix_decimal: Text put after the fraction digits, e.g. ``".-"``.
        rounding: ``"round"``, ``"ceil"``, ``"floor"`` or None to truncate.
        negative: ``"dash"``, ``"brackets"``, ``"abs"``, a `NegativeFormat`,
            or a callable receiving the absolute formatted amount.
        indian_format: Group as ``12,34,567.00`` (forces ``,`` and ``.``).
    """

    separator: str = "."
    decimal_separator: str = ","
    decimal: bool = False
    total_decimal: int = 2
    end_decimal: bool = True
    suffix_currency: str = ""
    suffix_decimal: str = ""
    rounding: Rounding = "round"
    negative: NegativeStyle | NegativeFormat | Callable[[str], str] = "dash"
    indian_format: bool = False

    def __post_init__(self) -> None:
        for name in ("separator", "decimal_separator", "suffix_currency", "suffix_decimal"):
            value = getattr(self, name)
            _require(isinstance(value, str), name, "a string", value)
        for name in ("decimal", "end_decimal", "indian_format"):
            value = getattr(self, name)
            _require(isinstance(value, bool), name, "a boolean", value)
        _require(
            get_kind(self.total_decimal) is Kind.INTEGER and self.total_decimal >= 0,
            "total_decimal",
            "a non-negative integer",
            self.total_decimal,
        )
        _require(
            self.rounding is None or self.rounding in ROUNDING_MODES,
            "rounding",
            f"None or one of {tuple(ROUNDING_MODES)}",
            self.rounding,
        )
        _require(
            self.negative in NEGATIVE_STYLES
            or isinstance(self.negative, NegativeFormat)
            or callable(self.negative),
            "negative",
            f"one of {NEGATIVE_STYLES}, a NegativeFormat or a callable",
            self.negative,
        )

    def apply_negative(self, formatted: str) -> str:
        """Render ``formatted`` as a negative amount."""
        if isinstance(self.negative, NegativeFormat):
            return self.negative.apply(formatted)
        if isinstance(self.negative, str):
            return NegativeFormat(self.negative).apply(formatted)
        result = self.negative(formatted)
        if not isinstance(result, str):
            raise TypeError(
                "Option `negative` callable must return a string, but returned: "
                f"`{get_precise_type(result)}`."
            )
        return result


def _split_amount(amount: Decimal, options: CurrencyFormat) -> tuple[str, str]:
    """Return the integer and fraction digits of the absolute ``amount``."""
    places = options.total_decimal
    if options.rounding is not None:
        with localcontext() as ctx:
            ctx.prec = MAX_PRECISION
            quantum = Decimal(1).scaleb(-places)
            amount = amount.quantize(quantum, rounding=ROUNDING_MODES[options.rounding])
        integer, _, fraction = f"{amount:f}".partition(".")
        return integer, fraction.ljust(places, "0")
    integer, _, fraction = f"{amount:f}".partition(".")
    return integer, fraction[:places].ljust(places, "0")


def _indian_grouping(digits: str) -> str:
    head, tail = digits[:-3], digits[-3:]
    if not head:
        return tail
    return f"{_INDIAN_GROUPS.sub(',', head)},{tail}"


def format_currency(value: str | int | float, options: CurrencyFormat | None = None) -> str:
    """Format ``value`` as a currency amount.

    Strings are first parsed with `parse_currency_string`.

    Args:
        value: Amount to format.
        options: Formatting options; defaults to ``CurrencyFormat()``.

    Returns:
        str: The formatted amount.

    Raises:
        TypeError: If ``value`` is neither a string nor a finite number, or
            ``options`` is not a `CurrencyFormat`.

    Examples:
        >>> format_currency(1234567.555, CurrencyFormat(decimal=True, suffix_currency="Rp "))
        'Rp 1.234.567,56'
        >>> format_currency(-1500, CurrencyFormat(negative="brackets"))
        '(1.500)'
    """
    kind = get_kind(value)
    if kind is not Kind.STRING and kind not in NUMBER_KINDS:
        raise TypeError(
            "First parameter (`value`) must be of type `string` or `number`, "
            f"but received: `{get_precise_type(value)}`."
        )
    if options is None:
        options = CurrencyFormat()
    if not isinstance(options, CurrencyFormat):
        raise TypeError(
            "Second parameter (`options`) must be a `CurrencyFormat`, "
            f"but received: `{get_precise_type(options)}`."
        )

    raw = parse_currency_string(value) if isinstance(value, str) else value
    if isinstance(raw, numbers.Integral):
        amount = Decimal(int(raw))
    else:
        amount = Decimal(repr(float(raw)))
    integer, fraction = _split_amount(abs(amount), options)

    decimal_separator = options.decimal_separator
    if options.indian_format:
        decimal_separator = "."
        grouped = _indian_grouping(integer)
    else:
        grouped = group_thousands(integer, options.separator)

    prefix = options.suffix_currency if options.suffix_currency.strip() else ""
    formatted = prefix + grouped
    if options.decimal and options.total_decimal > 0:
        formatted += decimal_separator + fraction
        if options.end_decimal:
            formatted += options.suffix_decimal

    if amount < 0:
        formatted = options.apply_negative(formatted)
    return formatted
