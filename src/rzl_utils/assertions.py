"""Type-contract assertions.

Each ``assert_is_*`` function returns ``None`` when ``value`` has the
expected kind and raises otherwise. The raised error names the expected and
the received kind:

    Parameter input (`value`) must be of type `string`, but received: `integer`.

Callers may replace that text with a static ``message`` or with a callable
receiving ``current_type=`` and ``valid_type=`` keyword arguments, and may
choose the raised class with ``error_type`` (``TypeError`` by default).
"""

from collections.abc import Callable
from typing import NoReturn

from .kinds import NUMBER_KINDS, SEQUENCE_KINDS, Kind, get_kind, get_precise_type

type MessageFactory = Callable[..., str]
type AssertMessage = str | MessageFactory | None

DEFAULT_MESSAGE = (
    "Parameter input (`value`) must be of type `{valid_type}`, "
    "but received: `{current_type}`."
)


def _resolve_message(
    value: object, valid_type: str, message: AssertMessage, format_case: str
) -> str:
    current_type = get_precise_type(value, format_case)
    default = DEFAULT_MESSAGE.format(valid_type=valid_type, current_type=current_type)
    if callable(message):
        message = message(current_type=current_type, valid_type=valid_type)
    if isinstance(message, str) and message.strip():
        return message.strip()
    return default


def fail(
    value: object,
    valid_type: str,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> NoReturn:
    """Raise ``error_type`` describing a kind mismatch for ``value``.

    Args:
        value: The offending value.
        valid_type: Readable name of the expected kind.
        message: Static message or message factory overriding the default.
        error_type: Exception class to raise.
        format_case: Case used to render the received kind.

    Raises:
        TypeError: If ``error_type`` is not an exception class.
    """
    if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
        raise TypeError(
            "Parameter `error_type` must be an exception class, but received: "
            f"`{get_precise_type(error_type)}`."
        )
    raise error_type(_resolve_message(value, valid_type, message, format_case))


def assert_is_string(
    value: object,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is a `str`."""
    if get_kind(value) is not Kind.STRING:
        fail(
            value,
            "string",
            message=message,
            error_type=error_type,
            format_case=format_case,
        )


def assert_is_boolean(
    value: object,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is a `bool`."""
    if get_kind(value) is not Kind.BOOLEAN:
        fail(
            value,
            "boolean",
            message=message,
            error_type=error_type,
            format_case=format_case,
        )


def assert_is_number(  # pylint: disable=too-many-arguments
    value: object,
    *,
    include_nan: bool = False,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is a real number.

    Booleans are never numbers. Infinity is accepted, NaN only when
    ``include_nan`` is set.
    """
    kind = get_kind(value)
    if kind in NUMBER_KINDS or kind is Kind.INFINITY:
        return
    if include_nan and kind is Kind.NAN:
        return
    fail(
        value, "number", message=message, error_type=error_type, format_case=format_case
    )


def assert_is_integer(
    value: object,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is an `int` (booleans excluded)."""
    if get_kind(value) not in (Kind.INTEGER, Kind.BIG_INTEGER):
        fail(
            value,
            "integer",
            message=message,
            error_type=error_type,
            format_case=format_case,
        )


def assert_is_big_integer(
    value: object,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is an `int` outside the safe-integer range."""
    if get_kind(value) is not Kind.BIG_INTEGER:
        fail(
            value,
            "big-integer",
            message=message,
            error_type=error_type,
            format_case=format_case,
        )


def assert_is_list(
    value: object,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is a `list` or a `tuple`."""
    if get_kind(value) not in SEQUENCE_KINDS:
        fail(
            value, "list", message=message, error_type=error_type, format_case=format_case
        )


def assert_is_plain_object(
    value: object,
    *,
    message: AssertMessage = None,
    error_type: type[BaseException] = TypeError,
    format_case: str = "kebab",
) -> None:
    """Assert that ``value`` is exactly a `dict`."""
    if get_kind(value) is not Kind.PLAIN_OBJECT:
        fail(
            value,
            "plain-object",
            message=message,
            error_type=error_type,
            format_case=format_case,
        )
