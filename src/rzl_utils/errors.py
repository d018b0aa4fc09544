"""Error definitions shared across RZL Utils.

Type-contract violations are reported with the builtin `TypeError` (see
`rzl_utils.assertions`). The classes below cover value-contract violations
and failures specific to individual helpers.
"""

from __future__ import annotations

from collections.abc import Sequence

# ============================================================================
#                               Base errors
# ============================================================================


class RzlUtilsError(Exception):
    """Base class for library-specific errors."""


class RangeError(RzlUtilsError, ValueError):
    """Raised when a value of the right kind falls outside its allowed range.

    Subclasses `ValueError` so callers that only know the builtin hierarchy
    can still catch it.
    """


# ============================================================================
#                               URL errors
# ============================================================================


class NormalizePathnameError(RzlUtilsError):
    """Raised when a pathname cannot be normalized.

    Wraps the unexpected error raised while normalizing and keeps it available
    as `original_error` (it is also chained as `__cause__`).
    """

    def __init__(self, message: str, original_error: BaseException) -> None:
        super().__init__(message)
        self.original_error = original_error

    def to_dict(self) -> dict[str, object]:
        """Return a serializable summary of the error.

        Returns:
            dict[str, object]: The error name, message and the wrapped error's
            name and message.
        """
        return {
            "name": type(self).__name__,
            "message": str(self),
            "original_error": {
                "name": type(self.original_error).__name__,
                "message": str(self.original_error),
            },
        }


class RouteGenerationError(RzlUtilsError, ValueError):
    """Raised when a dynamic route cannot be filled from its parameters."""

    def __init__(self, route: str, errors: Sequence[str]) -> None:
        details = "\n".join(f"- {e}" for e in errors)
        super().__init__(f"Invalid parameters for route '{route}':\n{details}")
        self.route = route
        self.errors = tuple(errors)


class EnvironmentUrlError(RzlUtilsError, ValueError):
    """Raised when a URL read from the environment cannot be parsed."""

    def __init__(self, variable: str, value: str) -> None:
        super().__init__(
            f"Environment variable {variable} does not hold a valid URL: {value!r}."
        )
        self.variable = variable
        self.value = value
