"""Unit tests for rzl_utils.errors."""

import pytest

from rzl_utils.errors import (
    EnvironmentUrlError,
    NormalizePathnameError,
    RangeError,
    RouteGenerationError,
    RzlUtilsError,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "error_class", [RangeError, RouteGenerationError, EnvironmentUrlError]
)
def test_value_errors_share_the_builtin_hierarchy(error_class):
    """Value-contract errors are both library errors and ValueErrors."""
    assert issubclass(error_class, RzlUtilsError)
    assert issubclass(error_class, ValueError)


def test_normalize_pathname_error_to_dict():
    """The serialized form carries the wrapped error."""
    original = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    err = NormalizePathnameError("Failed to normalize pathname", original)
    assert err.original_error is original
    assert err.to_dict() == {
        "name": "NormalizePathnameError",
        "message": "Failed to normalize pathname",
        "original_error": {"name": "UnicodeDecodeError", "message": str(original)},
    }


def test_route_generation_error_lists_every_problem():
    """Each parameter problem is listed on its own line."""
    err = RouteGenerationError("/users/[id]", ["first", "second"])
    assert str(err) == "Invalid parameters for route '/users/[id]':\n- first\n- second"
    assert err.errors == ("first", "second")


def test_environment_url_error_message():
    """The message names the variable and its value."""
    err = EnvironmentUrlError("RZL_BASE_URL", "ftp://x")
    assert str(err) == "Environment variable RZL_BASE_URL does not hold a valid URL: 'ftp://x'."
