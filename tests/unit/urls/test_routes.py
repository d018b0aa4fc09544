"""Unit tests for rzl_utils.urls.routes."""

import pytest

from rzl_utils.errors import RouteGenerationError
from rzl_utils.urls.routes import generate_route

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "route, params, expected",
    [
        ("/users/[id]/posts/[slug]", {"id": "42", "slug": "hello"}, "/users/42/posts/hello"),
        ("/about", None, "/about"),
        ("//users//[id]", {"id": "42"}, "/users/42"),
        ("/[lang]/docs", {"lang": "en", "unused": "x"}, "/en/docs"),
    ],
)
def test_generate_route(route, params, expected):
    """Placeholders are replaced by their values."""
    assert generate_route(route, params) == expected


@pytest.mark.parametrize("route", ["", "   ", None, 5])
def test_generate_route_rejects_blank_routes(route):
    with pytest.raises(TypeError, match="route"):
        generate_route(route)


def test_generate_route_requires_params():
    with pytest.raises(TypeError, match="Missing or invalid parameters"):
        generate_route("/users/[id]")


def test_generate_route_collects_every_problem():
    """All invalid placeholders are reported in one error."""
    with pytest.raises(RouteGenerationError) as exc_info:
        generate_route("/u/[id]/[slug]/[page]", {"id": "a b", "slug": "", "page": 3})
    error = exc_info.value
    assert error.route == "/u/[id]/[slug]/[page]"
    assert len(error.errors) == 3
    assert "`white-space(s)`" in error.errors[0]
    assert 'Parameter "slug" cannot be an empty string.' in str(error)
    assert "`integer`" in error.errors[2]


def test_missing_placeholder_value():
    with pytest.raises(RouteGenerationError, match='Parameter "id" must be of type `string`'):
        generate_route("/users/[id]", {})


def test_forbidden_characters_are_listed():
    with pytest.raises(RouteGenerationError) as exc_info:
        generate_route("/files/[name]", {"name": "a/b?c"})
    assert "(`?`, `/`)" in exc_info.value.errors[0]
