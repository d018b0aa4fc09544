"""Dynamic route generation.

Routes use bracketed placeholders, e.g. ``/users/[id]/posts/[slug]``.
"""

import re

from ..conversions.stringify import safe_stable_stringify
from ..errors import RouteGenerationError
from ..kinds import Kind, get_kind, get_precise_type

FORBIDDEN_CHARS = ("?", "&", "#", "=", "/", "'", '"', "(", ")", "+", ";", "%", "@", ":")
WHITESPACE_LABEL = "white-space(s)"

_PLACEHOLDER = re.compile(r"\[(\w+)\]")
_BRACKETS = re.compile(r"[\[\]]")
_WHITESPACE = re.compile(r"\s")
_REPEATED_SLASHES = re.compile(r"/+")


def _format_chars(chars: list[str] | tuple[str, ...]) -> str:
    return ", ".join(f"`{c}`" for c in chars)


def _param_errors(key: str, value: object) -> list[str]:
    if not isinstance(value, str):
        return [
            f'Parameter "{key}" must be of type `string`, '
            f"but received: `{get_precise_type(value)}`."
        ]
    if not value.strip():
        return [f'Parameter "{key}" cannot be an empty string.']
    found = [c for c in FORBIDDEN_CHARS if c in value]
    if _WHITESPACE.search(value):
        found.append(WHITESPACE_LABEL)
    if not found:
        return []
    return [
        f'Parameter "{key}" contains invalid characters ({_format_chars(found)}). '
        "The following characters are forbidden in route parameters: "
        f"({_format_chars(FORBIDDEN_CHARS + (WHITESPACE_LABEL,))})."
    ]


def generate_route(route: str, params: dict[str, str] | None = None) -> str:
    """Fill the ``[name]`` placeholders of ``route`` from ``params``.

    Every placeholder value must be a non-blank string free of URL
    delimiters and whitespace. All problems are collected and reported
    together. Leading and trailing slashes of values are dropped and
    repeated slashes in the result are collapsed.

    Args:
        route: The route template.
        params: Placeholder values; required when ``route`` has placeholders.

    Returns:
        str: The filled route; ``route`` unchanged when it has no brackets.

    Raises:
        TypeError: If ``route`` is blank or not a string, or ``params`` is
            not a dict while the route has placeholders.
        RouteGenerationError: If any placeholder value is missing or invalid.

    Examples:
        >>> generate_route("/users/[id]/posts/[slug]", {"id": "42", "slug": "hello"})
        '/users/42/posts/hello'
    """
    if not isinstance(route, str) or not route.strip():
        raise TypeError(
            "Parameter `route` must be a non-empty `string`, but received: "
            f"`{get_precise_type(route)}`, with value: `{safe_stable_stringify(route)}`."
        )
    if not _BRACKETS.search(route):
        return route
    if get_kind(params) is not Kind.PLAIN_OBJECT:
        raise TypeError(
            f"Missing or invalid parameters for route {route!r}: expected a "
            f"`plain-object` mapping placeholder names, but received: "
            f"`{get_precise_type(params)}`."
        )

    errors = []
    for key in _PLACEHOLDER.findall(route):
        errors.extend(_param_errors(key, params.get(key)))  # type: ignore[union-attr]
    if errors:
        raise RouteGenerationError(route, errors)

    filled = _PLACEHOLDER.sub(lambda m: params[m.group(1)].strip().strip("/"), route)  # type: ignore[index]
    return _REPEATED_SLASHES.sub("/", filled)
