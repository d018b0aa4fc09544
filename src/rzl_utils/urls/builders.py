"""URL construction helpers."""

import re
from collections.abc import Iterable, Mapping
from urllib.parse import ParseResult, SplitResult, parse_qsl, urlencode, urlsplit

from ..assertions import assert_is_boolean, assert_is_list
from ..conversions.stringify import safe_stable_stringify
from ..kinds import NUMBER_KINDS, Kind, get_kind, get_precise_type

type QueryValue = str | int | float
type QueryParams = Mapping[str, QueryValue] | Iterable[tuple[str, QueryValue]]

_NON_DIGITS = re.compile(r"\D+")


def format_env_port(value: str | None, *, prefix_colon: bool = False) -> str:
    """Keep only the digits of a port read from the environment.

    Returns:
        str: The port digits, prefixed with ``:`` when ``prefix_colon`` is
        set; ``""`` for blank input or input without digits.

    Raises:
        TypeError: If ``prefix_colon`` is not a boolean.

    Examples:
        >>> format_env_port(" 8080 ", prefix_colon=True)
        ':8080'
        >>> format_env_port("abc")
        ''
    """
    if not isinstance(value, str) or not value.strip():
        return ""
    assert_is_boolean(
        prefix_colon,
        message=lambda current_type, valid_type: (
            f"Parameter `prefix_colon` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    digits = _NON_DIGITS.sub("", value)
    if not digits:
        return ""
    return f":{digits}" if prefix_colon else digits


def _query_pairs(query_params: QueryParams) -> list[tuple[str, str]]:
    if isinstance(query_params, Mapping):
        items: Iterable = query_params.items()
    elif isinstance(query_params, Iterable) and not isinstance(query_params, (str, bytes)):
        items = query_params
    else:
        raise TypeError(
            "Second parameter (`query_params`) must be a mapping or an iterable of "
            f"(key, value) pairs, but received: `{get_precise_type(query_params)}`."
        )

    pairs = []
    for item in items:
        try:
            key, value = item
        except (TypeError, ValueError) as exc:
            raise TypeError(
                "Second parameter (`query_params`) must hold (key, value) pairs, "
                f"but received: `{safe_stable_stringify(item)}`."
            ) from exc
        kind = get_kind(value)
        if not (kind is Kind.STRING and value.strip()) and kind not in NUMBER_KINDS | {Kind.NAN}:
            raise TypeError(
                f"Query parameter {key!r} must be a non-empty `string` or a `number`, "
                f"but received: `{get_precise_type(value)}`."
            )
        pairs.append((str(key), str(value)))
    return pairs


def _set_param(params: list[tuple[str, str]], key: str, value: str) -> list[tuple[str, str]]:
    """Replace the first ``key`` entry (dropping the others) or append it."""
    result, replaced = [], False
    for current_key, current_value in params:
        if current_key != key:
            result.append((current_key, current_value))
        elif not replaced:
            result.append((key, value))
            replaced = True
    if not replaced:
        result.append((key, value))
    return result


def construct_url(
    base_url: str | SplitResult | ParseResult,
    query_params: QueryParams | None = None,
    remove_params: list[str] | tuple[str, ...] | None = None,
) -> str:
    """Build a URL from ``base_url`` with query parameters merged and removed.

    New parameters replace existing ones with the same key; parameters named
    in ``remove_params`` are removed afterwards. The query string is
    re-encoded (``application/x-www-form-urlencoded``) only when it changes.

    Args:
        base_url: Absolute URL string or parsed URL.
        query_params: Mapping or iterable of ``(key, value)`` pairs; values
            must be non-empty strings or numbers.
        remove_params: Names of parameters to remove.

    Returns:
        str: The resulting URL.

    Raises:
        TypeError: If an argument has the wrong kind.
        ValueError: If ``base_url`` is not an absolute URL.

    Examples:
        >>> construct_url("https://example.com/search?q=old&page=2", {"q": "new"}, ["page"])
        'https://example.com/search?q=new'
    """
    if isinstance(base_url, (SplitResult, ParseResult)):
        base_url = base_url.geturl()
    elif isinstance(base_url, str):
        if not base_url.strip():
            raise TypeError("First parameter (`base_url`) cannot be an empty string.")
        base_url = base_url.strip()
    else:
        raise TypeError(
            "First parameter (`base_url`) must be a `string` or a parsed URL, "
            f"but received: `{get_precise_type(base_url)}`, with value: "
            f"`{safe_stable_stringify(base_url)}`."
        )
    if remove_params is not None:
        assert_is_list(
            remove_params,
            message=lambda current_type, valid_type: (
                f"Third parameter (`remove_params`) must be of type `{valid_type}` "
                f"of strings, but received: `{current_type}`."
            ),
        )
        if not all(isinstance(p, str) and p.strip() for p in remove_params):
            raise TypeError(
                "Third parameter (`remove_params`) must contain non-empty strings only."
            )

    parts = urlsplit(base_url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"First parameter (`base_url`) is not an absolute URL: {base_url!r}.")

    new_pairs = _query_pairs(query_params) if query_params is not None else []
    if not new_pairs and not remove_params:
        return parts.geturl()

    params = parse_qsl(parts.query, keep_blank_values=True)
    for key, value in new_pairs:
        params = _set_param(params, key, value)
    removed = set(remove_params or ())
    params = [(key, value) for key, value in params if key not in removed]
    return parts._replace(query=urlencode(params)).geturl()
