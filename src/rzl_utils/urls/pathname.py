"""Pathname normalization and prefix extraction."""

import logging
import re
from collections.abc import Sequence
from urllib.parse import unquote, urlsplit

from ..assertions import assert_is_boolean
from ..conversions.stringify import safe_stable_stringify
from ..errors import NormalizePathnameError
from ..kinds import SEQUENCE_KINDS, Kind, get_kind, get_precise_type
from ..predicates.urls import is_valid_domain

logger = logging.getLogger(__name__)

DEFAULT_PATH = "/"

_WHITESPACE = re.compile(r"\s+")
_HTTP_PREFIX = re.compile(r"^https?://", re.IGNORECASE)
_REPEATED_SLASHES = re.compile(r"/{2,}")
_PERCENT_RUN = re.compile(r"(?:%[0-9A-F]{2}){2,}", re.IGNORECASE)
_ASCII = re.compile(r"^[\x00-\x7f]+$")


def _decode_sequences(text: str) -> str:
    """Decode percent-encoded runs that spell non-ASCII characters."""

    def decode(match: re.Match[str]) -> str:
        raw = match.group(0)
        try:
            decoded = unquote(raw, errors="strict")
        except UnicodeDecodeError:
            return raw
        return raw if _ASCII.match(decoded) else decoded

    return _PERCENT_RUN.sub(decode, text)


def _strip_leading_domain(path: str) -> str:
    if _HTTP_PREFIX.match(path):
        parts = urlsplit(path)
        path = "/" + _REPEATED_SLASHES.sub("/", parts.path.lstrip("/"))
        if parts.query:
            path += f"?{parts.query}"
        if parts.fragment:
            path += f"#{parts.fragment}"

    if path.startswith("/"):
        path = _REPEATED_SLASHES.sub("/", path)[1:]

    first_part = path.split("/")[0]
    host = first_part.split(":")[0]
    if host == "localhost" or is_valid_domain(host, allow_unicode=True, wildcard=True):
        path = path[len(first_part) :]
    return path if path.startswith("/") else f"/{path}"


def _normalize(value: str, keep_trailing_slash: bool) -> str:
    current = _strip_leading_domain(_WHITESPACE.sub("", value))

    end = len(current)
    search_index, hash_index = current.find("?"), current.find("#")
    search = hash_ = ""
    if search_index != -1:
        search = current[search_index : hash_index if hash_index != -1 else None]
        end = search_index
    if hash_index != -1:
        hash_ = current[hash_index:]
        end = min(end, hash_index)

    path = "/" + _REPEATED_SLASHES.sub("/", current[:end].lstrip("/"))
    if not keep_trailing_slash and path != "/":
        path = path.rstrip("/") or "/"
    return _decode_sequences(path) + _decode_sequences(search) + _decode_sequences(hash_)


def normalize_pathname(
    value: str | None,
    *,
    default_path: str = DEFAULT_PATH,
    keep_none: bool = False,
    keep_trailing_slash: bool = False,
) -> str | None:
    """Normalize a pathname or URL into an absolute pathname.

    Whitespace is removed, a leading ``http(s)://host`` (or a bare host such
    as ``example.com`` or ``localhost:3000``) is stripped, repeated slashes
    are collapsed and the trailing slash is dropped. The query string and
    fragment are kept. Percent-encoded runs that decode to non-ASCII text
    (``%E2%9C%93``) are decoded; ASCII escapes (``%20``) are left alone.

    Args:
        value: The pathname or URL.
        default_path: Used when ``value`` is not a non-blank string.
        keep_none: Return None instead of ``default_path`` for non-strings.
        keep_trailing_slash: Keep a trailing slash.

    Returns:
        str | None: The normalized pathname.

    Raises:
        TypeError: If ``default_path`` is blank or ``keep_trailing_slash``
            is not a boolean.
        NormalizePathnameError: If normalization fails unexpectedly.

    Examples:
        >>> normalize_pathname("https://example.com//foo///bar/?q=1#top")
        '/foo/bar?q=1#top'
        >>> normalize_pathname("  ")
        '/'
    """
    if not isinstance(default_path, str) or not default_path.strip():
        raise TypeError(
            "Parameter `default_path` must be a non-blank string, but received: "
            f"`{get_precise_type(default_path)}`, with value: "
            f"`{safe_stable_stringify(default_path)}`."
        )
    assert_is_boolean(
        keep_trailing_slash,
        message=lambda current_type, valid_type: (
            f"Parameter `keep_trailing_slash` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if keep_none and not isinstance(value, str):
        return None

    current = value if isinstance(value, str) and value.strip() else default_path
    try:
        return _normalize(current, keep_trailing_slash)
    except (ValueError, UnicodeError) as exc:
        logger.debug("Failed to normalize pathname %r", current, exc_info=True)
        raise NormalizePathnameError(
            f"Failed to normalize pathname in `normalize_pathname`: {exc}", exc
        ) from exc


# ============================================================================
#                                 Prefixes
# ============================================================================


def _is_string_list(value: object) -> bool:
    return get_kind(value) in SEQUENCE_KINDS and all(isinstance(v, str) for v in value)  # type: ignore[union-attr]


def get_prefix_pathname(
    url: str | Sequence[str],
    base: str | Sequence[str] | None = None,
    *,
    levels: int = 1,
    remove_duplicates: bool = True,
) -> str | list[str] | None:
    """Return the first ``levels`` segments of one or more pathnames.

    When ``base`` is given, only pathnames starting with (one of) the
    normalized base(s) are kept.

    Args:
        url: A pathname or URL, or a list of them.
        base: A base pathname or a list of bases to filter on.
        levels: Number of leading segments to keep.
        remove_duplicates: Deduplicate the results of a list ``url``.

    Returns:
        str | list[str] | None: For a single ``url``, its prefix or None when
        it does not match ``base``. For a list, the matching prefixes, or the
        lone prefix itself when only one remains.

    Raises:
        TypeError: Listing every invalid parameter at once.

    Examples:
        >>> get_prefix_pathname("/admin/users/42", levels=2)
        '/admin/users'
        >>> get_prefix_pathname(["/a/b", "/a/c", "/x/y"], "/a")
        '/a'
    """
    errors = []
    if not isinstance(url, str) and not _is_string_list(url):
        errors.append(
            "First parameter (`url`) must be of type `string` or `list` of strings, "
            f"but received: `{get_precise_type(url)}`."
        )
    if base is not None and not isinstance(base, str) and not _is_string_list(base):
        errors.append(
            "Second parameter (`base`) must be of type `string`, `list` of strings "
            f"or `none`, but received: `{get_precise_type(base)}`."
        )
    if get_kind(levels) is not Kind.INTEGER or levels < 0:
        errors.append(
            "Parameter `levels` must be a non-negative `integer`, but received: "
            f"`{get_precise_type(levels)}`, with value: `{safe_stable_stringify(levels)}`."
        )
    if not isinstance(remove_duplicates, bool):
        errors.append(
            "Parameter `remove_duplicates` must be of type `boolean`, but received: "
            f"`{get_precise_type(remove_duplicates)}`."
        )
    if errors:
        raise TypeError(
            "Invalid parameter(s) in `get_prefix_pathname`:\n- " + "\n- ".join(errors)
        )

    def prefix(pathname: str) -> str:
        parts = [part for part in normalize_pathname(pathname).split("/") if part]  # type: ignore[union-attr]
        return "/" + "/".join(parts[:levels])

    def process(single: str) -> str | None:
        if not base:
            return prefix(single)
        normalized = normalize_pathname(single)
        bases = [base] if isinstance(base, str) else base
        for candidate in bases:
            if normalized.startswith(normalize_pathname(candidate)):  # type: ignore[union-attr,arg-type]
                return prefix(normalized)  # type: ignore[arg-type]
        return None

    if isinstance(url, str):
        return process(url)
    results = [r for r in (process(u) for u in url) if r is not None]
    if remove_duplicates:
        results = list(dict.fromkeys(results))
    return results[0] if len(results) == 1 else results


def get_first_prefix_pathname(
    result: str | Sequence[str] | None, default: str = DEFAULT_PATH
) -> str:
    """Return the first normalized pathname of ``result`` that is not ``"/"``.

    Typically fed with the output of `get_prefix_pathname`.

    Raises:
        TypeError: If ``default`` is blank or ``result`` is neither None, a
            string nor a list of strings.

    Examples:
        >>> get_first_prefix_pathname(["/", "/dashboard/", "/settings"])
        '/dashboard'
        >>> get_first_prefix_pathname(None, "/home")
        '/home'
    """
    if not isinstance(default, str) or not default.strip():
        raise TypeError(
            "Second parameter (`default`) must be a non-blank string, but received: "
            f"`{get_precise_type(default)}`, with value: `{safe_stable_stringify(default)}`."
        )
    if result is None:
        return normalize_pathname(default)  # type: ignore[return-value]
    if isinstance(result, str):
        candidates: Sequence[str] = [result]
    elif _is_string_list(result):
        candidates = result
    else:
        raise TypeError(
            "First parameter (`result`) must be of type `string`, `list` of strings "
            f"or `none`, but received: `{get_precise_type(result)}`, with value: "
            f"`{safe_stable_stringify(result)}`."
        )
    for candidate in candidates:
        normalized = normalize_pathname(candidate)
        if normalized != "/":
            return normalized  # type: ignore[return-value]
    return normalize_pathname(default)  # type: ignore[return-value]
