"""URL and domain predicates."""

import re
from urllib.parse import ParseResult, SplitResult, unquote, urlsplit

from ..assertions import assert_is_boolean
from ..kinds import get_precise_type

_URL_PATTERN = re.compile(
    r"^https?://(?:localhost(?::\d+)?(?:[/?#]\S*)?"
    r"|(?:www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}(?::\d+)?(?:[/?#]\S*)?)$"
)
_DOMAIN_CHARS = re.compile(r"^[a-z0-9\-._*]+$")
_TLD = re.compile(r"^(?:xn--)?(?!\d+$)[a-z0-9]+$", re.IGNORECASE)
_LABEL = re.compile(r"^[a-zA-Z0-9\-_]+$")
_LAST_LABEL = re.compile(r"^[a-zA-Z0-9\-]+$")
_PORT_SUFFIX = re.compile(r":(\d{1,5})$")
_DOUBLE_DASH = re.compile(r"--(?:--)?")

MAX_DOMAIN_LENGTH = 253  # pragma: no mutate
MAX_LABEL_LENGTH = 63  # pragma: no mutate

type UrlLike = str | SplitResult | ParseResult


def is_valid_url(value: object) -> bool:
    """Return True for absolute http(s) URLs with a dotted host or ``localhost``.

    The value is percent-decoded before it is checked.

    Examples:
        >>> is_valid_url("https://example.com/path?q=1")
        True
        >>> is_valid_url("ftp://example.com")
        False
    """
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        decoded = unquote(value, errors="strict")
    except UnicodeDecodeError:
        return False
    if not decoded.startswith(("http://", "https://")):
        return False
    return _URL_PATTERN.match(decoded) is not None


def _valid_label(label: str, index: int, labels: list[str], wildcard: bool) -> bool:
    last = index == len(labels) - 1
    if wildcard and index == 0 and label == "*" and len(labels) > 1:
        return True
    if last and len(_DOUBLE_DASH.findall(label)) != label.count("xn--"):
        return False
    pattern = _LAST_LABEL if last else _LABEL
    return (
        pattern.match(label) is not None
        and len(label) <= MAX_LABEL_LENGTH
        and not label.startswith("-")
        and not label.endswith("-")
    )


def _strip_protocol(value: str, allow_port: bool, wildcard: bool) -> str | None:
    """Return the lower-cased host of a URL, or None if the URL is rejected."""
    parts = urlsplit(value)
    if not parts.scheme:
        return value.lower()
    if parts.scheme not in ("http", "https"):
        return None
    try:
        port = parts.port
    except ValueError:
        return None
    if port is not None and not allow_port:
        return None
    host = (parts.hostname or "").lower()
    if host.split(".")[0] == "*" and not wildcard:
        return None
    return f"{host}:{port}" if port is not None else host


def is_valid_domain(  # pylint: disable=too-many-arguments,too-many-return-statements
    value: object,
    *,
    subdomain: bool = True,
    top_level: bool = False,
    wildcard: bool = False,
    allow_unicode: bool = False,
    allow_port: bool = False,
    allow_localhost: bool = False,
    allow_protocol: bool = False,
) -> bool:
    """Return True if ``value`` is a syntactically valid domain name.

    Args:
        value: Candidate domain, e.g. ``"sub.example.com"``.
        subdomain: Accept more than one label before the TLD.
        top_level: Accept a bare top-level domain such as ``"com"``.
        wildcard: Accept a leading ``*`` label.
        allow_unicode: Accept internationalized names (IDNA encoded first).
        allow_port: Accept a trailing ``:port`` in ``[1, 65535]``.
        allow_localhost: Accept ``localhost``.
        allow_protocol: Accept (and strip) an ``http://`` or ``https://`` prefix.

    Returns:
        bool: Whether the domain is valid.

    Raises:
        TypeError: If an option is not a boolean.
    """
    options = {
        "subdomain": subdomain,
        "top_level": top_level,
        "wildcard": wildcard,
        "allow_unicode": allow_unicode,
        "allow_port": allow_port,
        "allow_localhost": allow_localhost,
        "allow_protocol": allow_protocol,
    }
    for name, option in options.items():
        assert_is_boolean(
            option,
            message=lambda current_type, valid_type, name=name: (
                f"Option `{name}` of `is_valid_domain` must be of type "
                f"`{valid_type}`, but received: `{current_type}`."
            ),
        )
    if not isinstance(value, str):
        return False

    domain: str | None = value.lower()
    if allow_protocol and "://" in value:
        domain = _strip_protocol(value, allow_port, wildcard)
        if domain is None:
            return False
    domain = domain.removesuffix(".")

    if allow_port and (match := _PORT_SUFFIX.search(domain)):
        if not 1 <= int(match.group(1)) <= 65535:
            return False
        domain = domain[: match.start()]

    if allow_localhost and domain == "localhost":
        return True
    if allow_unicode:
        try:
            domain = ".".join(
                label if label == "*" else label.encode("idna").decode("ascii")
                for label in domain.split(".")
            )
        except UnicodeError:
            return False

    if not domain or len(domain) > MAX_DOMAIN_LENGTH:
        return False
    if _DOMAIN_CHARS.match(domain) is None:
        return False
    if top_level and "." not in domain:
        return _TLD.match(domain) is not None

    labels = domain.split(".")
    if len(labels) <= 1:
        return False
    tld = labels.pop()
    if _TLD.match(tld) is None:
        return False
    if not subdomain and len(labels) > 1:
        return False
    return all(_valid_label(label, i, labels, wildcard) for i, label in enumerate(labels))


def _split_url(value: object) -> SplitResult | ParseResult:
    if isinstance(value, (SplitResult, ParseResult)):
        return value
    if isinstance(value, str):
        return urlsplit(value)
    raise TypeError(
        "Parameters `url_a` and `url_b` must be a URL string or a parsed URL, "
        f"but received: `{get_precise_type(value)}`."
    )


def _origin_and_path(url: SplitResult | ParseResult) -> str:
    return f"{url.scheme.lower()}://{url.netloc.lower()}{url.path or '/'}"


def are_urls_equal_path(url_a: UrlLike, url_b: UrlLike) -> bool:
    """Return True if both URLs share scheme, host and path (query ignored).

    Raises:
        TypeError: If either argument is not a URL string or parsed URL.
    """
    a, b = _split_url(url_a), _split_url(url_b)
    return _origin_and_path(a) == _origin_and_path(b)


def are_urls_identical(url_a: UrlLike, url_b: UrlLike) -> bool:
    """Return True if both URLs share scheme, host, path and query.

    Raises:
        TypeError: If either argument is not a URL string or parsed URL.
    """
    a, b = _split_url(url_a), _split_url(url_b)
    return (_origin_and_path(a), a.query) == (_origin_and_path(b), b.query)
