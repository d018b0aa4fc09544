"""URL extraction from free text."""

import re
from urllib.parse import unquote, urlsplit

_URL_CANDIDATE = re.compile(r"https?://.*?(?=https?://|\s|$)")
_TRAILING_PUNCTUATION = re.compile(r"[.,;:!?)]*$")


def _is_http_url(candidate: str) -> bool:
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def extract_urls(text: str | None) -> list[str] | None:
    """Return every http(s) URL found in ``text``.

    ``text`` is percent-decoded first. Each URL ends at whitespace or at the
    start of the next URL, and trailing punctuation (``.,;:!?)``) is dropped.

    Returns:
        list[str] | None: The URLs in order of appearance, or None when there
        are none or ``text`` is blank or cannot be decoded.

    Examples:
        >>> extract_urls("See https://example.com/a, and http://foo.org/b).")
        ['https://example.com/a', 'http://foo.org/b']
        >>> extract_urls("no links here") is None
        True
    """
    if not isinstance(text, str) or not text.strip():
        return None
    try:
        decoded = unquote(text, errors="strict")
    except UnicodeDecodeError:
        return None
    candidates = (_TRAILING_PUNCTUATION.sub("", m) for m in _URL_CANDIDATE.findall(decoded))
    urls = [url for url in candidates if _is_http_url(url)]
    return urls or None
