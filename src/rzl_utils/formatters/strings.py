"""String formatters: e-mail censoring, chunking and truncation."""

import math
import re
import secrets
from typing import Literal

from ..assertions import assert_is_boolean, assert_is_integer, assert_is_string
from ..strings.sanitize import normalize_spaces

type CensorMode = Literal["fixed", "random"]

CENSOR_MODES = ("fixed", "random")
DEFAULT_ENDING = "..."

_EMAIL = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


# ============================================================================
#                               E-mail censoring
# ============================================================================


def _seed(text: str) -> int:
    """Return a stable 32-bit string hash (``h * 31 + c``, wrapped, absolute)."""
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def _censor(text: str, min_censor: int, percentage: float, mode: CensorMode, seed: int) -> str:
    length = len(text)
    if length <= min_censor:
        return "*" * length

    total = max(min_censor, math.ceil(length * percentage))
    chars = list(text)
    indexes: set[int] = set()
    if mode == "fixed":
        for i in range(total):
            index = (seed + length + i * 31) % length
            while index in indexes:
                index = (index + 1) % length
            indexes.add(index)
    else:
        while len(indexes) < total:
            indexes.add(secrets.randbelow(length))

    for index in indexes:
        chars[index] = "*"
    return "".join(chars)


def censor_email(email: str | None, *, mode: CensorMode = "fixed") -> str:
    """Mask part of the local part, domain name and long TLD of ``email``.

    In ``"fixed"`` mode the masked positions derive from a hash of the
    address, so the same address always renders the same way. In
    ``"random"`` mode they change on every call.

    Args:
        email: The address to censor.
        mode: ``"fixed"`` or ``"random"``.

    Returns:
        str: The censored address, or ``""`` for blank or invalid addresses.

    Raises:
        TypeError: If ``mode`` is not one of ``"fixed"`` or ``"random"``.

    Examples:
        >>> censor_email("john.doe@example.com").count("@")
        1
        >>> censor_email("not-an-email")
        ''
    """
    if mode not in CENSOR_MODES:
        raise TypeError(
            f"Parameter `mode` must be one of {CENSOR_MODES}, but received: {mode!r}."
        )
    if not isinstance(email, str) or not email.strip():
        return ""
    if _EMAIL.match(email) is None:
        return ""

    local, domain = email.split("@", 1)
    domain_name, _, tld = domain.partition(".")
    seed = _seed(email) if mode == "fixed" else 0

    local_min = 1 if len(local) < 4 else 2
    domain_min = 1 if len(domain_name) < 4 else 2
    censored_local = _censor(local, local_min, 0.6, mode, seed)
    censored_domain = _censor(domain_name, domain_min, 0.5, mode, seed)
    censored_tld = tld if len(tld) <= 2 else _censor(tld, 1, 0.4, mode, seed)
    return f"{censored_local}@{censored_domain}.{censored_tld}"


# ============================================================================
#                             Chunking / truncation
# ============================================================================


def _split_every(text: str, size: int) -> list[str]:
    return [text[i : i + size] for i in range(0, len(text), size)]


def chunk_string(
    subject: str | None,
    limiter: int,
    *,
    separator: str = " ",
    recount_after_space: bool = False,
) -> str | None:
    """Insert ``separator`` into ``subject`` every ``limiter`` characters.

    Whitespace in ``subject`` is normalized first.

    With ``recount_after_space`` the counting restarts at every word: long
    words are cut into ``limiter``-sized pieces, pieces are grouped
    ``limiter`` per group and joined with ``separator``, and groups are
    joined with a space.

    Args:
        subject: The string to chunk.
        limiter: Chunk size; ``<= 0`` returns ``subject`` unchanged.
        separator: Text inserted between chunks.
        recount_after_space: Restart counting after each space.

    Returns:
        str | None: The chunked string; ``None`` when ``subject`` is None.

    Raises:
        TypeError: If ``subject`` or ``separator`` is not a string, or
            ``limiter`` is not an integer.

    Examples:
        >>> chunk_string("1234567890", 3, separator="-")
        '123-456-789-0'
    """
    if subject is None:
        return None
    assert_is_string(
        subject,
        message=lambda current_type, valid_type: (
            f"First parameter (`subject`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    assert_is_integer(
        limiter,
        message=lambda current_type, valid_type: (
            f"Second parameter (`limiter`) must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    assert_is_string(
        separator,
        message=lambda current_type, valid_type: (
            f"Parameter `separator` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if limiter <= 0:
        return subject

    text = normalize_spaces(subject)
    if not recount_after_space:
        return separator.join(_split_every(text, limiter))

    pieces = [piece for word in text.split(" ") for piece in _split_every(word, limiter)]
    groups = [separator.join(pieces[i : i + limiter]) for i in range(0, len(pieces), limiter)]
    return " ".join(groups)


def truncate_string(
    text: str | None, *, length: int = 10, ending: str = DEFAULT_ENDING, trim: bool = True
) -> str:
    """Cut ``text`` to ``length`` characters and append ``ending``.

    Args:
        text: The string to truncate.
        length: Maximum number of kept characters; below 1 yields ``""``.
        ending: Appended when the text is cut; blank falls back to ``"..."``.
        trim: Trim ``text`` before measuring it.

    Returns:
        str: The (possibly) truncated text, ``""`` for blank input.

    Raises:
        TypeError: If ``length`` is not an integer, ``ending`` is not a
            string or ``trim`` is not a boolean.

    Examples:
        >>> truncate_string("Hello, wonderful world", length=5)
        'Hello...'
        >>> truncate_string("short", length=10)
        'short'
    """
    if not isinstance(text, str) or not text.strip():
        return ""
    assert_is_integer(
        length,
        message=lambda current_type, valid_type: (
            f"Parameter `length` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    if length < 1:
        return ""
    assert_is_string(
        ending,
        message=lambda current_type, valid_type: (
            f"Parameter `ending` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )
    assert_is_boolean(
        trim,
        message=lambda current_type, valid_type: (
            f"Parameter `trim` must be of type `{valid_type}`, "
            f"but received: `{current_type}`."
        ),
    )

    suffix = ending.strip() or DEFAULT_ENDING
    value = text.strip() if trim else text
    if len(value) <= length:
        return value
    head = value[:length]
    # untrimmed input keeps its inner spacing but never ends on a space
    return (head if trim else head.rstrip()) + suffix
