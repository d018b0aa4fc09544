"""Case conversion helpers.

Every converter accepts a string or a list/tuple of strings (joined before
conversion) and splits the input into words on any run of characters that
is neither a letter nor a digit. Words listed in ``ignore_words`` are kept
verbatim. Non-string or blank input converts to ``""``.
"""

import re
from collections.abc import Callable

type StringLike = str | list[str] | tuple[str, ...] | None
type StringCollection = (
    str | list[str] | tuple[str, ...] | set[str] | frozenset[str] | None
)

_WORD_SPLIT = re.compile(r"[\W_]+")


def split_words(value: StringLike) -> list[str]:
    """Split a string (or list of strings) into its letter/digit words.

    Args:
        value: A string, or a list/tuple of strings joined with a hyphen after
            dropping blank items.

    Returns:
        list[str]: The non-empty words, in order.
    """
    if isinstance(value, (list, tuple)):
        text = "-".join(w.strip() for w in value if isinstance(w, str) and w.strip())
    elif isinstance(value, str):
        text = value.strip()
    else:
        return []
    return [w for w in _WORD_SPLIT.split(text) if w]


def _ignored_words(ignore_words: StringCollection) -> set[str]:
    """Normalize ``ignore_words`` into a set of joined words."""
    if isinstance(ignore_words, str):
        items: list[str] | tuple[str, ...] | set[str] | frozenset[str] = [ignore_words]
    elif isinstance(ignore_words, (list, tuple, set, frozenset)):
        items = ignore_words
    else:
        return set()
    return {
        clean
        for w in items
        if isinstance(w, str) and (clean := "".join(split_words(w)))
    }


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _convert(
    value: StringLike,
    ignore_words: StringCollection,
    transform: Callable[[int, str], str],
    joiner: str,
) -> str:
    words = split_words(value)
    if not words:
        return ""
    ignored = _ignored_words(ignore_words)
    return joiner.join(
        word if word in ignored else transform(index, word)
        for index, word in enumerate(words)
    )


def to_camel_case(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to camelCase, e.g. ``"hello world"`` -> ``"helloWorld"``."""
    return _convert(
        value,
        ignore_words,
        lambda i, w: w.lower() if i == 0 else _capitalize(w),
        "",
    )


def to_pascal_case(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to PascalCase, e.g. ``"hello world"`` -> ``"HelloWorld"``."""
    return _convert(value, ignore_words, lambda _, w: _capitalize(w), "")


def to_pascal_case_space(
    value: StringLike, ignore_words: StringCollection = None
) -> str:
    """Convert to space separated Pascal Case, e.g. ``"Hello World"``."""
    return _convert(value, ignore_words, lambda _, w: _capitalize(w), " ")


def to_kebab_case(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to kebab-case, e.g. ``"Hello World"`` -> ``"hello-world"``."""
    return _convert(value, ignore_words, lambda _, w: w.lower(), "-")


def to_snake_case(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to snake_case, e.g. ``"Hello World"`` -> ``"hello_world"``."""
    return _convert(value, ignore_words, lambda _, w: w.lower(), "_")


def to_dot_case(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to dot.case, e.g. ``"Hello World"`` -> ``"hello.world"``."""
    return _convert(value, ignore_words, lambda _, w: w.lower(), ".")


def to_lower_case(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to space separated lower case, e.g. ``"hello world"``."""
    return _convert(value, ignore_words, lambda _, w: w.lower(), " ")


def slugify(value: StringLike, ignore_words: StringCollection = None) -> str:
    """Convert to a URL slug, e.g. ``"Hello, World!"`` -> ``"hello-world"``."""
    return _convert(value, ignore_words, lambda _, w: w.lower(), "-").strip("-")


CASE_CONVERTERS: dict[str, Callable[[StringLike, StringCollection], str]] = {
    "camel": to_camel_case,
    "pascal": to_pascal_case,
    "pascal-space": to_pascal_case_space,
    "kebab": to_kebab_case,
    "snake": to_snake_case,
    "dot": to_dot_case,
    "lower": to_lower_case,
    "slug": slugify,
}
