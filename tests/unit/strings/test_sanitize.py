"""Unit tests for rzl_utils.strings.sanitize."""

import pytest

from rzl_utils.strings.sanitize import normalize_spaces, normalize_string, remove_spaces, strip_html_tags

# pylint: disable=magic-value-comparison


def test_normalize_spaces():
    """Whitespace runs collapse; trimming is configurable."""
    assert normalize_spaces("  a \n\t b  ") == "a b"
    assert normalize_spaces("  a  b ", with_trim=False) == " a b "
    assert normalize_spaces("  a \n b ", trim_only=True) == "a \n b"
    assert normalize_spaces("   ") == ""
    assert normalize_spaces(None) == ""


def test_normalize_string():
    """Strings are trimmed; anything else becomes empty."""
    assert normalize_string("  x ") == "x"
    assert normalize_string(None) == ""
    assert normalize_string(3) == ""  # type: ignore[arg-type]


def test_remove_spaces():
    """All whitespace goes, full-width spaces included."""
    assert remove_spaces("  a b　c ") == "abc"
    assert remove_spaces("  a b ", trim_only=True) == "a b"
    assert remove_spaces(None) == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        ("<div><b>Bold</b> text</div>", "Bold text"),
        ("<p>One</p><p>Two</p>", "One Two"),
        ("line<br/>break", "line break"),
        ("2 < 5 and 5 > 2", "2 < 5 and 5 > 2"),
        ("", ""),
        (None, None),
        (5, None),
    ],
)
def test_strip_html_tags(value, expected):
    """Tags are removed without gluing words together."""
    assert strip_html_tags(value) == expected
