"""Unit tests for rzl_utils.urls.extractors."""

import pytest

from rzl_utils.urls.extractors import extract_urls

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "See https://example.com/a, and http://foo.org/b).",
            ["https://example.com/a", "http://foo.org/b"],
        ),
        ("https://a.comhttps://b.com", ["https://a.com", "https://b.com"]),
        ("visit https%3A%2F%2Fexample.com today", ["https://example.com"]),
        ("line\nhttps://example.com/x?y=1\n", ["https://example.com/x?y=1"]),
        ("no links here", None),
        ("http:// nothing", None),
        ("https://example.com/%ff", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_urls(text, expected):
    """URLs end at whitespace or at the next URL."""
    assert extract_urls(text) == expected
