"""Unit tests for rzl_utils.conversions.booleans."""

import math
from types import SimpleNamespace

import numpy as np
import pytest

from rzl_utils.conversions.booleans import (
    to_boolean_content,
    to_boolean_content_deep,
    to_boolean_explicit,
    to_boolean_loose,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "value, loose, content, deep",
    [
        (None, False, False, False),
        ("  ", False, False, False),
        ("0", True, True, True),
        (0, False, False, False),
        (-1.5, True, True, True),
        (math.nan, True, True, True),
        ([], False, False, False),
        ([0], True, True, False),
        ([None], True, True, False),
        ({}, False, False, False),
        ({"a": ""}, True, True, False),
        ({"a": {"b": [" x "]}}, True, True, True),
        (np.zeros(2), True, True, False),
        (SimpleNamespace(a=0), True, True, False),
    ],
)
def test_boolean_strategies(value, loose, content, deep):
    """The three lenient strategies differ on containers and nested content."""
    assert to_boolean_loose(value) is loose
    assert to_boolean_content(value) is content
    assert to_boolean_content_deep(value) is deep


@pytest.mark.parametrize(
    "value, options, expected",
    [
        (True, {}, True),
        (1, {}, True),
        (1.0, {}, True),
        (2, {}, False),
        (" yes ", {}, True),
        (" yes ", {"trim_string": False}, False),
        ("YES", {}, False),
        ("YES", {"case_insensitive": True}, True),
        ("on", {}, True),
        ("1", {}, True),
        ("indeterminate", {}, False),
        ("indeterminate", {"include_indeterminate": True}, True),
        ([1], {}, False),
        (None, {}, False),
    ],
)
def test_to_boolean_explicit(value, options, expected):
    """Only explicit markers are true."""
    assert to_boolean_explicit(value, **options) is expected


def test_to_boolean_explicit_reports_every_option():
    """A single error lists the kinds of all options."""
    with pytest.raises(TypeError) as exc_info:
        to_boolean_explicit("yes", trim_string="no")  # type: ignore[arg-type]
    message = str(exc_info.value)
    assert "'case_insensitive': `boolean`" in message
    assert "'trim_string': `string`" in message
