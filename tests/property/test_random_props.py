"""Hypothesis property tests for random generators.

- **Bounds**: `random_int` stays within its (clamped) range.
- **Membership**: `get_random_item` returns an item of its input.
- **Length and alphabet**: `random_str` honors its options.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rzl_utils.generators.random_values import (
    RandomStrOptions,
    get_random_item,
    random_int,
    random_str,
)

pytestmark = [pytest.mark.property]


@given(st.integers(min_value=1, max_value=10**9), st.integers(min_value=0, max_value=10**6))
def test_random_int_bounds(low, width):
    assert low <= random_int(low, low + width) <= low + width


@given(st.lists(st.integers() | st.text(), min_size=1))
def test_get_random_item_membership(items):
    assert get_random_item(items) in items


@given(
    st.integers(min_value=1, max_value=50),
    st.integers(min_value=0, max_value=50),
    st.text(alphabet="abc!?", min_size=1, max_size=5),
)
def test_random_str_options(min_length, extra, charset):
    options = RandomStrOptions(
        min_length=min_length, max_length=min_length + extra, replace_charset=charset
    )
    value = random_str(options)
    assert min_length <= len(value) <= min_length + extra
    assert set(value) <= set(charset)
