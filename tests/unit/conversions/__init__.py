"""Unit tests for `rzl_utils.conversions`."""
