"""Unit tests for `rzl_utils.formatters`."""
