"""Unit tests for `rzl_utils.strings`."""
