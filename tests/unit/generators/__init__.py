"""Unit tests for `rzl_utils.generators`."""
