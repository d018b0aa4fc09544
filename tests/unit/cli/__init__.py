"""Unit tests for `rzl_utils.cli` helpers."""
