"""Unit tests for `rzl_utils.urls`."""
