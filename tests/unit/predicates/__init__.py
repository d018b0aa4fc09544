"""Unit tests for `rzl_utils.predicates`."""
