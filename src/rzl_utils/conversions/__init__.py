"""Conversions between loosely typed values: booleans, numbers, lists, text and loose JSON."""
