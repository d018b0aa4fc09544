"""Formatters for numbers, currency, dates and strings."""
