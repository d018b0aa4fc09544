"""Predicates over values: kinds, emptiness, keys, text, URLs and deep equality."""
