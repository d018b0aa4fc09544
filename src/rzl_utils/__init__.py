"""RZL Utils

A collection of small, stateless helpers for strings, numbers and currency,
value predicates, deep equality, URLs and random values. Every helper is a
pure function that validates its inputs and returns a new value.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
