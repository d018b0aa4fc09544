"""String helpers: case conversion, whitespace and HTML cleanup, capitalization."""
