"""Random values and unique identifiers."""
