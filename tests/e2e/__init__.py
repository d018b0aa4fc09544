"""End-to-end tests of the ``rzl-utils`` command line."""
