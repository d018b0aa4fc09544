"""Command-line interface for RZL Utils."""
