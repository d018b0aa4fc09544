"""CLI helpers for RZL Utils.

Utilities used by the command-line interface: parsing of ``NAME=LEVEL``
logger options and message emitters that write to stderr with
emoji to ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, warn

__all__ = ["parse_log_level", "error", "warn"]
