"""CLI helpers for rangeix.

Utilities used by the command-line interface: parsing of range values and
logger-level options, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import warn
from .value_parser import format_value, parse_value

__all__ = ["format_value", "parse_log_level", "parse_value", "warn"]
