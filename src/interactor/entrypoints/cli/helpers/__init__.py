"""CLI helpers for INTERACTOR.

Option parsers for ``NAME=LEVEL`` and ``KEY=VALUE`` pairs, and message
emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .data_parser import parse_context_data
from .log_level_parser import parse_log_level
from .terminal import error, success, warn

__all__ = ["parse_context_data", "parse_log_level", "error", "success", "warn"]
