"""
Utility helpers shared across blazestore packages.
"""

from .logging import configure_logging, get_logger, time_call, trace_fields
from .naming import validate_identifier

__all__ = ["configure_logging", "get_logger", "time_call", "trace_fields", "validate_identifier"]
