"""Connection string codec and redaction helpers."""

from .dsns import (
    DEFAULT_ARGS,
    DEFAULT_DATABASE,
    DEFAULT_PORT,
    SCHEME,
    ParsedConnection,
    build_connection_string,
    parse_connection_string,
    rebuild_connection_string,
)
from .redaction import REDACTED_VALUE, redact_params

__all__ = [
    "DEFAULT_ARGS",
    "DEFAULT_DATABASE",
    "DEFAULT_PORT",
    "SCHEME",
    "ParsedConnection",
    "build_connection_string",
    "parse_connection_string",
    "rebuild_connection_string",
    "REDACTED_VALUE",
    "redact_params",
]
