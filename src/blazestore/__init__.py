"""
blazestore public package initialization.

Lists and sets backed by SQL tables, plus the connection string codec used to
normalize loose ``username:password@host:port/database`` strings.
"""

from .adapters import (  # noqa: F401
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    ConnectionConfig,
    MySQLAdapter,
    PostgresAdapter,
    SQLiteAdapter,
)
from .host import Host, check_connection, connect  # noqa: F401
from .security.dsns import (  # noqa: F401
    ParsedConnection,
    build_connection_string,
    parse_connection_string,
    rebuild_connection_string,
)
from .structures import (  # noqa: F401
    CollectionError,
    DuplicateMemberError,
    List,
    Set,
    TooFewElementsError,
)

__version__ = "1.0.0"

__all__ = [
    "Host",
    "connect",
    "check_connection",
    "List",
    "Set",
    "ConnectionConfig",
    "MySQLAdapter",
    "PostgresAdapter",
    "SQLiteAdapter",
    "ParsedConnection",
    "parse_connection_string",
    "build_connection_string",
    "rebuild_connection_string",
    "AdapterError",
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "CollectionError",
    "DuplicateMemberError",
    "TooFewElementsError",
]
