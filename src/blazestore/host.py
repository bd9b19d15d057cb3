"""
Host: an open database connection with a selected database.
"""

from __future__ import annotations

from typing import Any, Optional

from .adapters.base import (
    AdapterConnectionError,
    ConnectionConfig,
    DatabaseAdapter,
)
from .adapters.postgres import PostgresAdapter
from .security.dsns import DEFAULT_DATABASE
from .utils import get_logger, validate_identifier

logger = get_logger("host")


class Host:
    """
    Owns an adapter connection and the database that lists and sets live in.

    Construction connects, pings, then creates and selects the configured
    database. Any failure along the way closes the connection and raises.
    """

    def __init__(self, adapter: DatabaseAdapter, config: ConnectionConfig) -> None:
        self.adapter = adapter
        self.config = config
        self.verbose = config.verbose
        self.database = validate_identifier(config.database or DEFAULT_DATABASE, kind="database")
        self.logger = logger
        self._open()

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str = "",
        *,
        adapter: Optional[DatabaseAdapter] = None,
        verbose: bool | None = None,
        **kwargs: Any,
    ) -> "Host":
        """
        Connect using a loose ``username:password@host:port/database`` string.
        """

        adapter = adapter or PostgresAdapter()
        config = ConnectionConfig.from_connection_string(
            connection_string,
            default_port=adapter.default_port,
            verbose=verbose,
            **kwargs,
        )
        return cls(adapter, config)

    # ------------------------------------------------------------------ #
    # Context management
    # ------------------------------------------------------------------ #
    def __enter__(self) -> "Host":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    def _open(self) -> None:
        self.adapter.connect(self.config.for_database(self.adapter.maintenance_database))
        try:
            self.ping()
            self.select_database(self.database)
        except Exception:
            self.adapter.close()
            raise

    def ping(self) -> None:
        self.adapter.ping()

    def select_database(self, database: str) -> None:
        """
        Switch to ``database``, creating it first if needed.
        """

        validate_identifier(database, kind="database")
        self.adapter.create_database(database)
        if self.verbose:
            self.logger.info("Created database %s", database)
        self.adapter.use_database(database)
        if self.verbose:
            self.logger.info("Using database %s", database)
        self.database = database

    def close(self) -> None:
        self.adapter.close()


def connect(
    connection_string: Optional[str] = None,
    *,
    adapter: Optional[DatabaseAdapter] = None,
    verbose: bool | None = None,
) -> Host:
    """
    Open a Host. Without a connection string, the default database on the
    local server is used.
    """

    if connection_string is None:
        connection_string = f"/{DEFAULT_DATABASE}"
    return Host.from_connection_string(connection_string, adapter=adapter, verbose=verbose)


def check_connection(
    connection_string: str = "",
    *,
    adapter: Optional[DatabaseAdapter] = None,
    verbose: bool | None = None,
) -> None:
    """
    Check that a database server is up and answering.

    Raises AdapterConnectionError when the server cannot be reached.
    """

    adapter = adapter or PostgresAdapter()
    config = ConnectionConfig.from_connection_string(
        connection_string, default_port=adapter.default_port, verbose=verbose
    )
    try:
        adapter.connect(config.for_database(adapter.maintenance_database))
        adapter.ping()
    except AdapterConnectionError:
        if config.verbose:
            logger.info("Ping: failed")
        raise
    finally:
        adapter.close()
    if config.verbose:
        logger.info("Ping: ok")
