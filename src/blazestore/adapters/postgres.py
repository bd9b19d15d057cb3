"""
PostgreSQL database adapter implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ..dialects.postgres import PostgresDialect
from ..security.redaction import redact_params
from ..utils import get_logger, time_call
from ..utils.performance import resolve_slow_query_ms
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    ConnectionConfig,
    DatabaseAdapter,
    validate_pyformat_params,
)


def _load_driver():
    try:
        import psycopg

        return psycopg
    except ImportError:
        return None


@dataclass
class PostgresConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


class PostgresAdapter(DatabaseAdapter):
    """
    Adapter wrapping the psycopg PostgreSQL driver.

    PostgreSQL has no ``USE`` statement, so switching databases reconnects
    with a rebuilt connection string.
    """

    default_port = 5432
    maintenance_database = "postgres"

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = PostgresDialect()
        self._state: PostgresConnectionState | None = None
        self.logger = get_logger("adapters.postgres")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)

    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("psycopg is required to use PostgresAdapter.")

        options = dict(config.options or {})
        if config.timeout and "connect_timeout" not in options:
            options["connect_timeout"] = int(config.timeout)

        self.logger.info(
            "Connecting to PostgreSQL %s (autocommit=%s)",
            config.descriptive_label(),
            config.autocommit,
        )

        try:
            connection = driver.connect(config.url, **options)
        except Exception as exc:
            raise AdapterConnectionError(
                f"Could not connect to {config.redacted_url()}."
            ) from exc
        connection.autocommit = bool(config.autocommit)

        self._state = PostgresConnectionState(connection, config, driver)
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    def _ensure_connection(self):
        if not self._state:
            raise AdapterConnectionError("PostgresAdapter is not connected.")
        conn = self._state.connection
        if getattr(conn, "closed", False):
            self.logger.warning("PostgreSQL connection closed; reconnecting.")
            conn = self.connect(self._state.config)
        return conn

    @property
    def current_database(self) -> str | None:
        return self._state.config.database if self._state else None

    def execute(self, sql: str, params: Sequence[Any] | None = None):
        connection = self._ensure_connection()
        cursor = connection.cursor()
        params = params or ()
        validate_pyformat_params(sql, params)
        with time_call(
            "postgres.execute",
            self.logger,
            sql=sql,
            params=redact_params(params),
            threshold_ms=self.slow_query_ms,
        ):
            cursor.execute(sql, params)
        return cursor

    def ping(self) -> None:
        try:
            self.execute("SELECT 1").fetchone()
        except AdapterConnectionError:
            raise
        except Exception as exc:
            raise AdapterConnectionError("Database does not reply to ping.") from exc

    def create_database(self, database: str) -> None:
        cursor = self.execute("SELECT 1 FROM pg_database WHERE datname = %s", (database,))
        if cursor.fetchone():
            return
        connection = self._ensure_connection()
        autocommit = connection.autocommit
        # CREATE DATABASE cannot run inside a transaction block.
        if not autocommit:
            connection.rollback()
            connection.autocommit = True
        try:
            self.execute(self.dialect.create_database_sql(database))
        finally:
            if not autocommit:
                connection.autocommit = autocommit

    def use_database(self, database: str) -> None:
        if not self._state:
            raise AdapterConnectionError("PostgresAdapter is not connected.")
        if self.current_database == database:
            return
        config = self._state.config.for_database(database)
        if config is self._state.config:
            raise AdapterConfigurationError(
                "Switching databases requires a config built from a connection string."
            )
        self.close()
        self.connect(config)
