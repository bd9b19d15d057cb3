"""
MySQL database adapter implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
from urllib.parse import parse_qsl

from ..dialects.mysql import MySQLDialect
from ..security.dsns import DEFAULT_ARGS
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


SCHEME = "mysql://"


def _load_driver():
    try:
        import pymysql  # type: ignore[import-untyped]

        return pymysql
    except ImportError:
        try:
            import MySQLdb

            return MySQLdb
        except ImportError:
            return None


def _options_from_args(args: str) -> dict[str, Any]:
    """
    Translate the query tail of a connection string into driver keyword arguments.
    """

    options: dict[str, Any] = dict(parse_qsl(args or DEFAULT_ARGS))
    sslmode = options.pop("sslmode", None)
    if sslmode == "disable":
        options["ssl_disabled"] = True
    if "connect_timeout" in options:
        value = options["connect_timeout"]
        try:
            options["connect_timeout"] = int(value)
        except ValueError as exc:
            raise AdapterConfigurationError(
                f"Invalid integer value for 'connect_timeout': {value!r}"
            ) from exc
    return options


@dataclass
class MySQLConnectionState:
    connection: Any
    config: ConnectionConfig
    driver: Any


class MySQLAdapter(DatabaseAdapter):
    """
    Adapter wrapping a MySQL DB-API driver (PyMySQL or mysqlclient).
    """

    default_port = 3306
    maintenance_database = None

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = MySQLDialect()
        self._state: MySQLConnectionState | None = None
        self.logger = get_logger("adapters.mysql")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)

    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError(
                "PyMySQL or mysqlclient is required to use MySQLAdapter."
            )
        if not config.parsed:
            raise AdapterConfigurationError(
                "ConnectionConfig must be built from a connection string for MySQL connections."
            )

        parsed = config.parsed
        options = _options_from_args(parsed.args)
        options.update(config.options or {})
        if config.timeout and "connect_timeout" not in options:
            options["connect_timeout"] = int(config.timeout)

        connect_kwargs: dict[str, Any] = {
            "host": parsed.host or "localhost",
            "user": parsed.username,
            "password": parsed.password,
            **options,
        }
        if parsed.database:
            connect_kwargs["database"] = parsed.database
        if parsed.port:
            connect_kwargs["port"] = int(parsed.port)

        self.logger.info(
            "Connecting to MySQL %s (autocommit=%s)",
            config.descriptive_label(SCHEME),
            config.autocommit,
        )

        try:
            connection = driver.connect(**connect_kwargs)
        except Exception as exc:
            raise AdapterConnectionError(
                f"Could not connect to {config.redacted_url(SCHEME)}."
            ) from exc
        if hasattr(connection, "autocommit"):
            connection.autocommit(config.autocommit)

        self._state = MySQLConnectionState(connection, config, driver)
        return connection

    def close(self) -> None:
        if self._state:
            try:
                self._state.connection.close()
            finally:
                self._state = None

    def _ensure_connection(self):
        if not self._state:
            raise AdapterConnectionError("MySQLAdapter is not connected.")
        conn = self._state.connection
        if getattr(conn, "closed", False):
            self.logger.warning("MySQL connection closed; reconnecting.")
            conn = self.connect(self._state.config)
        return conn

    def execute(self, sql: str, params: Sequence[Any] | None = None):
        connection = self._ensure_connection()
        cursor = connection.cursor()
        params = params or ()
        validate_pyformat_params(sql, params)
        with time_call(
            "mysql.execute",
            self.logger,
            sql=sql,
            params=redact_params(params),
            threshold_ms=self.slow_query_ms,
        ):
            cursor.execute(sql, params or None)
        return cursor

    def ping(self) -> None:
        try:
            self.execute("SELECT 1").fetchone()
        except AdapterConnectionError:
            raise
        except Exception as exc:
            raise AdapterConnectionError("Database does not reply to ping.") from exc

    def create_database(self, database: str) -> None:
        self.execute(self.dialect.create_database_sql(database))

    def use_database(self, database: str) -> None:
        self.execute(self.dialect.use_database_sql(database))
        if self._state:
            self._state.config = self._state.config.for_database(database)
