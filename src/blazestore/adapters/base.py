"""
Adapter protocol definitions for blazestore.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Protocol, Sequence

from ..dialects.base import Dialect
from ..security.dsns import (
    DEFAULT_PORT,
    SCHEME,
    ParsedConnection,
    build_connection_string,
    parse_connection_string,
)

VERBOSE_ENV = "BLAZESTORE_VERBOSE"


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when establishing or using a connection fails."""


class AdapterExecutionError(AdapterError):
    """Raised when SQL execution or parameter validation fails."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise AdapterConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def resolve_verbose(override: bool | None = None) -> bool:
    """
    Explicit flag first, then the ``BLAZESTORE_VERBOSE`` environment variable.
    """

    if override is not None:
        return bool(override)
    value = os.getenv(VERBOSE_ENV)
    if not value:
        return False
    return _parse_bool(value, key=VERBOSE_ENV)


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for adapters.

    ``url`` is what URL-based drivers connect with. ``parsed`` keeps the
    decoded fields for drivers that take keyword arguments and is ``None``
    when the config was built from a literal URL.
    """

    url: str
    database: str | None = None
    autocommit: bool = True
    timeout: float | None = None
    options: dict[str, Any] | None = None
    parsed: ParsedConnection | None = None
    source: str | None = None
    verbose: bool = False

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str,
        *,
        default_port: int = DEFAULT_PORT,
        verbose: bool | None = None,
        **kwargs: Any,
    ) -> "ConnectionConfig":
        """
        Build a config by taking the connection string apart and rebuilding it.
        """

        verbose = resolve_verbose(verbose)
        parsed = parse_connection_string(
            connection_string, default_port=default_port, verbose=verbose
        )
        return cls(
            url=build_connection_string(parsed, verbose=verbose),
            database=parsed.database,
            parsed=parsed,
            verbose=verbose,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable holding a connection string.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_connection_string(value, source=env_var, **kwargs)

    def for_database(self, database: str | None) -> "ConnectionConfig":
        """
        Return a copy pointing at ``database``. Literal URL configs are returned as-is.
        """

        if self.parsed is None:
            return self
        parsed = self.parsed.with_database(database or "")
        return replace(
            self,
            url=build_connection_string(parsed),
            database=database,
            parsed=parsed,
        )

    def redacted_url(self, scheme: str | None = None) -> str:
        """
        Return a connection string safe for logging (password removed).

        Adapters that do not connect with the ``postgres://`` URL pass their
        own ``scheme`` so the label names the right server.
        """

        if self.parsed:
            return self.parsed.redacted(scheme or SCHEME)
        return self.url

    def descriptive_label(self, scheme: str | None = None) -> str:
        """
        Describe the config source for diagnostics.
        """

        redacted = self.redacted_url(scheme)
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


def count_pyformat_placeholders(sql: str) -> int:
    count = 0
    idx = 0
    while idx < len(sql) - 1:
        if sql[idx] == "%" and sql[idx + 1] == "s":
            count += 1
            idx += 2
            continue
        if sql[idx] == "%" and sql[idx + 1] == "%":
            idx += 2
            continue
        idx += 1
    return count


def validate_pyformat_params(sql: str, params: Sequence[Any]) -> None:
    placeholder_count = count_pyformat_placeholders(sql)
    if placeholder_count == 0:
        if params:
            raise AdapterExecutionError(
                "Parameters provided but SQL statement has no placeholders."
            )
        return
    if placeholder_count != len(params):
        raise AdapterExecutionError(
            f"Parameter count mismatch: expected {placeholder_count}, received {len(params)}."
        )


class DatabaseAdapter(Protocol):
    """
    Adapter interface exposing the database operations used by Host and the
    table structures.
    """

    dialect: Dialect
    default_port: int
    maintenance_database: str | None
    slow_query_ms: int

    def connect(self, config: ConnectionConfig) -> Any:
        """
        Establish a connection handle using the supplied configuration.
        """

    def close(self) -> None:
        """
        Close underlying resources. Implementations should be idempotent.
        """

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """
        Execute a single SQL statement returning a cursor-like object.
        """

    def ping(self) -> None:
        """
        Round-trip a trivial query, raising AdapterConnectionError on failure.
        """

    def create_database(self, database: str) -> None:
        """
        Create ``database`` unless it already exists.
        """

    def use_database(self, database: str) -> None:
        """
        Make ``database`` the target of subsequent statements.
        """
