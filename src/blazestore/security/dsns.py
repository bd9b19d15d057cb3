"""
Connection string parsing and canonical rebuilding.

Accepts the loose ``[username[:password]@]host[:port]/database[?args]`` form
and produces a ``postgres://`` URL. Parsing is total: ambiguous or malformed
input degrades to empty fields and defaults instead of raising.

Strings that carry a ``scheme://`` prefix are read as URLs instead: the
authority ends at the first ``/``, credentials end at the last ``@``, the port
follows the last ``:`` of the authority and the arguments follow the last
``?`` of the path. This is the exact inverse of the canonical encoding, so a
canonical string parses back to the fields it was built from.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Final

from ..utils.logging import get_logger, trace_fields
from .redaction import REDACTED_VALUE

SCHEME: Final[str] = "postgres://"
DEFAULT_PORT: Final[int] = 5432
DEFAULT_DATABASE: Final[str] = "test"
DEFAULT_ARGS: Final[str] = "sslmode=disable"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

logger = get_logger("security.dsns")


@dataclass(frozen=True)
class ParsedConnection:
    """
    Decoded connection string fields.

    ``has_password`` tells ``user:@host`` (empty password) apart from
    ``user@host`` (no password at all).
    """

    username: str = ""
    password: str = ""
    has_password: bool = False
    host: str = ""
    port: str = ""
    database: str = DEFAULT_DATABASE
    args: str = ""

    def with_database(self, database: str) -> "ParsedConnection":
        return replace(self, database=database)

    def redacted(self, scheme: str = SCHEME) -> str:
        """
        Return the connection string with the password masked.

        ``scheme`` only changes the label; drivers that do not speak
        ``postgres://`` use it to describe their own connections.
        """

        if self.has_password and self.password:
            return _encode(replace(self, password=REDACTED_VALUE), scheme)
        return _encode(self, scheme)


def two_fields(value: str, delim: str) -> tuple[str, str, bool]:
    """
    Split ``value`` in two around ``delim``, which must occur exactly once.
    """

    if value.count(delim) != 1:
        return value, "", False
    left, right = value.split(delim)
    return left, right, True


def left_of(value: str, delim: str) -> str:
    left, _, ok = two_fields(value, delim)
    return left.strip() if ok else ""


def right_of(value: str, delim: str) -> str:
    _, right, ok = two_fields(value, delim)
    return right.strip() if ok else ""


def _parse_loose(raw: str, default_port: int, default_database: str) -> ParsedConnection:
    # Optional credentials left of a single @
    user_pass = left_of(raw, "@")
    if user_pass:
        host_port_database = right_of(raw, "@")
    else:
        host_port_database = raw.rstrip("@")

    # Optional database right of a single /
    database = right_of(host_port_database, "/")
    if database:
        host_port = left_of(host_port_database, "/")
    else:
        host_port = raw.rstrip("/")
        database = default_database
    if "@" in host_port:
        host_port = right_of(host_port, "@")

    username, password, has_password = two_fields(user_pass, ":")
    if has_password:
        username, password = username.strip(), password.strip()
    else:
        username, password = user_pass.rstrip(":"), ""

    port = right_of(host_port, ":")
    if port:
        host = left_of(host_port, ":")
    else:
        host = host_port.rstrip(":")
        if host:
            port = str(default_port)

    args = ""
    if "?" in database and "=" in database:
        args = right_of(database, "?")
        if args:
            database = left_of(database, "?")

    return ParsedConnection(
        username=username,
        password=password,
        has_password=has_password,
        host=host,
        port=port,
        database=database,
        args=args,
    )


def _parse_url(rest: str, default_port: int, default_database: str) -> ParsedConnection:
    authority, slash, path = rest.partition("/")
    user_pass, _, host_port = authority.rpartition("@")

    username, password, has_password = two_fields(user_pass, ":")
    if not has_password:
        username, password = user_pass, ""

    host, colon, port = host_port.rpartition(":")
    if not colon:
        host = host_port
    if host and not port:
        port = str(default_port)

    database, question, args = path.rpartition("?")
    if not question:
        database, args = path, ""
    if not slash:
        database = default_database

    return ParsedConnection(
        username=username,
        password=password,
        has_password=has_password,
        host=host,
        port=port,
        database=database,
        args=args,
    )


def parse_connection_string(
    connection_string: str,
    *,
    default_port: int = DEFAULT_PORT,
    default_database: str = DEFAULT_DATABASE,
    verbose: bool = False,
) -> ParsedConnection:
    """
    Decompose a connection string into its fields. Never raises.
    """

    match = _SCHEME_RE.match(connection_string)
    if match:
        parsed = _parse_url(connection_string[match.end():], default_port, default_database)
    else:
        parsed = _parse_loose(connection_string, default_port, default_database)

    if verbose:
        trace_fields(
            logger,
            "Connection:",
            [
                ("username", parsed.username),
                ("password", REDACTED_VALUE if parsed.password else ""),
                ("has password", parsed.has_password),
                ("host", parsed.host),
                ("port", parsed.port),
                ("dbname", parsed.database),
                ("args", parsed.args),
            ],
        )
    return parsed


def _encode(parsed: ParsedConnection, scheme: str = SCHEME) -> str:
    parts: list[str] = []
    if not parsed.username.startswith(scheme):
        parts.append(scheme)

    if parsed.username and parsed.has_password:
        parts.append(f"{parsed.username}:{parsed.password}@")
    elif parsed.username:
        parts.append(f"{parsed.username}@")
    elif parsed.has_password:
        parts.append(f":{parsed.password}@")

    if parsed.host:
        parts.append(parsed.host)
    if parsed.port:
        parts.append(f":{parsed.port}")

    parts.append(f"/{parsed.database}")
    parts.append(f"?{parsed.args or DEFAULT_ARGS}")
    return "".join(parts)


def build_connection_string(parsed: ParsedConnection, *, verbose: bool = False) -> str:
    """
    Serialize parsed fields into the canonical ``postgres://`` form.
    """

    result = _encode(parsed)
    if verbose:
        logger.info("Connection string: %s", parsed.redacted())
    return result


def rebuild_connection_string(
    connection_string: str,
    *,
    default_port: int = DEFAULT_PORT,
    default_database: str = DEFAULT_DATABASE,
    verbose: bool = False,
) -> tuple[str, str]:
    """
    Take a connection string apart and rebuild it.

    Returns the canonical string and the database name, which callers need
    separately to create and select that database.
    """

    parsed = parse_connection_string(
        connection_string,
        default_port=default_port,
        default_database=default_database,
        verbose=verbose,
    )
    return build_connection_string(parsed, verbose=verbose), parsed.database
