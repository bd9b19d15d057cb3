"""
Slow query threshold resolution.
"""

from __future__ import annotations

import os

SLOW_QUERY_ENV = "BLAZESTORE_SLOW_QUERY_MS"


def resolve_slow_query_ms(*, default: int, override: int | None = None) -> int:
    """
    Pick the slow query threshold: explicit override, then environment, then default.
    """

    if override is not None:
        return int(override)
    value = os.getenv(SLOW_QUERY_ENV)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value for {SLOW_QUERY_ENV}: {value!r}") from exc
