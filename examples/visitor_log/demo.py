"""
Utility helpers for running the visitor log example end-to-end.
"""

from __future__ import annotations

from typing import Any, Dict, List as ListType

from blazestore import ConnectionConfig, Host, List, Set, SQLiteAdapter

VISITS_TABLE = "visits"
VISITORS_TABLE = "visitors"


def bootstrap_host(url: str = "sqlite:///:memory:", *, verbose: bool = False) -> Host:
    """
    Open a SQLite-backed host for the example.
    """

    config = ConnectionConfig(url=url, verbose=verbose)
    return Host(SQLiteAdapter(), config)


def record_visit(host: Host, visitor: str) -> None:
    """
    Append the visit to the log and remember the visitor.
    """

    List(host, VISITS_TABLE).add(visitor)
    Set(host, VISITORS_TABLE).add(visitor)


def recent_visitors(host: Host, count: int = 3) -> ListType[str]:
    visits = List(host, VISITS_TABLE)
    available = len(visits.get_all())
    return visits.get_last_n(min(count, available))


def run_demo(url: str = "sqlite:///:memory:") -> Dict[str, Any]:
    host = bootstrap_host(url)
    try:
        for visitor in ("alice", "bob", "alice", "carol", "bob"):
            record_visit(host, visitor)
        return {
            "visits": List(host, VISITS_TABLE).get_all(),
            "visitors": sorted(Set(host, VISITORS_TABLE).get_all()),
            "recent": recent_visitors(host),
            "last": List(host, VISITS_TABLE).get_last(),
        }
    finally:
        host.close()


if __name__ == "__main__":  # pragma: no cover - manual demo entry point
    print(run_demo())
