"""
Dialect strategy interfaces describing per-backend SQL fragments.
"""

from __future__ import annotations

from typing import Protocol


class Dialect(Protocol):
    """
    Strategy interface consumed by adapters and table structures.
    """

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: int) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...

    def text_type(self, length: int) -> str: ...

    def autoincrement_primary_key(self, column: str) -> str: ...

    def truncate_sql(self, table_name: str) -> str: ...
