"""
SQLite dialect implementation.
"""

from __future__ import annotations


class SQLiteDialect:
    """
    SQLite dialect using qmark param style.
    """

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def limit_clause(self, limit: int) -> str:
        return f"LIMIT {int(limit)}"

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    def text_type(self, length: int) -> str:
        # SQLite ignores declared lengths.
        return "TEXT"

    def autoincrement_primary_key(self, column: str) -> str:
        return f"{self.quote_identifier(column)} INTEGER PRIMARY KEY AUTOINCREMENT"

    def truncate_sql(self, table_name: str) -> str:
        return f"DELETE FROM {self.format_table(table_name)}"