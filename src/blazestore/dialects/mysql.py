"""
MySQL dialect implementation.
"""

from __future__ import annotations


class MySQLDialect:
    """
    MySQL dialect using percent-style placeholders.
    """

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def limit_clause(self, limit: int) -> str:
        return f"LIMIT {int(limit)}"

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    def text_type(self, length: int) -> str:
        return f"VARCHAR({length})"

    def autoincrement_primary_key(self, column: str) -> str:
        return f"{self.quote_identifier(column)} INT PRIMARY KEY AUTO_INCREMENT"

    def truncate_sql(self, table_name: str) -> str:
        return f"TRUNCATE TABLE {self.format_table(table_name)}"

    def create_database_sql(self, database: str) -> str:
        return f"CREATE DATABASE IF NOT EXISTS {self.quote_identifier(database)} CHARACTER SET = utf8"

    def use_database_sql(self, database: str) -> str:
        return f"USE {self.quote_identifier(database)}"