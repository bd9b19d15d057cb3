"""
Shared plumbing for structures stored in a single table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Sequence

from ..utils import get_logger, validate_identifier
from .errors import CollectionError

if TYPE_CHECKING:
    from ..host import Host

# Declared length of value columns; MySQL enforces it, SQLite and PostgreSQL do not.
DEFAULT_STRING_LENGTH = 42


class TableStructure:
    """
    A named table holding one string value column.

    The table is created on construction if it does not already exist.
    """

    column: str = "value_col"

    def __init__(self, host: "Host", name: str, *, string_length: int = DEFAULT_STRING_LENGTH) -> None:
        self.host = host
        self.name = validate_identifier(name, kind="table")
        self.string_length = string_length
        self.adapter = host.adapter
        self.dialect = host.adapter.dialect
        self.logger = get_logger(f"structures.{type(self).__name__.lower()}")
        self._table = self.dialect.format_table(self.name)
        self._column = self.dialect.quote_identifier(self.column)
        self._placeholder = self.dialect.parameter_placeholder()
        self._create_table()

    def _column_definitions(self) -> List[str]:
        return [
            self.dialect.render_column_definition(
                self.column, self.dialect.text_type(self.string_length), nullable=True
            )
        ]

    def _create_table(self) -> None:
        columns = ", ".join(self._column_definitions())
        try:
            self.adapter.execute(f"CREATE TABLE IF NOT EXISTS {self._table} ({columns})")
        except Exception as exc:
            raise CollectionError(f"Could not create table {self.name}") from exc
        if self.host.verbose:
            self.logger.info("Created table %s in database %s", self.name, self.host.database)

    def _values(self, sql: str, params: Sequence[Any] | None = None) -> List[str]:
        cursor = self.adapter.execute(sql, params)
        return [row[0] for row in cursor.fetchall()]

    def remove(self) -> None:
        """
        Drop the table.
        """
        self.adapter.execute(f"DROP TABLE {self._table}")

    def clear(self) -> None:
        """
        Delete every element, keeping the table.
        """
        self.adapter.execute(self.dialect.truncate_sql(self.name))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} in {self.host.database!r}>"
