"""
Ordered list stored as an autoincrement-keyed table.
"""

from __future__ import annotations

from typing import List as ListType, Optional

from .base import TableStructure
from .errors import TooFewElementsError


class List(TableStructure):
    """
    Append-only ordered list. Insertion order is the ``id`` column order.
    """

    column = "list_col"

    def _column_definitions(self) -> ListType[str]:
        return [self.dialect.autoincrement_primary_key("id"), *super()._column_definitions()]

    def add(self, value: str) -> None:
        self.adapter.execute(
            f"INSERT INTO {self._table} ({self._column}) VALUES ({self._placeholder})",
            (value,),
        )

    def get_all(self) -> ListType[str]:
        return self._values(f"SELECT {self._column} FROM {self._table} ORDER BY id")

    def get_last(self) -> Optional[str]:
        """
        Return the most recently added element, or ``None`` for an empty list.
        """

        values = self._values(
            f"SELECT {self._column} FROM {self._table} "
            f"WHERE id = (SELECT MAX(id) FROM {self._table})"
        )
        return values[0] if values else None

    def get_last_n(self, n: int) -> ListType[str]:
        """
        Return the last ``n`` elements, oldest first.

        Raises TooFewElementsError if the list holds fewer than ``n`` elements.
        """

        n = int(n)
        if n < 0:
            raise ValueError("n must not be negative")
        limit = self.dialect.limit_clause(n)
        values = self._values(
            f"SELECT {self._column} FROM "
            f"(SELECT id, {self._column} FROM {self._table} ORDER BY id DESC {limit}) sub "
            "ORDER BY id ASC"
        )
        if len(values) < n:
            raise TooFewElementsError(self.name, n, len(values))
        return values
