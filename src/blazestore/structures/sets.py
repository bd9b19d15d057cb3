"""
Unordered set of unique strings.
"""

from __future__ import annotations

from typing import List

from .base import TableStructure
from .errors import DuplicateMemberError


class Set(TableStructure):
    column = "set_col"

    def add(self, value: str) -> None:
        """
        Insert ``value`` unless it is already a member.
        """
        if not self.has(value):
            self.adapter.execute(
                f"INSERT INTO {self._table} ({self._column}) VALUES ({self._placeholder})",
                (value,),
            )

    def has(self, value: str) -> bool:
        members = self._values(
            f"SELECT {self._column} FROM {self._table} WHERE {self._column} = {self._placeholder}",
            (value,),
        )
        if len(members) > 1:
            raise DuplicateMemberError(self.name, value)
        return bool(members)

    def get_all(self) -> List[str]:
        return self._values(f"SELECT {self._column} FROM {self._table}")

    def delete(self, value: str) -> None:
        self.adapter.execute(
            f"DELETE FROM {self._table} WHERE {self._column} = {self._placeholder}",
            (value,),
        )
