"""
Error hierarchy for table-backed structures.
"""


class CollectionError(RuntimeError):
    """Base error for list and set operations."""


class TooFewElementsError(CollectionError):
    """Raised when fewer elements are stored than were requested."""

    def __init__(self, table: str, requested: int, available: int) -> None:
        self.table = table
        self.requested = requested
        self.available = available
        super().__init__(
            f"Too few elements in table {table}: requested {requested}, found {available}"
        )


class DuplicateMemberError(CollectionError):
    """Raised when a set table holds the same member more than once."""

    def __init__(self, table: str, value: str) -> None:
        self.table = table
        self.value = value
        super().__init__(f"Duplicate members in set {table}: {value!r}")
