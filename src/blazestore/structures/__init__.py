"""
Table-backed list and set structures.
"""

from .base import DEFAULT_STRING_LENGTH, TableStructure
from .errors import CollectionError, DuplicateMemberError, TooFewElementsError
from .lists import List
from .sets import Set

__all__ = [
    "DEFAULT_STRING_LENGTH",
    "TableStructure",
    "List",
    "Set",
    "CollectionError",
    "DuplicateMemberError",
    "TooFewElementsError",
]
