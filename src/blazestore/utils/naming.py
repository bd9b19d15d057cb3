"""
Naming utilities for blazestore.
"""

import re


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,62}$")


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def validate_identifier(name: str, *, kind: str = "identifier") -> str:
    """
    Return ``name`` unchanged if it is a plain SQL identifier.

    Table and database names end up in DDL and ``USE`` statements that cannot
    take bound parameters, so anything beyond letters, digits and underscores
    is rejected.
    """
    if not isinstance(name, str) or not is_identifier(name):
        raise ValueError(f"Invalid {kind} name: {name!r}")
    return name
