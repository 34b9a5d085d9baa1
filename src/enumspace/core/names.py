"""
Name rules for enum types and enum items.

Variable-style names follow the identifier lexing rule: a letter or underscore,
followed by letters, digits, or underscores. Only ASCII characters qualify.
"""

from __future__ import annotations

import re

_VARIABLE_STYLE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_non_empty_name(name: object) -> bool:
    """Return True if ``name`` is a string with at least one character."""
    return isinstance(name, str) and len(name) > 0


def is_valid_name(name: object) -> bool:
    """
    Check whether ``name`` is a variable-style identifier.

    Args:
        name: Candidate enum type or item name

    Returns:
        True if the name is non-empty and identifier-shaped

    Examples:
        >>> is_valid_name("Apple")
        True
        >>> is_valid_name("_private2")
        True
        >>> is_valid_name("2Fast")
        False
        >>> is_valid_name("Hot Dog")
        False
    """
    if not isinstance(name, str):
        return False
    return _VARIABLE_STYLE.fullmatch(name) is not None
