"""
enumspace definition types.

Re-exports the spec models used to describe enum types before registration.
"""

from .enums import EnumItemSpec, EnumTypeSpec

__all__ = [
    "EnumItemSpec",
    "EnumTypeSpec",
]
