"""
enumspace - a runtime registry of symbolic enum types.

Merges a read-only set of standard enum types with enum types registered at
runtime, behind one immutable namespace object.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.enum_type import EnumType
from .core.errors import (
    DuplicateNameError,
    DuplicateValueError,
    EmptyEnumError,
    EnumSpaceError,
    ErrorKind,
    ImmutableNamespaceError,
    InvalidItemSpecError,
    InvalidNameError,
    StandardEnumOverwriteForbiddenError,
    UnknownEnumItemError,
    UnknownEnumTypeError,
    UserEnumOverwriteForbiddenError,
)
from .core.items import EnumItem
from .core.namespace import NamespaceView, Resolution, create_namespace
from .core.policy import EnumPolicy, load_policy, policy_from_env, resolve_policy
from .core.registry import EnumRegistry
from .core.standard import StandardEnums

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "create_namespace",
    "NamespaceView",
    "Resolution",
    "EnumRegistry",
    "StandardEnums",
    "EnumType",
    "EnumItem",
    "EnumPolicy",
    "load_policy",
    "policy_from_env",
    "resolve_policy",
    "EnumSpaceError",
    "ErrorKind",
    "InvalidNameError",
    "InvalidItemSpecError",
    "DuplicateNameError",
    "DuplicateValueError",
    "EmptyEnumError",
    "StandardEnumOverwriteForbiddenError",
    "UserEnumOverwriteForbiddenError",
    "UnknownEnumTypeError",
    "UnknownEnumItemError",
    "ImmutableNamespaceError",
]
