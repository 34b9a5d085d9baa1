"""Core enumspace functionality: names, enum types, policy, registry, merged namespace."""

from . import ir
from .adapters import normalize_items
from .enum_type import EnumType, validate_definition
from .errors import (
    DuplicateNameError,
    DuplicateValueError,
    EmptyEnumError,
    EnumSpaceError,
    ErrorContext,
    ErrorKind,
    ImmutableNamespaceError,
    InvalidItemSpecError,
    InvalidNameError,
    StandardEnumOverwriteForbiddenError,
    UnknownEnumItemError,
    UnknownEnumTypeError,
    UserEnumOverwriteForbiddenError,
)
from .items import NAMESPACE_LABEL, EnumItem
from .names import is_non_empty_name, is_valid_name
from .namespace import NamespaceView, Resolution, create_namespace
from .policy import EnumPolicy, load_policy, policy_from_env, resolve_policy
from .registry import EnumRegistry
from .standard import EnumTypeLike, StandardEnums, StandardEnumSource

__all__ = [
    "ir",
    "NAMESPACE_LABEL",
    # Names
    "is_valid_name",
    "is_non_empty_name",
    # Enum values
    "EnumItem",
    "EnumType",
    "EnumTypeLike",
    "normalize_items",
    "validate_definition",
    # Layers
    "StandardEnums",
    "StandardEnumSource",
    "EnumRegistry",
    "NamespaceView",
    "Resolution",
    "create_namespace",
    # Policy
    "EnumPolicy",
    "load_policy",
    "policy_from_env",
    "resolve_policy",
    # Errors
    "EnumSpaceError",
    "ErrorContext",
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
