"""
The merged, read-only enum namespace.

``NamespaceView`` is the public surface: attribute access resolves enum types
and items across both layers, every write is rejected, and ``new`` is the only
way to add enum types.

Usage:
    from enumspace import create_namespace

    Enum = create_namespace(standard_enums)
    Enum.new("Food", ["Apple", "Banana", "Cherry"])

    Enum.Food.Apple.value          # 1
    str(Enum.Food.Apple)           # "Enum.Food.Apple"
    Enum.from_value("Food", 2)     # Enum.Food.Banana
    Enum.find("Nonexistent")       # None
    Enum.Nonexistent               # raises UnknownEnumTypeError
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, cast, final

from .adapters import ItemsInput
from .enum_type import EnumType
from .errors import (
    EnumSpaceError,
    ErrorContext,
    ErrorKind,
    UnknownEnumItemError,
    UnknownEnumTypeError,
    make_immutable_error,
)
from .items import NAMESPACE_LABEL, EnumItem
from .policy import EnumPolicy
from .registry import EnumRegistry
from .standard import EnumTypeLike, StandardEnumSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving ``"Type"`` or ``"Type.Item"`` without raising.

    Exactly one of ``handle`` and ``error`` is set.
    """

    handle: EnumTypeLike | EnumItem | None = None
    error: ErrorKind | None = None
    message: str = ""
    context: ErrorContext | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> EnumTypeLike | EnumItem:
        """Return the handle, or raise the error this resolution describes."""
        if self.error is ErrorKind.UNKNOWN_ENUM_TYPE:
            raise UnknownEnumTypeError(self.message, self.context)
        if self.error is ErrorKind.UNKNOWN_ENUM_ITEM:
            raise UnknownEnumItemError(self.message, self.context)
        if self.error is not None:
            raise EnumSpaceError(self.message, self.context)
        return cast("EnumTypeLike | EnumItem", self.handle)


def _unknown_type(type_name: str) -> Resolution:
    return Resolution(
        error=ErrorKind.UNKNOWN_ENUM_TYPE,
        message=f"{type_name!r} is not a valid member of {NAMESPACE_LABEL}",
        context=ErrorContext(type_name=type_name),
    )


def _unknown_item(enum_type: EnumTypeLike, item_name: str) -> Resolution:
    return Resolution(
        error=ErrorKind.UNKNOWN_ENUM_ITEM,
        message=f"{item_name!r} is not a valid item of {NAMESPACE_LABEL}.{enum_type.name}",
        context=ErrorContext(type_name=enum_type.name, item_name=item_name),
    )


@final
class NamespaceView:
    """Read-only facade over an ``EnumRegistry``."""

    __slots__ = ("_registry",)

    _registry: EnumRegistry

    def __init__(self, registry: EnumRegistry) -> None:
        object.__setattr__(self, "_registry", registry)

    @property
    def registry(self) -> EnumRegistry:
        return self._registry

    def new(self, name: str, items: ItemsInput | None) -> EnumType:
        """Register a new enum type. See ``EnumRegistry.new``."""
        enum_type = self._registry.new(name, items)
        if self._registry.policy.warnings_enabled and name in SHADOWED_TYPE_NAMES:
            logger.warning(
                "Enum %r is shadowed by a namespace member; use find(%r) or [%r] to reach it",
                name,
                name,
                name,
            )
        return enum_type

    def find(self, name: str) -> EnumTypeLike | None:
        return self._registry.find(name)

    def from_value(self, name: str, value: int) -> EnumItem | None:
        return self._registry.from_value(name, value)

    def from_name(self, name: str, item_name: str) -> EnumItem | None:
        return self._registry.from_name(name, item_name)

    def get_standard_enums(self) -> StandardEnumSource:
        return self._registry.get_standard_enums()

    def get_enums(self) -> list[EnumTypeLike]:
        return self._registry.get_enums()

    def resolve(self, path: str) -> Resolution:
        """
        Resolve ``"Type"`` or ``"Type.Item"`` to a handle or an error kind.

        Never raises for unknown names; see ``Resolution.unwrap``.
        """
        type_name, sep, item_name = str(path).partition(".")
        enum_type = self._registry.find(type_name)
        if enum_type is None:
            return _unknown_type(type_name)
        if not sep:
            return Resolution(handle=enum_type)
        item = enum_type.get_by_name(item_name)
        if item is None:
            return _unknown_item(enum_type, item_name)
        return Resolution(handle=item)

    # Host-compatible spellings
    Find = find
    FromValue = from_value
    FromName = from_name
    GetStandardEnums = get_standard_enums
    GetEnums = get_enums

    def __getattr__(self, name: str) -> EnumTypeLike:
        # Only reached when normal lookup fails: methods and properties win.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return self[name]

    def __getitem__(self, name: str) -> EnumTypeLike:
        enum_type = self._registry.find(name)
        if enum_type is None:
            resolution = _unknown_type(str(name))
            raise UnknownEnumTypeError(resolution.message, resolution.context)
        return enum_type

    def __setattr__(self, name: str, value: Any) -> None:
        raise make_immutable_error(NAMESPACE_LABEL, name)

    def __delattr__(self, name: str) -> None:
        raise make_immutable_error(NAMESPACE_LABEL, name)

    def __setitem__(self, name: str, value: Any) -> None:
        raise make_immutable_error(NAMESPACE_LABEL, name)

    def __delitem__(self, name: str) -> None:
        raise make_immutable_error(NAMESPACE_LABEL, name)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[EnumTypeLike]:
        return iter(self._registry.get_enums())

    def __len__(self) -> int:
        return len(self._registry.names())

    def __bool__(self) -> bool:
        return True

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._registry.names()))

    def __str__(self) -> str:
        return NAMESPACE_LABEL

    def __repr__(self) -> str:
        return f"<NamespaceView {NAMESPACE_LABEL} ({len(self)} enums)>"


# Type names that attribute access can never reach because a NamespaceView member wins.
SHADOWED_TYPE_NAMES = frozenset(name for name in dir(NamespaceView) if not name.startswith("__"))


def create_namespace(
    standard: StandardEnumSource | None = None,
    policy: EnumPolicy | Mapping[str, object] | None = None,
) -> NamespaceView:
    """
    Create a merged enum namespace over ``standard``.

    Args:
        standard: Pre-existing read-only enum types (default: none)
        policy: EnumPolicy, or a mapping of option names to flags

    Returns:
        NamespaceView backed by a fresh EnumRegistry
    """
    if policy is not None and not isinstance(policy, EnumPolicy):
        policy = EnumPolicy.from_options(policy)
    return NamespaceView(EnumRegistry(standard, policy))
