"""
Enum registry: the growable user layer on top of the standard enums.

Handles overwrite policy, creation-time validation, and layered lookup
(user enums first, then standard enums).
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType

from .adapters import ItemsInput, normalize_items
from .enum_type import SHADOWED_ITEM_NAMES, EnumType
from .errors import (
    ErrorContext,
    StandardEnumOverwriteForbiddenError,
    UserEnumOverwriteForbiddenError,
)
from .items import EnumItem
from .names import is_valid_name
from .policy import EnumPolicy
from .standard import EnumTypeLike, StandardEnums, StandardEnumSource

logger = logging.getLogger(__name__)


class EnumRegistry:
    """
    Registry of user-defined enum types layered over the standard enums.

    The standard layer is never mutated. The user layer never holds two types
    under one name: re-registration replaces the previous type wholesale.
    Items of a replaced type stay valid but are no longer reachable through
    ``find`` or ``from_value``.
    """

    def __init__(
        self,
        standard: StandardEnumSource | None = None,
        policy: EnumPolicy | None = None,
    ) -> None:
        self._standard: StandardEnumSource = standard if standard is not None else StandardEnums()
        self._policy = policy or EnumPolicy()
        self._user: dict[str, EnumType] = {}
        self._lock = threading.Lock()

    @property
    def policy(self) -> EnumPolicy:
        return self._policy

    @property
    def user_enums(self) -> MappingProxyType[str, EnumType]:
        """Read-only view of the user layer."""
        return MappingProxyType(self._user)

    # =========================================================================
    # Registration
    # =========================================================================

    def new(self, name: str, items: ItemsInput | None) -> EnumType:
        """
        Create and register a new enum type.

        Args:
            name: Enum type name
            items: Item names and/or (value, name) pairs; see ``normalize_items``

        Returns:
            The newly registered EnumType

        Raises:
            StandardEnumOverwriteForbiddenError: ``name`` is a standard enum and
                standard overwrites are disabled
            UserEnumOverwriteForbiddenError: ``name`` is already registered and
                user overwrites are disabled
            InvalidNameError, InvalidItemSpecError, DuplicateNameError,
            DuplicateValueError, EmptyEnumError: the definition is invalid
        """
        spec = normalize_items(name, items)
        with self._lock:
            replaces_user, replaces_standard = self._check_overwrite(name)
            # Built completely before it becomes visible to readers.
            enum_type = EnumType.from_spec(spec, self._policy)
            self._warn_overwrite(name, replaces_user, replaces_standard)
            self._warn_unreachable_names(enum_type)
            self._user[name] = enum_type

        logger.debug("Registered enum %s with %d items", enum_type, len(enum_type))
        return enum_type

    def _check_overwrite(self, name: str) -> tuple[bool, bool]:
        """Reject forbidden overwrites; return (replaces user enum, replaces standard enum)."""
        in_standard = name in self._standard
        if in_standard and not self._policy.standard_overwrite_enabled:
            raise StandardEnumOverwriteForbiddenError(
                "a standard enum with this name already exists and standard enum "
                "overwrites are disabled",
                ErrorContext(type_name=name),
            )

        in_user = name in self._user
        if in_user and not self._policy.enum_overwrite_enabled:
            raise UserEnumOverwriteForbiddenError(
                "an enum with this name was already created and enum overwrites are disabled",
                ErrorContext(type_name=name),
            )
        return in_user, in_standard

    def _warn_overwrite(self, name: str, replaces_user: bool, replaces_standard: bool) -> None:
        if not self._policy.warnings_enabled:
            return
        if replaces_user:
            logger.warning(
                "Overwriting enum %r; items of the previous definition are no longer reachable",
                name,
            )
        elif replaces_standard:
            logger.warning("Overwriting standard enum %r with a user-defined enum", name)

    def _warn_unreachable_names(self, enum_type: EnumType) -> None:
        if not self._policy.warnings_enabled:
            return
        if not is_valid_name(enum_type.name):
            logger.warning(
                "Enum name %r is not a valid identifier; it is only reachable via find()",
                enum_type.name,
            )
        hidden = [
            item.name
            for item in enum_type.items_by_name.values()
            if not is_valid_name(item.name) or item.name in SHADOWED_ITEM_NAMES
        ]
        if hidden:
            logger.warning(
                "Items of enum %r cannot be reached by attribute access: %s",
                enum_type.name,
                ", ".join(hidden),
            )

    # =========================================================================
    # Lookup
    # =========================================================================

    def find(self, name: str) -> EnumTypeLike | None:
        """Return the enum type called ``name`` (user layer first), or None."""
        if not isinstance(name, str):
            return None
        user_type = self._user.get(name)
        if user_type is not None:
            return user_type
        return self._standard.get(name)

    def from_value(self, name: str, value: int) -> EnumItem | None:
        """Return the item of enum ``name`` with ``value``, or None if either is unknown."""
        enum_type = self.find(name)
        if enum_type is None:
            return None
        return enum_type.get_by_value(value)

    def from_name(self, name: str, item_name: str) -> EnumItem | None:
        """Return the item of enum ``name`` called ``item_name``, or None if either is unknown."""
        enum_type = self.find(name)
        if enum_type is None:
            return None
        return enum_type.get_by_name(item_name)

    def get_standard_enums(self) -> StandardEnumSource:
        """Return the standard layer exactly as injected."""
        return self._standard

    def names(self) -> list[str]:
        """Return every merged type name: standard enums first, then new user enums."""
        merged = list(self._standard)
        merged.extend(name for name in self._user if name not in self._standard)
        return merged

    def get_enums(self) -> list[EnumTypeLike]:
        """Return every merged enum type, with user overwrites taking precedence."""
        return [enum_type for name in self.names() if (enum_type := self.find(name)) is not None]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None
