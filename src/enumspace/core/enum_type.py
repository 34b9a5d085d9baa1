"""
Enum types: immutable, ordered collections of enum items.

An EnumType owns the only EnumItem instances for its (value, name) pairs.
Items are reachable by name (attribute, subscript, ``get_by_name``) and by
value (``get_by_value``), and iterate in ascending value order.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from types import MappingProxyType
from typing import Any, cast, final

from .errors import (
    DuplicateNameError,
    DuplicateValueError,
    EmptyEnumError,
    ErrorContext,
    InvalidItemSpecError,
    UnknownEnumItemError,
    make_immutable_error,
    make_invalid_name_error,
)
from .ir import EnumItemSpec, EnumTypeSpec
from .items import NAMESPACE_LABEL, EnumItem
from .names import is_non_empty_name, is_valid_name
from .policy import EnumPolicy


def validate_definition(name: str, specs: Sequence[EnumItemSpec], policy: EnumPolicy) -> None:
    """
    Validate an enum definition, failing on the first problem found.

    Checks, in order:
    - The type name is non-empty (and identifier-style if naming is enforced)
    - Every item name is non-empty (and identifier-style if naming is enforced)
    - Item names are unique
    - Item values are unique
    - There is at least one item, unless empty enums are enabled

    Raises:
        InvalidNameError, DuplicateNameError, DuplicateValueError, EmptyEnumError
    """
    if not is_non_empty_name(name):
        raise make_invalid_name_error("enum type name must not be empty", type_name=str(name))
    if policy.variable_style_naming and not is_valid_name(name):
        raise make_invalid_name_error(
            "enum type name must start with a letter or underscore and contain "
            "only letters, digits, and underscores",
            type_name=name,
        )

    for spec in specs:
        if not is_non_empty_name(spec.name):
            raise make_invalid_name_error("enum item name must not be empty", name, spec.name)
        if policy.variable_style_naming and not is_valid_name(spec.name):
            raise make_invalid_name_error(
                "enum item name must start with a letter or underscore and contain "
                "only letters, digits, and underscores",
                name,
                spec.name,
            )

    seen_names: set[str] = set()
    for spec in specs:
        if spec.name in seen_names:
            raise DuplicateNameError(
                "duplicate item name", ErrorContext(type_name=name, item_name=spec.name)
            )
        seen_names.add(spec.name)

    seen_values: dict[int, str] = {}
    for spec in specs:
        if spec.value is None:
            raise InvalidItemSpecError(
                "item has no value", ErrorContext(type_name=name, item_name=spec.name)
            )
        if spec.value in seen_values:
            raise DuplicateValueError(
                f"value already used by item {seen_values[spec.value]!r}",
                ErrorContext(type_name=name, item_name=spec.name, value=spec.value),
            )
        seen_values[spec.value] = spec.name

    if not specs and not policy.empty_enum_enabled:
        raise EmptyEnumError("enum must have at least one item", ErrorContext(type_name=name))


@final
class EnumType:
    """
    A named, immutable set of uniquely named, uniquely valued items.

    Attributes:
        name: Enum type name, unique across the merged namespace
    """

    __slots__ = ("_name", "_items_by_name", "_items_by_value", "_sorted_items", "__weakref__")

    _name: str
    _items_by_name: MappingProxyType[str, EnumItem]
    _items_by_value: MappingProxyType[int, EnumItem]
    _sorted_items: tuple[EnumItem, ...]

    def __init__(
        self,
        name: str,
        specs: Sequence[EnumItemSpec],
        policy: EnumPolicy | None = None,
    ) -> None:
        specs = tuple(specs)
        validate_definition(name, specs, policy or EnumPolicy())

        by_name: dict[str, EnumItem] = {}
        by_value: dict[int, EnumItem] = {}
        for spec in specs:
            value = cast(int, spec.value)
            item = EnumItem(name, spec.name, value, self)
            by_name[spec.name] = item
            by_value[value] = item

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_items_by_name", MappingProxyType(by_name))
        object.__setattr__(self, "_items_by_value", MappingProxyType(by_value))
        object.__setattr__(
            self, "_sorted_items", tuple(sorted(by_name.values(), key=lambda i: i.value))
        )

    @classmethod
    def from_spec(cls, spec: EnumTypeSpec, policy: EnumPolicy | None = None) -> EnumType:
        """Build an EnumType from a normalized ``EnumTypeSpec``."""
        return cls(spec.name, spec.items, policy)

    @property
    def name(self) -> str:
        return self._name

    @property
    def items_by_name(self) -> MappingProxyType[str, EnumItem]:
        """Read-only name -> item mapping in definition order."""
        return self._items_by_name

    def get_by_name(self, name: str) -> EnumItem | None:
        return self._items_by_name.get(name) if isinstance(name, str) else None

    def get_by_value(self, value: int) -> EnumItem | None:
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        return self._items_by_value.get(value)

    def get_enum_items(self) -> tuple[EnumItem, ...]:
        """Return all items sorted by ascending value."""
        return self._sorted_items

    # Host-compatible spellings
    GetEnumItems = get_enum_items
    FromName = get_by_name
    FromValue = get_by_value

    def __getattr__(self, name: str) -> EnumItem:
        # Only reached when normal lookup fails: slots, properties and methods win.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        item = self._items_by_name.get(name)
        if item is None:
            raise UnknownEnumItemError(
                f"{name!r} is not a valid item of {self}",
                ErrorContext(type_name=self._name, item_name=name),
            )
        return item

    def __getitem__(self, name: str) -> EnumItem:
        item = self.get_by_name(name)
        if item is None:
            raise UnknownEnumItemError(
                f"{name!r} is not a valid item of {self}",
                ErrorContext(type_name=self._name, item_name=str(name)),
            )
        return item

    def __setattr__(self, name: str, value: Any) -> None:
        raise make_immutable_error(str(self), name)

    def __delattr__(self, name: str) -> None:
        raise make_immutable_error(str(self), name)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, EnumItem):
            return item.enum_type is self
        if isinstance(item, str):
            return item in self._items_by_name
        return False

    def __iter__(self) -> Iterator[EnumItem]:
        return iter(self._sorted_items)

    def __len__(self) -> int:
        return len(self._sorted_items)

    def __bool__(self) -> bool:
        # An empty enum is still a found enum.
        return True

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._items_by_name))

    def __copy__(self) -> EnumType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> EnumType:
        return self

    def __str__(self) -> str:
        return f"{NAMESPACE_LABEL}.{self._name}"

    def __repr__(self) -> str:
        return f"<EnumType {self} ({len(self._sorted_items)} items)>"


# Item names that attribute access can never reach because an EnumType member wins.
SHADOWED_ITEM_NAMES = frozenset(name for name in dir(EnumType) if not name.startswith("__"))
