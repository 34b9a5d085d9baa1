"""
Enum items: immutable (type, name, value) members compared by identity.

Each item is created exactly once, by its owning ``EnumType``. Equality and
hashing are inherited from ``object``, so two items are equal only if they are
the same instance. Copying an item returns the item itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, final

from .errors import make_immutable_error

if TYPE_CHECKING:
    from .enum_type import EnumType

# Leading segment of every rendered enum path (Enum.Food.Apple)
NAMESPACE_LABEL = "Enum"


@final
class EnumItem:
    """
    A single member of an enum type.

    Attributes:
        type_name: Name of the owning enum type
        name: Item name, unique within the type
        value: Integer value, unique within the type
        enum_type: Owning EnumType (None only for detached items)
    """

    __slots__ = ("_type_name", "_name", "_value", "_enum_type", "__weakref__")

    _type_name: str
    _name: str
    _value: int
    _enum_type: EnumType | None

    def __init__(
        self,
        type_name: str,
        name: str,
        value: int,
        enum_type: EnumType | None = None,
    ) -> None:
        object.__setattr__(self, "_type_name", type_name)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_enum_type", enum_type)

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> int:
        return self._value

    @property
    def enum_type(self) -> EnumType | None:
        return self._enum_type

    def is_a(self, enum_type: str | EnumType) -> bool:
        """Return True if this item belongs to ``enum_type`` (a name or an EnumType)."""
        if isinstance(enum_type, str):
            return self._type_name == enum_type
        return self._enum_type is enum_type

    def __setattr__(self, name: str, value: Any) -> None:
        raise make_immutable_error(str(self), name)

    def __delattr__(self, name: str) -> None:
        raise make_immutable_error(str(self), name)

    def __copy__(self) -> EnumItem:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> EnumItem:
        return self

    def __str__(self) -> str:
        return f"{NAMESPACE_LABEL}.{self._type_name}.{self._name}"

    def __repr__(self) -> str:
        return f"<EnumItem {self}: {self._value}>"

    # Host-compatible spellings
    Name = name
    Value = value
    EnumType = enum_type
    IsA = is_a
