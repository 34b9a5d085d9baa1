"""
The standard (pre-existing, read-only) enum layer.

The registry only needs the read contract in ``EnumTypeLike``; any mapping of
type name to such objects can be injected. ``StandardEnums`` is the provided
implementation, buildable from plain definitions or from Python ``enum``
classes with integer values.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

from .adapters import ItemsInput, normalize_items
from .enum_type import EnumType
from .errors import InvalidItemSpecError, make_immutable_error
from .ir import EnumItemSpec
from .policy import EnumPolicy

logger = logging.getLogger(__name__)


@runtime_checkable
class EnumTypeLike(Protocol):
    """Read contract every enum type in either layer satisfies."""

    @property
    def name(self) -> str: ...

    def get_by_name(self, name: str) -> Any: ...

    def get_by_value(self, value: int) -> Any: ...

    def get_enum_items(self) -> Sequence[Any]: ...


StandardEnumSource = Mapping[str, EnumTypeLike]


class StandardEnums(Mapping[str, EnumType]):
    """
    Read-only mapping of standard enum types.

    Standard enum types may have zero items, since the host namespace is the
    source of truth for what exists.
    """

    __slots__ = ("_types",)

    _types: MappingProxyType[str, EnumType]

    def __init__(self, types: Iterable[EnumType] = ()) -> None:
        by_name: dict[str, EnumType] = {}
        for enum_type in types:
            if enum_type.name in by_name:
                raise ValueError(f"Duplicate standard enum {enum_type.name!r}")
            by_name[enum_type.name] = enum_type
        object.__setattr__(self, "_types", MappingProxyType(by_name))

    @classmethod
    def from_definitions(cls, definitions: Mapping[str, ItemsInput]) -> StandardEnums:
        """
        Build standard enums from ``{type_name: items}`` definitions.

        Items use the same shapes accepted by ``NamespaceView.new``.
        """
        policy = EnumPolicy(empty_enum_enabled=True, warnings_enabled=False)
        return cls(
            EnumType.from_spec(normalize_items(name, items), policy)
            for name, items in definitions.items()
        )

    @classmethod
    def from_enum_classes(cls, enum_classes: Iterable[type[enum.Enum]]) -> StandardEnums:
        """
        Adapt Python ``enum.Enum`` classes whose member values are integers.

        Aliases are skipped; only canonical members become items.
        """
        policy = EnumPolicy(empty_enum_enabled=True, warnings_enabled=False)
        types = []
        for enum_class in enum_classes:
            specs = []
            for member in enum_class:
                if not isinstance(member.value, int) or isinstance(member.value, bool):
                    raise InvalidItemSpecError(
                        f"{enum_class.__name__}.{member.name} has non-integer value "
                        f"{member.value!r}"
                    )
                specs.append(EnumItemSpec(name=member.name, value=int(member.value)))
            types.append(EnumType(enum_class.__name__, specs, policy))
        logger.debug("Adapted %d enum classes as standard enums", len(types))
        return cls(types)

    def __getitem__(self, name: str) -> EnumType:
        return self._types[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __setattr__(self, name: str, value: Any) -> None:
        raise make_immutable_error("the standard enums", name)

    def __delattr__(self, name: str) -> None:
        raise make_immutable_error("the standard enums", name)

    def __repr__(self) -> str:
        return f"<StandardEnums {list(self._types)}>"
