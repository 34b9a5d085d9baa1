"""
Boundary adapter from caller-friendly item lists to explicit enum specs.

Callers may describe items in any of these shapes:

    ["Apple", "Banana", "Cherry"]                   # positional: 1, 2, 3
    {1: "One", 100: "Hundred", 1000: "Thousand"}    # explicit values
    [(10, "Ten"), "Eleven", EnumItemSpec(name="X")] # mixed; positional = 1-based index

Everything downstream of ``normalize_items`` sees explicit (value, name) pairs only.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from pydantic import ValidationError

from .errors import ErrorContext, InvalidItemSpecError
from .ir import EnumItemSpec, EnumTypeSpec

ItemsInput: TypeAlias = Mapping[int, str] | Iterable[Any]


def normalize_items(type_name: str, items: ItemsInput | None) -> EnumTypeSpec:
    """
    Convert a caller-supplied item collection into an ``EnumTypeSpec``.

    Args:
        type_name: Name of the enum type the items belong to
        items: Names, (value, name) pairs, ``EnumItemSpec`` objects, or an
            int-to-name mapping. ``None`` is treated as no items.

    A positional entry takes its 1-based index in the whole sequence, and
    explicit entries count toward that index: ``["A", (10, "Ten"), "C"]``
    gives ``C = 3``, not ``C = 2``.

    Returns:
        EnumTypeSpec whose items all carry explicit values

    Raises:
        InvalidItemSpecError: If the collection or one of its entries has the wrong shape
    """
    if not isinstance(type_name, str):
        raise InvalidItemSpecError(
            f"enum type name must be a string, got {type(type_name).__name__}"
        )

    if items is None:
        specs: list[EnumItemSpec] = []
    elif isinstance(items, str | bytes):
        raise InvalidItemSpecError(
            "items must be a collection of names, not a single string",
            ErrorContext(type_name=type_name),
        )
    elif isinstance(items, Mapping):
        specs = [_spec_from_pair(type_name, value, name) for value, name in items.items()]
    elif isinstance(items, Iterable):
        specs = [
            _spec_from_entry(type_name, entry, position)
            for position, entry in enumerate(items, start=1)
        ]
    else:
        raise InvalidItemSpecError(
            f"items must be a sequence or mapping, got {type(items).__name__}",
            ErrorContext(type_name=type_name),
        )

    return EnumTypeSpec(name=type_name, items=tuple(specs))


def _spec_from_entry(type_name: str, entry: Any, position: int) -> EnumItemSpec:
    """Build a positioned spec from one entry of an item sequence."""
    if isinstance(entry, EnumItemSpec):
        return entry.with_position(position)
    if isinstance(entry, str):
        return _spec_from_pair(type_name, position, entry)
    if isinstance(entry, tuple | list) and len(entry) == 2:
        value, name = entry
        return _spec_from_pair(type_name, value, name)
    raise InvalidItemSpecError(
        f"item #{position} must be a name or a (value, name) pair, got {entry!r}",
        ErrorContext(type_name=type_name),
    )


def _spec_from_pair(type_name: str, value: Any, name: Any) -> EnumItemSpec:
    if value is None:
        raise InvalidItemSpecError(
            f"item {name!r} has no value", ErrorContext(type_name=type_name, item_name=str(name))
        )
    try:
        return EnumItemSpec(value=value, name=name)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise InvalidItemSpecError(
            f"invalid item ({value!r}, {name!r}): {problems}",
            ErrorContext(type_name=type_name),
        ) from e
