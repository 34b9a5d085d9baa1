"""
Enum definition specs.

Specs describe an enum type before it exists: the type name plus an ordered
list of (value, name) pairs. Runtime enum types are built from them by the
registry.

Positional values are filled in at the boundary (see ``adapters``) so that every
spec reaching the registry carries an explicit value:

    EnumTypeSpec(
        name="Numbers",
        items=[
            EnumItemSpec(value=1, name="One"),
            EnumItemSpec(value=100, name="Hundred"),
        ],
    )
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class EnumItemSpec(BaseModel):
    """A single item within an enum definition. ``value`` is None until positioned."""

    name: StrictStr
    value: StrictInt | None = None

    model_config = ConfigDict(frozen=True)

    def with_position(self, position: int) -> EnumItemSpec:
        """Return this spec with ``value`` defaulted to ``position`` if unset."""
        if self.value is not None:
            return self
        return self.model_copy(update={"value": position})


class EnumTypeSpec(BaseModel):
    """
    An enum type definition.

    Attributes:
        name: Enum identifier (e.g. Food)
        items: Ordered item specs, all with explicit values
    """

    name: StrictStr
    items: tuple[EnumItemSpec, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)
