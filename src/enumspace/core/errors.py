"""
Error types for enum registration, resolution, and namespace mutation.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    """Stable identifiers for every failure the namespace can report."""

    INVALID_NAME = "InvalidName"
    INVALID_ITEM_SPEC = "InvalidItemSpec"
    DUPLICATE_NAME = "DuplicateName"
    DUPLICATE_VALUE = "DuplicateValue"
    EMPTY_ENUM = "EmptyEnum"
    STANDARD_ENUM_OVERWRITE_FORBIDDEN = "StandardEnumOverwriteForbidden"
    USER_ENUM_OVERWRITE_FORBIDDEN = "UserEnumOverwriteForbidden"
    UNKNOWN_ENUM_TYPE = "UnknownEnumType"
    UNKNOWN_ENUM_ITEM = "UnknownEnumItem"
    IMMUTABLE_NAMESPACE = "ImmutableNamespace"


@dataclass(frozen=True)
class ErrorContext:
    """
    Context information for an error: which enum, item, or value was involved.

    Attributes:
        type_name: Name of the enum type being created or resolved
        item_name: Optional item name within that type
        value: Optional item value within that type
    """

    type_name: str
    item_name: str | None = None
    value: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "enum 'Food' item 'Apple' (value 1)"
        """
        location = f"enum {self.type_name!r}"
        if self.item_name is not None:
            location += f" item {self.item_name!r}"
        if self.value is not None:
            location += f" (value {self.value})"
        return location


class EnumSpaceError(Exception):
    """Base exception for all enumspace errors."""

    kind: ErrorKind

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class InvalidNameError(EnumSpaceError, ValueError):
    """
    Raised when an enum type or item name is rejected.

    Examples:
    - Empty names
    - Names starting with a digit while variable-style naming is enforced
    - Names containing spaces or punctuation while variable-style naming is enforced
    """

    kind = ErrorKind.INVALID_NAME


class InvalidItemSpecError(EnumSpaceError, TypeError):
    """
    Raised when an item list cannot be turned into (value, name) pairs.

    Examples:
    - Non-integer explicit values
    - Entries that are neither a name nor a (value, name) pair
    """

    kind = ErrorKind.INVALID_ITEM_SPEC


class DuplicateNameError(EnumSpaceError, ValueError):
    """Raised when two items in one creation request share a name."""

    kind = ErrorKind.DUPLICATE_NAME


class DuplicateValueError(EnumSpaceError, ValueError):
    """Raised when two items in one creation request share a value."""

    kind = ErrorKind.DUPLICATE_VALUE


class EmptyEnumError(EnumSpaceError, ValueError):
    """Raised when an enum without items is created while empty enums are disabled."""

    kind = ErrorKind.EMPTY_ENUM


class StandardEnumOverwriteForbiddenError(EnumSpaceError):
    """Raised when a new enum would replace a standard enum and that is disabled."""

    kind = ErrorKind.STANDARD_ENUM_OVERWRITE_FORBIDDEN


class UserEnumOverwriteForbiddenError(EnumSpaceError):
    """Raised when a new enum would replace a user enum and that is disabled."""

    kind = ErrorKind.USER_ENUM_OVERWRITE_FORBIDDEN


class UnknownEnumTypeError(EnumSpaceError, AttributeError):
    """Raised on attribute access to an enum type that does not exist."""

    kind = ErrorKind.UNKNOWN_ENUM_TYPE


class UnknownEnumItemError(EnumSpaceError, AttributeError):
    """Raised on attribute or subscript access to an item that does not exist."""

    kind = ErrorKind.UNKNOWN_ENUM_ITEM


class ImmutableNamespaceError(EnumSpaceError, AttributeError):
    """
    Raised on any write outside the sanctioned ``new`` path.

    Examples:
    - ``namespace.Food = ...``
    - ``namespace.Food.Apple = ...``
    - ``namespace.Food.Apple.value = ...``
    - ``del namespace.Food``
    """

    kind = ErrorKind.IMMUTABLE_NAMESPACE


def make_invalid_name_error(
    message: str,
    type_name: str,
    item_name: str | None = None,
) -> InvalidNameError:
    """
    Helper to create an InvalidNameError with context.

    Args:
        message: Error description
        type_name: Enum type being created
        item_name: Offending item name, if the item rather than the type is invalid

    Returns:
        InvalidNameError with context attached
    """
    return InvalidNameError(message, ErrorContext(type_name=type_name, item_name=item_name))


def make_immutable_error(target: str, attribute: str) -> ImmutableNamespaceError:
    """
    Helper to create an ImmutableNamespaceError for a rejected write.

    Args:
        target: Rendered name of the object that was written to
        attribute: Attribute the caller tried to set or delete

    Returns:
        ImmutableNamespaceError describing the write
    """
    return ImmutableNamespaceError(
        f"cannot set or delete {attribute!r} on {target}: the enum namespace is read-only"
    )
