"""Shared pytest fixtures for enumspace tests."""

import enum

import pytest

from enumspace import EnumPolicy, NamespaceView, StandardEnums, create_namespace


class Material(enum.IntEnum):
    Plastic = 256
    Wood = 512
    Slate = 800


class KeyCode(enum.IntEnum):
    Unknown = 0
    A = 97
    B = 98


@pytest.fixture
def standard_enums() -> StandardEnums:
    """Return a small standard enum layer built from Python enum classes."""
    return StandardEnums.from_enum_classes([Material, KeyCode])


@pytest.fixture
def namespace(standard_enums: StandardEnums) -> NamespaceView:
    """Return a namespace with default policy over the standard enums."""
    return create_namespace(standard_enums)


@pytest.fixture
def permissive_policy() -> EnumPolicy:
    """Return a policy that permits every risky operation."""
    return EnumPolicy(
        enum_overwrite_enabled=True,
        standard_overwrite_enabled=True,
        empty_enum_enabled=True,
        variable_style_naming=False,
        warnings_enabled=True,
    )


@pytest.fixture
def permissive_namespace(
    standard_enums: StandardEnums, permissive_policy: EnumPolicy
) -> NamespaceView:
    """Return a namespace where overwrites, empty enums, and free-form names are allowed."""
    return create_namespace(standard_enums, permissive_policy)
