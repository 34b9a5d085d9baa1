"""Tests for EnumType and EnumItem construction, lookup, and immutability."""

import copy

import pytest

from enumspace.core.enum_type import EnumType
from enumspace.core.errors import (
    DuplicateNameError,
    DuplicateValueError,
    EmptyEnumError,
    ImmutableNamespaceError,
    InvalidNameError,
    UnknownEnumItemError,
)
from enumspace.core.ir import EnumItemSpec
from enumspace.core.items import EnumItem
from enumspace.core.policy import EnumPolicy


def _specs(*pairs: tuple[int, str]) -> list[EnumItemSpec]:
    return [EnumItemSpec(value=value, name=name) for value, name in pairs]


def _food() -> EnumType:
    return EnumType("Food", _specs((1, "Apple"), (2, "Banana"), (3, "Cherry")))


class TestConstruction:
    def test_items_by_name_and_value(self):
        food = _food()
        apple = food.get_by_name("Apple")
        assert apple is not None
        assert apple.name == "Apple"
        assert apple.value == 1
        assert apple.type_name == "Food"
        assert apple.enum_type is food
        assert food.get_by_value(1) is apple

    def test_sorted_by_value(self):
        numbers = EnumType("Numbers", _specs((1000, "Thousand"), (1, "One"), (100, "Hundred")))
        assert [item.name for item in numbers.get_enum_items()] == ["One", "Hundred", "Thousand"]
        assert list(numbers.items_by_name) == ["Thousand", "One", "Hundred"]

    def test_negative_values_sort_first(self):
        signed = EnumType("Signed", _specs((0, "Zero"), (-3, "MinusThree")))
        assert [item.value for item in signed] == [-3, 0]

    def test_from_spec(self):
        from enumspace.core.ir import EnumTypeSpec

        spec = EnumTypeSpec(name="Food", items=tuple(_specs((1, "Apple"))))
        assert EnumType.from_spec(spec).Apple.value == 1

    def test_get_enum_items_cannot_be_mutated(self):
        food = _food()
        items = food.get_enum_items()
        with pytest.raises((TypeError, AttributeError)):
            items.append(None)  # type: ignore[attr-defined]
        assert len(food.get_enum_items()) == 3


class TestValidation:
    def test_invalid_type_name(self):
        with pytest.raises(InvalidNameError):
            EnumType("Hot Food", _specs((1, "Apple")))

    def test_empty_type_name_rejected_even_without_naming_policy(self):
        with pytest.raises(InvalidNameError):
            EnumType("", _specs((1, "Apple")), EnumPolicy(variable_style_naming=False))

    def test_invalid_item_name(self):
        with pytest.raises(InvalidNameError) as exc_info:
            EnumType("Food", _specs((1, "Green Apple")))
        assert exc_info.value.context.item_name == "Green Apple"

    def test_free_form_item_names_when_naming_disabled(self):
        food = EnumType("Food", _specs((1, "Green Apple")), EnumPolicy(variable_style_naming=False))
        assert food["Green Apple"].value == 1

    def test_empty_item_name_always_rejected(self):
        with pytest.raises(InvalidNameError):
            EnumType("Food", _specs((1, "")), EnumPolicy(variable_style_naming=False))

    def test_duplicate_name(self):
        with pytest.raises(DuplicateNameError):
            EnumType("Food", _specs((1, "Apple"), (2, "Apple")))

    def test_duplicate_value(self):
        with pytest.raises(DuplicateValueError) as exc_info:
            EnumType("Food", _specs((1, "Apple"), (1, "Banana")))
        assert exc_info.value.context.value == 1
        assert "'Apple'" in str(exc_info.value)

    def test_names_are_case_sensitive(self):
        food = EnumType("Food", _specs((1, "apple"), (2, "Apple")))
        assert food.apple is not food.Apple

    def test_invalid_name_checked_before_duplicates(self):
        with pytest.raises(InvalidNameError):
            EnumType("Food", _specs((1, "Apple"), (1, "Apple"), (2, "9")))

    def test_duplicate_name_checked_before_duplicate_value(self):
        with pytest.raises(DuplicateNameError):
            EnumType("Food", _specs((1, "Apple"), (1, "Apple")))

    def test_empty_rejected_by_default(self):
        with pytest.raises(EmptyEnumError):
            EnumType("Empty", [])

    def test_empty_allowed_by_policy(self):
        empty = EnumType("Empty", [], EnumPolicy(empty_enum_enabled=True))
        assert empty.get_enum_items() == ()
        assert len(empty) == 0
        assert bool(empty) is True


class TestLookup:
    def test_attribute_access(self):
        food = _food()
        assert food.Banana is food.get_by_name("Banana")

    def test_unknown_item_attribute(self):
        with pytest.raises(UnknownEnumItemError):
            _food().Durian

    def test_unknown_item_is_attribute_error(self):
        assert hasattr(_food(), "Durian") is False

    def test_subscript(self):
        food = _food()
        assert food["Cherry"] is food.Cherry
        with pytest.raises(UnknownEnumItemError):
            food["Durian"]

    def test_missing_lookups_return_none(self):
        food = _food()
        assert food.get_by_name("Durian") is None
        assert food.get_by_value(99) is None
        assert food.get_by_value("1") is None
        assert food.get_by_value(True) is None

    def test_shadowed_item_reachable_by_subscript(self):
        odd = EnumType("Odd", _specs((1, "name"), (2, "Name")))
        assert odd.name == "Odd"
        assert odd["name"].value == 1

    def test_host_spellings(self):
        food = _food()
        assert food.GetEnumItems() == food.get_enum_items()
        assert food.FromValue(2) is food.Banana
        assert food.FromName("Banana") is food.Banana

    def test_contains_and_iteration(self):
        food = _food()
        other = _food()
        assert "Apple" in food
        assert food.Apple in food
        assert other.Apple not in food
        assert 1 not in food
        assert [item.name for item in food] == ["Apple", "Banana", "Cherry"]

    def test_dir_lists_items(self):
        assert {"Apple", "Banana", "Cherry"} <= set(dir(_food()))


class TestIdentity:
    def test_same_instance_every_lookup(self):
        food = _food()
        assert food.get_by_value(2) is food.get_by_value(2)
        assert food.get_by_value(2) is food.Banana

    def test_equal_fields_different_types_not_equal(self):
        first = _food()
        second = _food()
        assert first.Apple != second.Apple
        assert first.Apple == first.Apple

    def test_detached_item_not_equal(self):
        food = _food()
        assert EnumItem("Food", "Apple", 1) != food.Apple

    def test_hashable_by_identity(self):
        food = _food()
        seen = {food.Apple: "a", food.Banana: "b"}
        assert seen[food.get_by_value(1)] == "a"

    def test_copy_returns_same_object(self):
        food = _food()
        assert copy.copy(food.Apple) is food.Apple
        assert copy.deepcopy(food.Apple) is food.Apple
        assert copy.deepcopy(food) is food


class TestImmutability:
    def test_item_fields_read_only(self):
        apple = _food().Apple
        with pytest.raises(ImmutableNamespaceError):
            apple.value = 5
        with pytest.raises(ImmutableNamespaceError):
            apple.Value = 5
        with pytest.raises(ImmutableNamespaceError):
            apple.name = "Pear"
        with pytest.raises(ImmutableNamespaceError):
            del apple.value
        assert apple.value == 1

    def test_type_read_only(self):
        food = _food()
        with pytest.raises(ImmutableNamespaceError):
            food.Apple = 5
        with pytest.raises(ImmutableNamespaceError):
            food.Durian = 4
        with pytest.raises(ImmutableNamespaceError):
            del food.Apple
        with pytest.raises(TypeError):
            food["Apple"] = 5  # type: ignore[index]

    def test_item_mapping_read_only(self):
        food = _food()
        with pytest.raises(TypeError):
            food.items_by_name["Durian"] = food.Apple  # type: ignore[index]


class TestRendering:
    def test_item_str(self):
        assert str(_food().Apple) == "Enum.Food.Apple"

    def test_type_str(self):
        assert str(_food()) == "Enum.Food"

    def test_item_host_spellings(self):
        food = _food()
        apple = food.Apple
        assert apple.Name == "Apple"
        assert apple.Value == 1
        assert apple.EnumType is food
        assert apple.IsA("Food")
        assert apple.is_a(food)
        assert not apple.is_a("Numbers")

    def test_repr(self):
        assert repr(_food().Banana) == "<EnumItem Enum.Food.Banana: 2>"
        assert repr(_food()) == "<EnumType Enum.Food (3 items)>"
