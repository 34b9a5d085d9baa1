"""Tests for enum name rules."""

import pytest

from enumspace.core.names import is_non_empty_name, is_valid_name


class TestIsValidName:
    @pytest.mark.parametrize("name", ["Apple", "apple", "_", "_private", "A1", "Key_Code_2"])
    def test_identifier_names_accepted(self, name):
        assert is_valid_name(name) is True

    @pytest.mark.parametrize("name", ["", "1st", "Hot Dog", "a-b", "Food.Apple", "é", " A"])
    def test_non_identifier_names_rejected(self, name):
        assert is_valid_name(name) is False

    def test_non_string_rejected(self):
        """The validator reports False instead of raising on wrong types."""
        assert is_valid_name(None) is False
        assert is_valid_name(5) is False


class TestIsNonEmptyName:
    def test_empty_string(self):
        assert is_non_empty_name("") is False

    def test_any_characters_allowed(self):
        assert is_non_empty_name("Hot Dog") is True
        assert is_non_empty_name("1") is True

    def test_non_string(self):
        assert is_non_empty_name(b"A") is False
