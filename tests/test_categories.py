"""
Unit tests for character categories.
"""

import pytest

from passbuilder.categories import (
    CharacterCategory,
    categorize,
    combine,
    parse_categories,
    split,
)


class TestSplit:
    """Test decomposition of combined categories."""

    def test_split_all(self):
        """Test that ALL splits into every category in bit order."""
        assert split(CharacterCategory.ALL) == [
            CharacterCategory.DIGITS,
            CharacterCategory.UPPERCASE,
            CharacterCategory.LOWERCASE,
            CharacterCategory.SPECIAL,
        ]

    def test_split_partial(self):
        """Test order is stable regardless of how the flag was combined."""
        combined = CharacterCategory.SPECIAL | CharacterCategory.DIGITS
        assert split(combined) == [CharacterCategory.DIGITS, CharacterCategory.SPECIAL]

    def test_split_single(self):
        assert split(CharacterCategory.LOWERCASE) == [CharacterCategory.LOWERCASE]

    def test_split_empty(self):
        assert split(CharacterCategory(0)) == []

    def test_combine_inverts_split(self):
        combined = CharacterCategory.UPPERCASE | CharacterCategory.LOWERCASE
        assert combine(split(combined)) == combined


class TestCategorize:
    """Test character classification."""

    @pytest.mark.parametrize("char,expected", [
        ("0", CharacterCategory.DIGITS),
        ("9", CharacterCategory.DIGITS),
        ("A", CharacterCategory.UPPERCASE),
        ("z", CharacterCategory.LOWERCASE),
        ("Ä", CharacterCategory.UPPERCASE),
        ("ж", CharacterCategory.LOWERCASE),
        ("@", CharacterCategory.SPECIAL),
        ("~", CharacterCategory.SPECIAL),
        ("<", CharacterCategory.SPECIAL),
        ("€", CharacterCategory.SPECIAL),
        (" ", CharacterCategory.SPECIAL),
    ])
    def test_classified(self, char, expected):
        assert categorize(char) == expected

    def test_every_default_special_is_special(self):
        """Test that the default special set is classified as special."""
        from passbuilder.charsets import SPECIAL

        for char in SPECIAL:
            assert categorize(char) == CharacterCategory.SPECIAL, char

    @pytest.mark.parametrize("char", ["\n", "\t", "\x00", "٣"])
    def test_unclassifiable(self, char):
        assert categorize(char) is None

    @pytest.mark.parametrize("value", ["", "12", "ab"])
    def test_not_a_single_character(self, value):
        assert categorize(value) is None


class TestParseCategories:
    """Test category name parsing."""

    def test_comma_separated(self):
        result = parse_categories("digits, Upper")
        assert result == CharacterCategory.DIGITS | CharacterCategory.UPPERCASE

    def test_iterable(self):
        assert parse_categories(["lower", "special"]) == (
            CharacterCategory.LOWERCASE | CharacterCategory.SPECIAL
        )

    def test_all(self):
        assert parse_categories("all") == CharacterCategory.ALL

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown character category"):
            parse_categories("digits,emoji")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
