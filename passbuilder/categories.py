"""
Character categories used to classify characters and key the dictionary.
"""

import enum
import string
import unicodedata
from typing import Iterable, List, Optional, Union

# Unicode general categories treated as special characters
SPECIAL_UNICODE_CATEGORIES = frozenset({
    "Pc",  # connector punctuation
    "Pd",  # dash punctuation
    "Ps",  # open punctuation
    "Pe",  # close punctuation
    "Po",  # other punctuation
    "Sc",  # currency symbol
    "Sm",  # math symbol
    "Sk",  # modifier symbol
    "Zs",  # space separator
})

CATEGORY_NAMES = {
    "digits": "DIGITS",
    "digit": "DIGITS",
    "upper": "UPPERCASE",
    "uppercase": "UPPERCASE",
    "lower": "LOWERCASE",
    "lowercase": "LOWERCASE",
    "special": "SPECIAL",
    "symbols": "SPECIAL",
    "all": "ALL",
}


class CharacterCategory(enum.Flag):
    """Character categories a generated password must contain."""

    DIGITS = 1
    UPPERCASE = 2
    LOWERCASE = 4
    SPECIAL = 8
    ALL = DIGITS | UPPERCASE | LOWERCASE | SPECIAL


SINGLE_CATEGORIES = (
    CharacterCategory.DIGITS,
    CharacterCategory.UPPERCASE,
    CharacterCategory.LOWERCASE,
    CharacterCategory.SPECIAL,
)

NO_CATEGORY = CharacterCategory(0)


def split(category: CharacterCategory) -> List[CharacterCategory]:
    """
    Decompose a combined category into its single-bit members.

    Args:
        category: Any combination of categories

    Returns:
        Single categories in ascending bit order
    """
    return [member for member in SINGLE_CATEGORIES if member & category]


def combine(categories: Iterable[CharacterCategory]) -> CharacterCategory:
    """Union an iterable of categories into one flag value."""
    result = NO_CATEGORY
    for category in categories:
        result |= category
    return result


def categorize(char: str) -> Optional[CharacterCategory]:
    """
    Classify a single character.

    Args:
        char: Character to classify

    Returns:
        The character's category, or None if it belongs to none
    """
    if len(char) != 1:
        return None
    if char in string.digits:
        return CharacterCategory.DIGITS
    if char in string.ascii_uppercase or char.isupper():
        return CharacterCategory.UPPERCASE
    if char in string.ascii_lowercase or char.islower():
        return CharacterCategory.LOWERCASE
    if unicodedata.category(char) in SPECIAL_UNICODE_CATEGORIES:
        return CharacterCategory.SPECIAL
    return None


def parse_categories(names: Union[str, Iterable[str]]) -> CharacterCategory:
    """
    Convert category names into a combined category.

    Args:
        names: Comma-separated string or iterable of names, e.g. "digits,upper"

    Returns:
        Combined CharacterCategory

    Raises:
        ValueError: If a name is not recognized
    """
    if isinstance(names, str):
        names = names.split(",")

    result = NO_CATEGORY
    for name in names:
        key = name.strip().lower()
        if not key:
            continue
        if key not in CATEGORY_NAMES:
            raise ValueError(f"Unknown character category: {name.strip()}")
        result |= CharacterCategory[CATEGORY_NAMES[key]]
    return result
