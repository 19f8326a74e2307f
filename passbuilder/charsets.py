"""
Default character tables for each character category.
"""

import string
from types import MappingProxyType

from .categories import CharacterCategory

DIGITS = string.digits
UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase

# Windows password complexity special characters
SPECIAL = "'-!\"#$%&()*,./:;?@[]^_{|}~+<=>"

# Must be excluded, escaped or encoded before use in raw XML
XML_UNSAFE = "\"'<>&"

XML_SAFE_SPECIAL = "".join(c for c in SPECIAL if c not in XML_UNSAFE)

DEFAULT = MappingProxyType({
    CharacterCategory.DIGITS: DIGITS,
    CharacterCategory.UPPERCASE: UPPERCASE,
    CharacterCategory.LOWERCASE: LOWERCASE,
    CharacterCategory.SPECIAL: SPECIAL,
})

DEFAULT_XML_SAFE = MappingProxyType({
    CharacterCategory.DIGITS: DIGITS,
    CharacterCategory.UPPERCASE: UPPERCASE,
    CharacterCategory.LOWERCASE: LOWERCASE,
    CharacterCategory.SPECIAL: XML_SAFE_SPECIAL,
})


def base_charset(category: CharacterCategory, xml_safe: bool = False) -> str:
    """Return the default characters of a single category."""
    table = DEFAULT_XML_SAFE if xml_safe else DEFAULT
    return table[category]
