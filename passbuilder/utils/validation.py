"""
Input validation utilities for passbuilder.
"""

from typing import Optional

from ..categories import categorize


def validate_chars(chars: str) -> bool:
    """
    Validate a character list given for inclusion or exclusion.

    Args:
        chars: Characters to validate

    Returns:
        True if every character is printable, False otherwise
    """
    if not isinstance(chars, str):
        return False

    return all(c.isprintable() or c == " " for c in chars)


def sanitize_chars(chars: str) -> Optional[str]:
    """
    Deduplicate a character list, keeping first-seen order.

    Args:
        chars: Characters to sanitize

    Returns:
        Sanitized characters or None if invalid
    """
    if not validate_chars(chars):
        return None

    return "".join(dict.fromkeys(chars))


def unclassifiable_chars(chars: str) -> str:
    """Return the characters that belong to no character category."""
    return "".join(c for c in dict.fromkeys(chars) if categorize(c) is None)


def get_validation_error_message(chars: str) -> str:
    """
    Get a descriptive error message for an invalid character list.

    Args:
        chars: The invalid character list

    Returns:
        Error message describing why the characters are invalid
    """
    if not isinstance(chars, str):
        return "Characters must be a string"

    invalid = [c for c in dict.fromkeys(chars) if not (c.isprintable() or c == " ")]
    if invalid:
        return f"Characters contain non-printable values: {', '.join(repr(c) for c in invalid)}"

    return "Character list is invalid"
