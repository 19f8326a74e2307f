"""
passbuilder - random passwords covering every selected character category.
"""

from .builder import PasswordBuilder, generate_password
from .categories import CharacterCategory, categorize, parse_categories, split
from .dictionary import DictionaryBuilder
from .exceptions import (
    BuilderDisposedError,
    EmptyDictionaryError,
    LengthOutOfRangeError,
    PassBuilderException,
)

__version__ = "0.1.0"

__all__ = [
    'PasswordBuilder',
    'generate_password',
    'CharacterCategory',
    'categorize',
    'parse_categories',
    'split',
    'DictionaryBuilder',
    'BuilderDisposedError',
    'EmptyDictionaryError',
    'LengthOutOfRangeError',
    'PassBuilderException',
]
