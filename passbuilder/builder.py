"""
Random password generation with guaranteed category coverage.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from .categories import CharacterCategory
from .dictionary import DictionaryBuilder
from .exceptions import BuilderDisposedError, EmptyDictionaryError, LengthOutOfRangeError
from .utils.random_source import SecureRandom

logger = logging.getLogger(__name__)


class PasswordBuilder:
    """
    Generate random strings containing at least one character of each active category.

    The builder owns a character dictionary and a secure random source. Use it
    as a context manager, or call dispose(), to release both.
    """

    DEFAULT_MIN_LENGTH = 8
    DEFAULT_MAX_LENGTH = 16

    def __init__(self,
                 categories: CharacterCategory = CharacterCategory.ALL,
                 xml_safe: bool = False,
                 min_length: int = DEFAULT_MIN_LENGTH,
                 max_length: int = DEFAULT_MAX_LENGTH,
                 exclude: Iterable[str] = (),
                 include: Iterable[str] = (),
                 rng: Optional[SecureRandom] = None):
        """
        Initialize password builder.

        Args:
            categories: Categories every password must contain
            xml_safe: Exclude the XML-unsafe characters (" ' < > &)
            min_length: Minimum password length
            max_length: Maximum password length
            exclude: Characters that must never appear
            include: Characters to add to their category
            rng: Random source to own; a new SecureRandom by default

        Raises:
            LengthOutOfRangeError: If a length bound is smaller than the
                number of active categories
        """
        self._disposed = False
        self._dictionary = DictionaryBuilder(categories, xml_safe, exclude, include)

        self._check_length("min_length", min_length)
        self._check_length("max_length", max_length)
        if min_length > max_length:
            min_length, max_length = max_length, min_length
        self._min_length = min_length
        self._max_length = max_length

        self._rng = rng if rng is not None else SecureRandom()
        logger.debug(
            f"Password builder created: categories={self.categories}, "
            f"length={min_length}-{max_length}"
        )

    @classmethod
    def fixed(cls, categories: CharacterCategory, length: int, xml_safe: bool = False) -> "PasswordBuilder":
        """Builder producing passwords of exactly the given length."""
        return cls(categories, xml_safe, min_length=length, max_length=length)

    @classmethod
    def default(cls) -> "PasswordBuilder":
        """Builder using every category and 8-16 characters."""
        return cls()

    @classmethod
    def default_xml_safe(cls) -> "PasswordBuilder":
        """Builder using every category, no XML-unsafe characters and 8-16 characters."""
        return cls(xml_safe=True)

    def _check_length(self, parameter: str, value: int) -> None:
        count = len(self._dictionary)
        if value < count:
            raise LengthOutOfRangeError(parameter, value, count, self.categories)

    def _ensure_not_disposed(self) -> None:
        if self._disposed:
            raise BuilderDisposedError(f"{self.__class__.__name__} has been disposed")

    # Observers

    @property
    def items(self) -> Mapping[CharacterCategory, str]:
        return self._dictionary.items

    @property
    def categories(self) -> CharacterCategory:
        return self._dictionary.categories

    @property
    def xml_safe(self) -> bool:
        return self._dictionary.xml_safe

    @property
    def exclude(self) -> frozenset:
        return self._dictionary.exclude

    @property
    def include(self) -> frozenset:
        return self._dictionary.include

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def is_fixed_length(self) -> bool:
        return self._min_length == self._max_length

    @property
    def disposed(self) -> bool:
        return self._disposed

    # Dictionary operations

    def add(self, chars: Iterable[str], clear: bool = False) -> bool:
        """Add characters to their categories. See DictionaryBuilder.add."""
        self._ensure_not_disposed()
        return self._dictionary.add(chars, clear)

    def remove(self, chars: Iterable[str]) -> bool:
        """Exclude characters. See DictionaryBuilder.remove."""
        self._ensure_not_disposed()
        return self._dictionary.remove(chars)

    def rebuild(self,
                categories: CharacterCategory,
                xml_safe: bool = False,
                exclude: Iterable[str] = (),
                include: Iterable[str] = ()) -> bool:
        """Rebuild the dictionary. See DictionaryBuilder.rebuild."""
        self._ensure_not_disposed()
        return self._dictionary.rebuild(categories, xml_safe, exclude, include)

    def remove_category(self, categories: CharacterCategory) -> bool:
        self._ensure_not_disposed()
        return self._dictionary.remove_category(categories)

    def reset_category(self, categories: CharacterCategory, xml_safe: bool = False) -> None:
        self._ensure_not_disposed()
        self._dictionary.reset_category(categories, xml_safe)

    # Generation

    def _current_length(self) -> int:
        if self.is_fixed_length:
            return self._min_length
        return self._rng.next_int(self._min_length, self._max_length)

    def _spread(self, length: int) -> Dict[int, int]:
        """
        Split a password length into per-category character counts.

        Every category gets at least one character and the counts add up
        to the length.

        Args:
            length: Target password length

        Returns:
            Mapping of category index to character count
        """
        spread = {index: 1 for index in range(len(self._dictionary))}
        remaining = length - len(spread)

        if remaining <= 0:
            return spread

        if remaining == 1:
            spread[self._rng.below(len(spread))] += 1
            return spread

        while remaining > 0:
            for index in spread:
                if remaining == 0:
                    break
                # Nested bound gives more variance between categories
                value = self._rng.next_int(1, self._rng.next_int(1, remaining))
                spread[index] += value
                remaining -= value

        return spread

    def next(self) -> str:
        """
        Generate a password.

        Returns:
            Random string with at least one character of each active category

        Raises:
            BuilderDisposedError: If the builder has been disposed
            EmptyDictionaryError: If no characters are left to choose from
            LengthOutOfRangeError: If categories added since construction
                outnumber the minimum length
        """
        self._ensure_not_disposed()

        if not self._dictionary:
            raise EmptyDictionaryError("The character dictionary is empty")

        # add() may have introduced categories since the bounds were checked
        self._check_length("min_length", self._min_length)

        length = self._current_length()

        sources = list(self._dictionary.items.values())
        chars: List[str] = []
        for index, count in self._spread(length).items():
            chars.extend(self._rng.sample(sources[index], count))

        self._rng.shuffle(chars)
        return "".join(chars)

    def generate(self, count: int = 1) -> List[str]:
        """Generate count passwords."""
        return [self.next() for _ in range(count)]

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.next()

    # Disposal

    def dispose(self) -> None:
        """Release the random source and clear the dictionary. Safe to call twice."""
        if self._disposed:
            return

        self._disposed = True
        self._rng.close()
        self._dictionary.clear()
        self._min_length = 0
        self._max_length = 0
        logger.debug("Password builder disposed")

    close = dispose

    def __enter__(self) -> "PasswordBuilder":
        self._ensure_not_disposed()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()


def generate_password(min_length: int = PasswordBuilder.DEFAULT_MIN_LENGTH,
                      max_length: Optional[int] = None,
                      categories: CharacterCategory = CharacterCategory.ALL,
                      xml_safe: bool = False,
                      exclude: Iterable[str] = (),
                      include: Iterable[str] = ()) -> str:
    """
    Convenience function to generate a password.

    Args:
        min_length: Minimum password length
        max_length: Maximum password length; defaults to min_length
        categories: Categories the password must contain
        xml_safe: Exclude the XML-unsafe characters
        exclude: Characters that must never appear
        include: Characters to add to their category

    Returns:
        Generated password string
    """
    if max_length is None:
        max_length = min_length

    with PasswordBuilder(categories, xml_safe, min_length, max_length, exclude, include) as builder:
        return builder.next()
