"""
Per-category character dictionary assembled from categories and include/exclude rules.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

from .categories import CharacterCategory, categorize, combine, split
from .charsets import XML_UNSAFE, base_charset

logger = logging.getLogger(__name__)


def _ordered_union(first: Iterable[str], second: Iterable[str]) -> str:
    """Join two character sequences keeping first-seen order without duplicates."""
    return "".join(dict.fromkeys([*first, *second]))


class DictionaryBuilder:
    """
    Maps each active character category to the characters usable for it.

    The set of active categories is always the key set of the dictionary;
    a category whose characters are all removed disappears from it.
    """

    def __init__(self,
                 categories: CharacterCategory = CharacterCategory.ALL,
                 xml_safe: bool = False,
                 exclude: Iterable[str] = (),
                 include: Iterable[str] = ()):
        """
        Initialize the dictionary.

        Args:
            categories: Categories the generated strings must contain
            xml_safe: Exclude the XML-unsafe characters (" ' < > &)
            exclude: Characters that must never be used
            include: Characters to add to their category, even if not requested
        """
        self._items: Dict[CharacterCategory, str] = {}
        self._exclude = set()
        self._include = set()
        self._xml_safe = False

        self.rebuild(categories, xml_safe, exclude, include)

    @classmethod
    def default(cls) -> "DictionaryBuilder":
        """Dictionary with every category and the full special set."""
        return cls(CharacterCategory.ALL)

    @classmethod
    def default_xml_safe(cls) -> "DictionaryBuilder":
        """Dictionary with every category and no XML-unsafe characters."""
        return cls(CharacterCategory.ALL, xml_safe=True)

    # Observers

    @property
    def items(self) -> Mapping[CharacterCategory, str]:
        return MappingProxyType(self._items)

    @property
    def categories(self) -> CharacterCategory:
        """Active categories, derived from the dictionary keys."""
        return combine(self._items)

    @property
    def xml_safe(self) -> bool:
        return self._xml_safe

    @property
    def exclude(self) -> frozenset:
        return frozenset(self._exclude)

    @property
    def include(self) -> frozenset:
        return frozenset(self._include)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, category: CharacterCategory) -> bool:
        return category in self._items

    def __getitem__(self, category: CharacterCategory) -> str:
        return self._items[category]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"

    # Helpers

    def _without_excluded(self, chars: Iterable[str]) -> List[str]:
        return [c for c in dict.fromkeys(chars) if c not in self._exclude]

    @staticmethod
    def _partition(chars: Iterable[str]) -> Dict[CharacterCategory, List[str]]:
        """Group characters by category, dropping unclassifiable ones."""
        groups: Dict[CharacterCategory, List[str]] = {}
        for char in chars:
            category = categorize(char)
            if category is None:
                logger.debug(f"Ignoring unclassifiable character {char!r}")
                continue
            groups.setdefault(category, []).append(char)
        return groups

    def _add_value(self, category: CharacterCategory, chars: Iterable[str], clear: bool = False) -> None:
        selected = self._without_excluded(chars)
        if not selected:
            return

        if category in self._items and not clear:
            self._items[category] = _ordered_union(selected, self._items[category])
        else:
            self._items[category] = "".join(selected)

    def _remove_value(self, category: CharacterCategory, chars: Iterable[str]) -> None:
        removed = set(chars)
        remaining = "".join(c for c in self._items[category] if c not in removed)
        if remaining:
            self._items[category] = remaining
        else:
            del self._items[category]
            logger.debug(f"Category {category.name} emptied and dropped")

    # Operations

    def rebuild(self,
                categories: CharacterCategory,
                xml_safe: bool = False,
                exclude: Iterable[str] = (),
                include: Iterable[str] = ()) -> bool:
        """
        Rebuild the dictionary from scratch.

        Included characters are added first, so they can introduce categories
        that were not requested. Excluded characters win over included ones.

        Args:
            categories: Categories to populate from the default character sets
            xml_safe: Exclude the XML-unsafe characters
            exclude: Characters that must never be used
            include: Characters to add to their natural category

        Returns:
            True if the resulting dictionary is not empty
        """
        self._exclude = set(exclude)
        if xml_safe:
            self._exclude.update(XML_UNSAFE)
        self._xml_safe = self._exclude.issuperset(XML_UNSAFE)

        self._include = {c for c in include if c not in self._exclude}

        self._items.clear()

        if self._include:
            self.add(sorted(self._include))

        for category in split(categories):
            self._add_value(category, base_charset(category, self._xml_safe))

        logger.debug(
            f"Dictionary rebuilt: categories={self.categories}, "
            f"xml_safe={self._xml_safe}, excluded={len(self._exclude)}, "
            f"included={len(self._include)}"
        )
        return bool(self._items)

    def add(self, chars: Iterable[str], clear: bool = False) -> bool:
        """
        Add characters to their categories.

        Args:
            chars: Characters to add; excluded ones are skipped
            clear: Replace the existing characters of each affected category

        Returns:
            True if the dictionary is not empty
        """
        for category, group in self._partition(self._without_excluded(chars)).items():
            self._add_value(category, group, clear)
        return bool(self._items)

    def remove(self, chars: Iterable[str]) -> bool:
        """
        Exclude characters and strip them from every category.

        Args:
            chars: Characters to remove

        Returns:
            True if the dictionary is not empty
        """
        chars = set(chars)
        self._exclude |= chars
        self._include -= chars

        for category in list(self._items):
            self._remove_value(category, chars)
        return bool(self._items)

    def remove_category(self, categories: CharacterCategory) -> bool:
        """
        Drop categories together with their included characters.

        Args:
            categories: Categories to drop

        Returns:
            True if the dictionary is not empty
        """
        for category in split(categories):
            value = self._items.pop(category, None)
            if value:
                self._include.difference_update(value)
        return bool(self._items)

    def reset_category(self, categories: CharacterCategory, xml_safe: bool = False) -> None:
        """
        Restore the default characters of categories.

        Characters of the restored default sets are no longer excluded.

        Args:
            categories: Categories to restore
            xml_safe: Use the XML-safe default sets
        """
        self._xml_safe = xml_safe
        for category in split(categories):
            value = base_charset(category, xml_safe)
            self._exclude.difference_update(value)
            self._items[category] = value

    def clear(self) -> None:
        """Empty the dictionary and the include/exclude sets."""
        self._items.clear()
        self._exclude.clear()
        self._include.clear()
