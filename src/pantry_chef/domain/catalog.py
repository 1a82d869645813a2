"""Ingredient catalog models."""

from collections.abc import Iterable
from dataclasses import dataclass

from pantry_chef.domain.allergens import AllergenTag
from pantry_chef.domain.text_matching import names_overlap


@dataclass(frozen=True)
class IngredientCategory:
    """Grouping used by the ingredient picker."""

    id: str
    name: str


@dataclass(frozen=True)
class IngredientCatalogEntry:
    """Reference ingredient with its allergen tags."""

    id: str
    name: str
    category: str
    allergy_tags: frozenset[AllergenTag] = frozenset()


class IngredientCatalog:
    """Read-only, ordered ingredient reference table.

    Entry order matters: when several entries match an ingredient name, the
    earliest one wins.
    """

    __slots__ = ("_categories", "_entries")

    def __init__(
        self,
        entries: Iterable[IngredientCatalogEntry],
        categories: Iterable[IngredientCategory] = (),
    ) -> None:
        self._entries = tuple(entries)
        self._categories = tuple(categories)

    @property
    def entries(self) -> tuple[IngredientCatalogEntry, ...]:
        """All catalog entries in catalog order."""
        return self._entries

    @property
    def categories(self) -> tuple[IngredientCategory, ...]:
        """Known ingredient categories."""
        return self._categories

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, name: str | None) -> IngredientCatalogEntry | None:
        """Return the first entry whose name overlaps with ``name``."""
        for entry in self._entries:
            if names_overlap(entry.name, name):
                return entry
        return None

    def by_category(self, category_id: str) -> list[IngredientCatalogEntry]:
        """Return entries in a category; "all" returns every entry."""
        if category_id == "all":
            return list(self._entries)
        return [entry for entry in self._entries if entry.category == category_id]
