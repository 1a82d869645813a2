"""Allergen detection against the ingredient catalog."""

from collections.abc import Collection, Sequence
from dataclasses import dataclass

from pantry_chef.domain.allergens import AllergenTag
from pantry_chef.domain.catalog import IngredientCatalog
from pantry_chef.domain.recipes import RecipeIngredient


@dataclass(frozen=True)
class AllergenReport:
    """Allergens detected in a list of recipe ingredients."""

    allergens_present: tuple[AllergenTag, ...]
    allergens_found: tuple[AllergenTag, ...]
    safe_for: tuple[str, ...]

    @property
    def is_safe(self) -> bool:
        """True when none of the user's allergens were found."""
        return not self.allergens_present


@dataclass(frozen=True)
class AllergenMatcher:
    """Resolves recipe ingredients against the catalog to find allergens.

    Ingredients with no catalog match contribute no allergens.
    """

    catalog: IngredientCatalog

    def detect(
        self,
        ingredients: Sequence[RecipeIngredient],
        user_allergies: Collection[AllergenTag] = (),
    ) -> AllergenReport:
        """Return allergens present for the user, all found, and safe-for labels."""
        found: list[AllergenTag] = []
        for ingredient in ingredients:
            entry = self.catalog.resolve(ingredient.name)
            if entry is None:
                continue
            # frozenset iteration order is arbitrary; enum order keeps output stable
            for tag in AllergenTag:
                if tag in entry.allergy_tags and tag not in found:
                    found.append(tag)

        present = tuple(tag for tag in found if tag in user_allergies)
        safe_for = tuple(tag.free_label for tag in AllergenTag if tag not in found)
        return AllergenReport(
            allergens_present=present,
            allergens_found=tuple(found),
            safe_for=safe_for,
        )
