"""Allergen tags and related reference data."""

from collections.abc import Iterable
from enum import StrEnum


class AllergenTag(StrEnum):
    """Closed set of allergens tracked for recipes."""

    DAIRY = "dairy"
    EGGS = "eggs"
    NUTS = "nuts"
    PEANUTS = "peanuts"
    SHELLFISH = "shellfish"
    FISH = "fish"
    SOY = "soy"
    WHEAT = "wheat"
    GLUTEN = "gluten"

    @property
    def display_name(self) -> str:
        """Human readable allergen name."""
        return _DISPLAY_NAMES[self]

    @property
    def free_label(self) -> str:
        """Label used when a recipe does not contain the allergen."""
        return f"{self.value}-free"


_DISPLAY_NAMES: dict[AllergenTag, str] = {
    AllergenTag.DAIRY: "Dairy",
    AllergenTag.EGGS: "Eggs",
    AllergenTag.NUTS: "Tree Nuts",
    AllergenTag.PEANUTS: "Peanuts",
    AllergenTag.SHELLFISH: "Shellfish",
    AllergenTag.FISH: "Fish",
    AllergenTag.SOY: "Soy",
    AllergenTag.WHEAT: "Wheat",
    AllergenTag.GLUTEN: "Gluten",
}

_ALIASES: dict[str, AllergenTag] = {
    "milk": AllergenTag.DAIRY,
    "lactose": AllergenTag.DAIRY,
    "egg": AllergenTag.EGGS,
    "nut": AllergenTag.NUTS,
    "tree nut": AllergenTag.NUTS,
    "tree nuts": AllergenTag.NUTS,
    "tree-nut": AllergenTag.NUTS,
    "tree-nuts": AllergenTag.NUTS,
    "peanut": AllergenTag.PEANUTS,
    "soya": AllergenTag.SOY,
}

DIETARY_OPTIONS: tuple[dict[str, str], ...] = (
    {"id": "vegetarian", "name": "Vegetarian"},
    {"id": "vegan", "name": "Vegan"},
    {"id": "pescatarian", "name": "Pescatarian"},
    {"id": "keto", "name": "Keto"},
    {"id": "low-carb", "name": "Low Carb"},
    {"id": "paleo", "name": "Paleo"},
)


def parse_allergen_tag(text: str | None) -> AllergenTag | None:
    """Map free text such as "Contains eggs" onto an allergen tag."""
    if not text:
        return None
    cleaned = text.strip().lower()
    if cleaned.startswith("contains "):
        cleaned = cleaned.removeprefix("contains ").strip()
    try:
        return AllergenTag(cleaned)
    except ValueError:
        pass
    for tag, name in _DISPLAY_NAMES.items():
        if cleaned == name.lower():
            return tag
    return _ALIASES.get(cleaned)


def parse_allergen_tags(values: Iterable[str | None]) -> tuple[AllergenTag, ...]:
    """Parse free text values into unique tags, keeping first-seen order."""
    tags: list[AllergenTag] = []
    for value in values:
        tag = parse_allergen_tag(value)
        if tag is not None and tag not in tags:
            tags.append(tag)
    return tuple(tags)


def allergy_options() -> list[dict[str, str]]:
    """Return allergens as id/name pairs for selection forms."""
    return [{"id": tag.value, "name": tag.display_name} for tag in AllergenTag]
