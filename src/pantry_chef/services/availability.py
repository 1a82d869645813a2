"""Ingredient availability matching against what the user has on hand."""

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from pantry_chef.domain.recipes import MatchResult, RecipeIngredient
from pantry_chef.domain.text_matching import (
    display_name,
    first_token,
    names_overlap,
    normalize,
)


@dataclass(frozen=True)
class AvailabilityResult:
    """Ingredients annotated with availability plus the overall match."""

    ingredients: tuple[RecipeIngredient, ...]
    match: MatchResult


def is_available(ingredient_name: str | None, user_ingredients: Sequence[str]) -> bool:
    """Return True if any user ingredient fuzzily matches the ingredient name.

    A user entry matches when it overlaps with the first token of the
    ingredient phrase or with the whole phrase, so "garlic" matches
    "2 cloves garlic, minced".
    """
    if not normalize(ingredient_name):
        return False
    token = first_token(ingredient_name)
    return any(
        names_overlap(user_ingredient, token)
        or names_overlap(user_ingredient, ingredient_name)
        for user_ingredient in user_ingredients
    )


def match_percentage(available_count: int, total_count: int) -> int:
    """Share of essential ingredients on hand, rounded half up."""
    if total_count <= 0:
        return 100
    return math.floor(100 * available_count / total_count + 0.5)


def compute_match(ingredients: Sequence[RecipeIngredient]) -> MatchResult:
    """Compute missing essentials and match percentage from annotated lines."""
    essentials = [ingredient for ingredient in ingredients if ingredient.essential]
    missing = tuple(
        display_name(ingredient.name)
        for ingredient in essentials
        if not ingredient.available
    )
    return MatchResult(
        missing_ingredient_names=missing,
        match_percentage=match_percentage(
            len(essentials) - len(missing), len(essentials)
        ),
    )


class AvailabilityMatcher:
    """Marks recipe ingredients available based on the user's pantry."""

    def compute(
        self,
        ingredients: Sequence[RecipeIngredient],
        user_ingredients: Sequence[str],
    ) -> AvailabilityResult:
        """Return annotated copies of the ingredients and the match result."""
        annotated = tuple(
            replace(
                ingredient,
                available=is_available(ingredient.name, user_ingredients),
            )
            for ingredient in ingredients
        )
        return AvailabilityResult(ingredients=annotated, match=compute_match(annotated))
