"""Recipe retrieval services."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from pantry_chef.domain.recipes import Recipe

TEMPORARY_ID_PREFIXES = ("generated-", "fallback-")

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def save_recipe(self, recipe: Recipe) -> str:
        """Persist a recipe and return its stored id."""

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_recent(self, limit: int) -> list[Recipe]:
        """Return the most recently created recipes."""


def is_temporary_id(recipe_id: str) -> bool:
    """Return True for ids of recipes that were never persisted."""
    return recipe_id.startswith(TEMPORARY_ID_PREFIXES)


@dataclass
class RecipeService:
    """Application service for reading stored recipes."""

    repository: RecipeRepository

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a stored recipe; temporary ids are never looked up."""
        if is_temporary_id(recipe_id):
            return None
        return self.repository.get_recipe(recipe_id)

    def get_recipes_by_ids(self, recipe_ids: Sequence[str]) -> list[Recipe]:
        """Return stored recipes for the given ids, skipping failures."""
        recipes: list[Recipe] = []
        for recipe_id in recipe_ids:
            if is_temporary_id(recipe_id):
                continue
            try:
                recipe = self.repository.get_recipe(recipe_id)
            except Exception:
                _logger.exception("Failed to fetch recipe %s", recipe_id)
                continue
            if recipe is not None:
                recipes.append(recipe)
        return recipes

    def list_recent(self, limit: int = 10) -> list[Recipe]:
        """Return recently generated recipes, newest first."""
        return self.repository.list_recent(limit)
