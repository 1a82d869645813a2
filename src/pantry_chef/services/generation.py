"""Recipe generation from the user's ingredients using LLMs."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from pydantic import ValidationError

from pantry_chef.domain.allergens import parse_allergen_tags
from pantry_chef.domain.generation import RecipeDraft
from pantry_chef.domain.preferences import UserPreferences
from pantry_chef.domain.recipes import (
    AllergyInfo,
    Recipe,
    RecipeIngredient,
    RecipeInstruction,
)
from pantry_chef.services.availability import AvailabilityMatcher
from pantry_chef.services.recipes import RecipeRepository
from pantry_chef.services.safety import RecipeSafetyValidator, SafetyConcernAnalyzer

_logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional chef specialized in creating safe, delicious recipes "
    "from available ingredients. Safety is your top priority. Your recipes are "
    "practical and achievable, not unnecessarily complex."
)

_SKILL_DESCRIPTIONS = {
    1: "simple recipes suitable for beginners with few ingredients and basic "
    "techniques",
    2: "moderately complex recipes for intermediate cooks that might include some "
    "more advanced techniques",
    3: "recipes that can be made by someone with advanced cooking skills, but "
    "don't need to be overly complex",
}

_NULLABLE_STRING: dict[str, object] = {"anyOf": [{"type": "string"}, {"type": "null"}]}

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "prep_time": {"type": "integer", "minimum": 0},
                    "cook_time": {"type": "integer", "minimum": 0},
                    "servings": {"type": "integer", "minimum": 1},
                    "skill_level": {
                        "type": "string",
                        "enum": ["beginner", "intermediate", "advanced"],
                    },
                    "ingredients": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "id": {"type": "string"},
                                "name": {"type": "string"},
                                "amount": {"type": "string"},
                                "unit": _NULLABLE_STRING,
                                "essential": {"type": "boolean"},
                            },
                            "required": ["id", "name", "amount", "unit", "essential"],
                            "additionalProperties": False,
                        },
                    },
                    "instructions": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "id": {"type": "integer"},
                                "text": {"type": "string"},
                                "safety_note": _NULLABLE_STRING,
                            },
                            "required": ["id", "text", "safety_note"],
                            "additionalProperties": False,
                        },
                    },
                    "allergy_info": {
                        "type": "object",
                        "properties": {
                            "safe": {"type": "array", "items": {"type": "string"}},
                            "warnings": {"type": "array", "items": {"type": "string"}},
                        },
                        "required": ["safe", "warnings"],
                        "additionalProperties": False,
                    },
                    "safety_notes": {"type": "array", "items": {"type": "string"}},
                },
                "required": [
                    "title",
                    "description",
                    "prep_time",
                    "cook_time",
                    "servings",
                    "skill_level",
                    "ingredients",
                    "instructions",
                    "allergy_info",
                    "safety_notes",
                ],
                "additionalProperties": False,
            },
        }
    },
    "required": ["recipes"],
    "additionalProperties": False,
}

_FALLBACK_TEMPLATES = (
    (
        "Simple Sauté with Your Ingredients",
        "A quick sauté combining your ingredients for a simple meal.",
    ),
    (
        "Quick Stir Fry with Available Ingredients",
        "A fast stir fry using your available ingredients.",
    ),
)

_FALLBACK_STEPS = (
    "Prepare all ingredients by washing and cutting as needed.",
    "Heat a pan over medium heat with a little oil.",
    "Add all ingredients and cook until done, stirring occasionally.",
    "Season with salt and pepper to taste.",
    "Serve immediately.",
)

_FALLBACK_NOTES = (
    "Always cook ingredients thoroughly",
    "Follow proper food safety guidelines",
)


class NoIngredientsError(ValueError):
    """Raised when a generation request has no usable ingredients."""


class RecipeClient(Protocol):
    """Interface for LLM recipe generation."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        prompt: str,
        schema: dict[str, object],
    ) -> object:
        """Return the decoded JSON payload produced by the model."""


@dataclass
class RecipeGenerationService:
    """Generates, annotates and stores recipes for a set of ingredients."""

    client: RecipeClient
    repository: RecipeRepository
    availability_matcher: AvailabilityMatcher
    safety_validator: RecipeSafetyValidator
    concern_analyzer: SafetyConcernAnalyzer
    model: str
    reasoning_effort: str | None
    store: bool
    recipe_count: int = 2

    async def generate(
        self, user_ingredients: Sequence[str], preferences: UserPreferences
    ) -> list[Recipe]:
        """Return exactly ``recipe_count`` recipes, padding with fallbacks."""
        ingredients = [item.strip() for item in user_ingredients if item.strip()]
        if not ingredients:
            raise NoIngredientsError("No ingredients provided")

        recipes: list[Recipe] = []
        try:
            payload = await self.client.generate(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                instructions=SYSTEM_PROMPT,
                prompt=build_recipe_prompt(
                    ingredients, preferences, count=self.recipe_count
                ),
                schema=RECIPE_SCHEMA,
            )
        except Exception:
            _logger.exception("Recipe generation request failed, using fallbacks")
        else:
            drafts = extract_recipe_drafts(payload)[: self.recipe_count]
            _logger.info("Recipe generation returned %s drafts", len(drafts))
            stamp = _timestamp_ms()
            for index, draft in enumerate(drafts):
                try:
                    recipe = draft_to_recipe(draft, f"generated-{stamp}-{index}")
                    if recipe is None:
                        _logger.warning("Skipping incomplete recipe draft %s", index)
                        continue
                    recipe = self.annotate(recipe, ingredients, preferences)
                except Exception:
                    _logger.exception("Skipping unusable recipe draft %s", index)
                    continue
                recipes.append(self._persist(recipe))

        skill_level = recipes[0].skill_level if recipes else "beginner"
        while len(recipes) < self.recipe_count:
            fallback = build_fallback_recipe(
                ingredients, len(recipes), skill_level=skill_level
            )
            recipes.append(self.annotate(fallback, ingredients, preferences))
        return recipes

    def annotate(
        self,
        recipe: Recipe,
        user_ingredients: Sequence[str],
        preferences: UserPreferences,
    ) -> Recipe:
        """Attach availability, match and safety results to a recipe."""
        availability = self.availability_matcher.compute(
            recipe.ingredients, user_ingredients
        )
        recipe = replace(
            recipe,
            ingredients=availability.ingredients,
            missing_ingredients=availability.match.missing_ingredient_names,
            match=availability.match.match_percentage,
        )
        return replace(
            recipe,
            safety_check=self.safety_validator.validate(recipe, preferences.allergies),
            safety_concerns=self.concern_analyzer.analyze(recipe),
        )

    def _persist(self, recipe: Recipe) -> Recipe:
        """Store a recipe, keeping the temporary id if storage fails."""
        try:
            stored_id = self.repository.save_recipe(recipe)
        except Exception:
            _logger.exception("Failed to save recipe %r", recipe.title)
            return recipe
        return replace(recipe, id=stored_id)


def build_recipe_prompt(
    ingredients: Sequence[str], preferences: UserPreferences, count: int = 2
) -> str:
    """Describe the user's ingredients and preferences for the model."""
    skill = _SKILL_DESCRIPTIONS.get(preferences.skill_level, _SKILL_DESCRIPTIONS[3])
    lines = [
        f"Generate exactly {count} recipes based on these ingredients: "
        f"{', '.join(ingredients)}.",
        "The user has the following preferences:",
        _preference_line("Allergies", [tag.value for tag in preferences.allergies]),
        _preference_line("Dietary Preferences", preferences.dietary_preferences),
        f"- Cooking Skill Level: {preferences.skill_level}/3 "
        f"(Focus on creating {skill})",
        f"- Maximum Cooking Time: {preferences.cooking_time} minutes",
        _preference_line("Available Equipment", preferences.equipment),
        "The recipes should be diverse and use the ingredients in different ways.",
        "Mark which ingredients are essential, include every step needed to "
        "complete the dish, and add safety notes for raw meat handling.",
    ]
    return "\n".join(lines)


def _preference_line(label: str, values: Sequence[str]) -> str:
    if not values:
        return f"- No {label.lower()} specified"
    return f"- {label}: {', '.join(values)}"


def extract_recipe_drafts(payload: object) -> list[RecipeDraft]:
    """Find recipe objects in a model payload and validate them."""
    raw_items: list[object] = []
    if isinstance(payload, list):
        raw_items = payload
    elif isinstance(payload, dict):
        if isinstance(payload.get("recipes"), list):
            raw_items = payload["recipes"]
        elif payload.get("title") and payload.get("ingredients"):
            raw_items = [payload]
        else:
            for value in payload.values():
                if (
                    isinstance(value, list)
                    and value
                    and isinstance(value[0], dict)
                    and value[0].get("title")
                ):
                    raw_items = value
                    break

    drafts: list[RecipeDraft] = []
    for item in raw_items:
        if not isinstance(item, dict):
            continue
        try:
            drafts.append(RecipeDraft.model_validate(item))
        except ValidationError as exc:
            _logger.warning("Discarding invalid recipe draft: %s", exc)
    return drafts


def draft_to_recipe(draft: RecipeDraft, recipe_id: str) -> Recipe | None:
    """Convert a draft into a recipe, or None if required fields are missing."""
    if not draft.title or not draft.skill_level or not draft.description:
        return None
    if draft.ingredients is None or draft.instructions is None:
        return None

    ingredients = tuple(
        RecipeIngredient(
            id=str(item.id) if item.id not in (None, "") else str(index + 1),
            name=item.name or f"Ingredient {index + 1}",
            amount=_format_amount(item.amount),
            unit=item.unit or "portion",
            essential=True if item.essential is None else item.essential,
        )
        for index, item in enumerate(draft.ingredients)
    )
    instructions = tuple(
        RecipeInstruction(
            id=step.id or index + 1,
            text=step.text or f"Step {index + 1}",
            safety_note=step.safety_note or None,
        )
        for index, step in enumerate(draft.instructions)
    )
    allergy_info = AllergyInfo()
    if draft.allergy_info is not None:
        allergy_info = AllergyInfo(
            safe_for=tuple(draft.allergy_info.safe),
            warnings=parse_allergen_tags(draft.allergy_info.warnings),
        )
    return Recipe(
        id=recipe_id,
        title=draft.title,
        description=draft.description,
        skill_level=draft.skill_level,
        prep_time=_as_int(draft.prep_time, 15),
        cook_time=_as_int(draft.cook_time, 30),
        servings=_as_int(draft.servings, 4),
        ingredients=ingredients,
        instructions=instructions,
        allergy_info=allergy_info,
        safety_notes=tuple(draft.safety_notes),
    )


def build_fallback_recipe(
    user_ingredients: Sequence[str], index: int, skill_level: str = "beginner"
) -> Recipe:
    """Build a generic recipe from the user's ingredients."""
    title, description = _FALLBACK_TEMPLATES[index % len(_FALLBACK_TEMPLATES)]
    return Recipe(
        id=f"fallback-{_timestamp_ms()}-{index}",
        title=title,
        description=description,
        skill_level=skill_level,
        prep_time=10,
        cook_time=15,
        servings=2,
        ingredients=tuple(
            RecipeIngredient(
                id=str(position + 1),
                name=name,
                amount="1",
                unit="portion",
                essential=True,
                available=True,
            )
            for position, name in enumerate(user_ingredients)
        ),
        instructions=tuple(
            RecipeInstruction(id=position + 1, text=text)
            for position, text in enumerate(_FALLBACK_STEPS)
        ),
        safety_notes=_FALLBACK_NOTES,
    )


def _format_amount(amount: str | float | None) -> str:
    if amount is None or amount == "":
        return "1"
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def _as_int(value: float | None, default: int) -> int:
    if value is None:
        return default
    return int(value)


def _timestamp_ms() -> int:
    return int(datetime.now(tz=UTC).timestamp() * 1000)
