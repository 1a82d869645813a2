"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from pantry_chef.config import Settings
from pantry_chef.containers import AppContainer
from pantry_chef.domain.catalog import IngredientCatalog
from pantry_chef.domain.recipes import Recipe, RecipeIngredient, RecipeInstruction
from pantry_chef.ingredient_data import build_default_catalog
from pantry_chef.services.allergens import AllergenMatcher
from pantry_chef.services.availability import AvailabilityMatcher
from pantry_chef.services.generation import RecipeClient, RecipeGenerationService
from pantry_chef.services.recipes import RecipeRepository, RecipeService
from pantry_chef.services.safety import RecipeSafetyValidator, SafetyConcernAnalyzer


def make_recipe(
    ingredients: list[str],
    steps: list[str],
    **overrides: object,
) -> Recipe:
    """Build a recipe from ingredient names and step texts."""
    recipe = Recipe(
        id="recipe-1",
        title="Test Recipe",
        description="A recipe used in tests.",
        skill_level="beginner",
        prep_time=10,
        cook_time=20,
        servings=2,
        ingredients=tuple(
            RecipeIngredient(id=str(index + 1), name=name)
            for index, name in enumerate(ingredients)
        ),
        instructions=tuple(
            RecipeInstruction(id=index + 1, text=text)
            for index, text in enumerate(steps)
        ),
    )
    return replace(recipe, **overrides)


def recipe_draft(title: str = "Garlic Chicken", **overrides: object) -> dict:
    """Return a recipe object shaped like model output."""
    draft: dict[str, object] = {
        "title": title,
        "description": "Pan-seared chicken with garlic.",
        "prep_time": 10,
        "cook_time": 25,
        "servings": 2,
        "skill_level": "beginner",
        "ingredients": [
            {
                "id": "1",
                "name": "chicken breast",
                "amount": "2",
                "unit": None,
                "essential": True,
            },
            {
                "id": "2",
                "name": "2 cloves garlic, minced",
                "amount": "2",
                "unit": "cloves",
                "essential": True,
            },
            {
                "id": "3",
                "name": "fresh parsley, chopped",
                "amount": "1",
                "unit": "tbsp",
                "essential": False,
            },
        ],
        "instructions": [
            {"id": 1, "text": "Season the chicken.", "safety_note": None},
            {
                "id": 2,
                "text": "Cook the chicken in a hot pan for 6 minutes per side.",
                "safety_note": "Cook to 75°C internal temperature.",
            },
        ],
        "allergy_info": {"safe": ["dairy-free"], "warnings": []},
        "safety_notes": ["Wash hands after handling raw chicken."],
    }
    draft.update(overrides)
    return draft


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[str, Recipe] = field(default_factory=dict)
    fail_on_save: bool = False

    def save_recipe(self, recipe: Recipe) -> str:
        if self.fail_on_save:
            raise RuntimeError("database unavailable")
        recipe_id = str(uuid4())
        self.recipes[recipe_id] = replace(
            recipe, id=recipe_id, created_at=datetime.now(tz=UTC)
        )
        return recipe_id

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def list_recent(self, limit: int) -> list[Recipe]:
        return list(reversed(self.recipes.values()))[:limit]


@dataclass
class FakeRecipeClient(RecipeClient):
    """Fake recipe client returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: {
            "recipes": [recipe_draft(), recipe_draft("Garlic Rice Bowl")]
        }
    )
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

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
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
    )


@pytest.fixture
def catalog() -> IngredientCatalog:
    return build_default_catalog()


@pytest.fixture
def allergen_matcher(catalog: IngredientCatalog) -> AllergenMatcher:
    return AllergenMatcher(catalog)


@pytest.fixture
def safety_validator(allergen_matcher: AllergenMatcher) -> RecipeSafetyValidator:
    return RecipeSafetyValidator(allergen_matcher)


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def recipe_client() -> FakeRecipeClient:
    return FakeRecipeClient()


@pytest.fixture
def generation_service(
    recipe_client: FakeRecipeClient,
    recipe_repository: InMemoryRecipeRepository,
    safety_validator: RecipeSafetyValidator,
) -> RecipeGenerationService:
    return RecipeGenerationService(
        client=recipe_client,
        repository=recipe_repository,
        availability_matcher=AvailabilityMatcher(),
        safety_validator=safety_validator,
        concern_analyzer=SafetyConcernAnalyzer(),
        model="gpt-5.2",
        reasoning_effort="low",
        store=False,
    )


@pytest.fixture
def container(
    settings: Settings,
    catalog: IngredientCatalog,
    allergen_matcher: AllergenMatcher,
    safety_validator: RecipeSafetyValidator,
    recipe_repository: InMemoryRecipeRepository,
    generation_service: RecipeGenerationService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        allergen_matcher=allergen_matcher,
        safety_validator=safety_validator,
        concern_analyzer=generation_service.concern_analyzer,
        availability_matcher=generation_service.availability_matcher,
        recipe_service=RecipeService(recipe_repository),
        generation_service=generation_service,
        close_resources=close_resources,
    )
