"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pantry_chef.adapters.openai_recipe_client import OpenAIRecipeClient
from pantry_chef.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from pantry_chef.config import Settings
from pantry_chef.domain.catalog import IngredientCatalog
from pantry_chef.ingredient_data import build_default_catalog
from pantry_chef.services.allergens import AllergenMatcher
from pantry_chef.services.availability import AvailabilityMatcher
from pantry_chef.services.generation import RecipeGenerationService
from pantry_chef.services.recipes import RecipeService
from pantry_chef.services.safety import RecipeSafetyValidator, SafetyConcernAnalyzer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: IngredientCatalog
    allergen_matcher: AllergenMatcher
    safety_validator: RecipeSafetyValidator
    concern_analyzer: SafetyConcernAnalyzer
    availability_matcher: AvailabilityMatcher
    recipe_service: RecipeService
    generation_service: RecipeGenerationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    recipe_repository = SupabaseRecipeRepository(
        supabase_client, table_name=resolved_settings.recipes_table
    )
    catalog = build_default_catalog()
    allergen_matcher = AllergenMatcher(catalog)
    safety_validator = RecipeSafetyValidator(allergen_matcher)
    concern_analyzer = SafetyConcernAnalyzer()
    availability_matcher = AvailabilityMatcher()
    openai_client = OpenAIRecipeClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
    )
    generation_service = RecipeGenerationService(
        client=openai_client,
        repository=recipe_repository,
        availability_matcher=availability_matcher,
        safety_validator=safety_validator,
        concern_analyzer=concern_analyzer,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
        recipe_count=resolved_settings.recipe_count,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        allergen_matcher=allergen_matcher,
        safety_validator=safety_validator,
        concern_analyzer=concern_analyzer,
        availability_matcher=availability_matcher,
        recipe_service=RecipeService(recipe_repository),
        generation_service=generation_service,
        close_resources=close_resources,
    )
