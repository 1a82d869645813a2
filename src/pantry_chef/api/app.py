"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query, Request, status

from pantry_chef.api.models import GenerateRecipesRequest, ValidateRecipeRequest
from pantry_chef.app_logging import configure_logging
from pantry_chef.config import parse_csv
from pantry_chef.containers import AppContainer
from pantry_chef.domain.allergens import (
    DIETARY_OPTIONS,
    AllergenTag,
    allergy_options,
    parse_allergen_tags,
)
from pantry_chef.domain.catalog import IngredientCatalog
from pantry_chef.domain.recipes import Recipe
from pantry_chef.services.allergens import AllergenReport
from pantry_chef.services.generation import NoIngredientsError
from pantry_chef.services.recipes import is_temporary_id


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/ingredients")
    async def ingredients(request: Request) -> dict[str, object]:
        """Return the ingredient picker reference data."""
        state_container: AppContainer = request.app.state.container
        return _format_catalog(state_container.catalog)

    @app.post("/recipes/generate")
    async def generate_recipes(
        body: GenerateRecipesRequest, request: Request
    ) -> list[dict[str, object]]:
        """Generate recipes for the user's ingredients and preferences."""
        state_container: AppContainer = request.app.state.container
        logger.info("Generating recipes for %s ingredients", len(body.ingredients))
        try:
            recipes = await state_container.generation_service.generate(
                body.ingredients, body.preferences.to_domain()
            )
        except NoIngredientsError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return [_format_recipe(recipe) for recipe in recipes]

    @app.post("/recipes/validate")
    async def validate_recipe(
        body: ValidateRecipeRequest, request: Request
    ) -> dict[str, object]:
        """Run safety, allergen and availability checks on a recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = body.recipe.to_domain()
        allergies = parse_allergen_tags(body.allergies)
        match = None
        if body.user_ingredients is not None:
            availability = state_container.availability_matcher.compute(
                recipe.ingredients, body.user_ingredients
            )
            match = asdict(availability.match)
        report = state_container.allergen_matcher.detect(recipe.ingredients, allergies)
        return {
            "safety_check": asdict(
                state_container.safety_validator.validate(recipe, allergies)
            ),
            "allergens": _format_allergen_report(report),
            "safety_concerns": asdict(state_container.concern_analyzer.analyze(recipe)),
            "match": match,
        }

    @app.get("/recipes")
    async def list_recipes(
        request: Request,
        ids: str | None = None,
        limit: int = Query(10, ge=1, le=100),
    ) -> list[dict[str, object]]:
        """Return recent recipes, or the saved recipes named by ``ids``."""
        state_container: AppContainer = request.app.state.container
        if ids is not None:
            recipes = state_container.recipe_service.get_recipes_by_ids(parse_csv(ids))
        else:
            recipes = state_container.recipe_service.list_recent(limit)
        return [_format_recipe(recipe) for recipe in recipes]

    @app.get("/recipes/{recipe_id}")
    async def recipe_detail(recipe_id: str, request: Request) -> dict[str, object]:
        """Return a stored recipe by id."""
        state_container: AppContainer = request.app.state.container
        if is_temporary_id(recipe_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=(
                    "This is a generated recipe id. It should be retrieved from "
                    "session storage on the client."
                ),
            )
        recipe = state_container.recipe_service.get_recipe(recipe_id)
        if recipe is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found"
            )
        return _format_recipe(recipe)

    return app


def _format_recipe(recipe: Recipe) -> dict[str, object]:
    """Convert a recipe into a JSON-ready payload."""
    payload = asdict(recipe)
    payload["allergy_info"]["warnings"] = [
        tag.value for tag in recipe.allergy_info.warnings
    ]
    if recipe.created_at is not None:
        payload["created_at"] = recipe.created_at.isoformat()
    return payload


def _format_allergen_report(report: AllergenReport) -> dict[str, object]:
    return {
        "present": [tag.value for tag in report.allergens_present],
        "found": [tag.value for tag in report.allergens_found],
        "safe_for": list(report.safe_for),
        "is_safe": report.is_safe,
    }


def _format_catalog(catalog: IngredientCatalog) -> dict[str, object]:
    """Format catalog reference data for the ingredient picker."""
    return {
        "categories": [asdict(category) for category in catalog.categories],
        "ingredients": [
            {
                "id": entry.id,
                "name": entry.name,
                "category": entry.category,
                "allergies": [
                    tag.value for tag in AllergenTag if tag in entry.allergy_tags
                ],
            }
            for entry in catalog.entries
        ],
        "allergies": allergy_options(),
        "dietary_options": list(DIETARY_OPTIONS),
    }
