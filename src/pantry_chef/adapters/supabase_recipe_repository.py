"""Supabase-backed recipe repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from pantry_chef.domain.allergens import parse_allergen_tags
from pantry_chef.domain.recipes import (
    AllergyInfo,
    Recipe,
    RecipeIngredient,
    RecipeInstruction,
    SafetyConcerns,
    SafetyVerdict,
)
from pantry_chef.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipe persistence."""

    client: Client
    table_name: str = "recipes"

    def save_recipe(self, recipe: Recipe) -> str:
        """Insert a recipe row and return the generated id."""
        response = self.client.table(self.table_name).insert(_to_row(recipe)).execute()
        if not response.data:
            raise RuntimeError("Failed to save recipe in Supabase")
        return str(response.data[0]["id"])

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def list_recent(self, limit: int) -> list[Recipe]:
        """Return the newest recipes first."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]


def _to_row(recipe: Recipe) -> dict[str, object]:
    """Serialize a recipe into an insertable row; the database assigns ids."""
    row: dict[str, object] = {
        "title": recipe.title,
        "description": recipe.description,
        "skill_level": recipe.skill_level,
        "prep_time": recipe.prep_time,
        "cook_time": recipe.cook_time,
        "servings": recipe.servings,
        "rating": recipe.rating,
        "ingredients": [
            {
                "id": item.id,
                "name": item.name,
                "amount": item.amount,
                "unit": item.unit,
                "essential": item.essential,
                "available": item.available,
            }
            for item in recipe.ingredients
        ],
        "instructions": [
            {"id": step.id, "text": step.text, "safety_note": step.safety_note}
            for step in recipe.instructions
        ],
        "allergy_info": {
            "safe": list(recipe.allergy_info.safe_for),
            "warnings": [tag.value for tag in recipe.allergy_info.warnings],
        },
        "safety_notes": list(recipe.safety_notes),
        "missing_ingredients": list(recipe.missing_ingredients),
        "match": recipe.match,
        "safety_check": None,
        "safety_concerns": None,
    }
    if recipe.safety_check is not None:
        row["safety_check"] = {
            "is_valid": recipe.safety_check.is_valid,
            "message": recipe.safety_check.message,
        }
    if recipe.safety_concerns is not None:
        row["safety_concerns"] = {
            "concerns": list(recipe.safety_concerns.concerns),
            "severity": recipe.safety_concerns.severity,
        }
    return row


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    allergy_raw = row.get("allergy_info") or {}
    safety_raw = row.get("safety_check")
    concerns_raw = row.get("safety_concerns")
    created_raw = row.get("created_at")
    return Recipe(
        id=str(row["id"]),
        title=str(row.get("title", "")),
        description=str(row.get("description", "")),
        skill_level=str(row.get("skill_level", "beginner")),
        prep_time=int(row.get("prep_time") or 0),
        cook_time=int(row.get("cook_time") or 0),
        servings=int(row.get("servings") or 0),
        rating=row.get("rating"),
        ingredients=tuple(
            RecipeIngredient(
                id=str(item.get("id", "")),
                name=str(item.get("name", "")),
                amount=str(item.get("amount", "1")),
                unit=item.get("unit"),
                essential=bool(item.get("essential", True)),
                available=bool(item.get("available", False)),
            )
            for item in row.get("ingredients") or []
        ),
        instructions=tuple(
            RecipeInstruction(
                id=int(step.get("id", 0)),
                text=str(step.get("text", "")),
                safety_note=step.get("safety_note"),
            )
            for step in row.get("instructions") or []
        ),
        allergy_info=AllergyInfo(
            safe_for=tuple(allergy_raw.get("safe", [])),
            warnings=parse_allergen_tags(allergy_raw.get("warnings", [])),
        ),
        safety_notes=tuple(row.get("safety_notes") or []),
        missing_ingredients=tuple(row.get("missing_ingredients") or []),
        match=row.get("match"),
        safety_check=(
            SafetyVerdict(
                is_valid=bool(safety_raw.get("is_valid")),
                message=safety_raw.get("message"),
            )
            if isinstance(safety_raw, dict)
            else None
        ),
        safety_concerns=(
            SafetyConcerns(
                concerns=tuple(concerns_raw.get("concerns", [])),
                severity=concerns_raw.get("severity", "low"),
            )
            if isinstance(concerns_raw, dict)
            else None
        ),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
