"""Pydantic models for recipe API payloads."""

from pydantic import AliasChoices, BaseModel, Field

from pantry_chef.domain.allergens import parse_allergen_tags
from pantry_chef.domain.preferences import UserPreferences
from pantry_chef.domain.recipes import (
    AllergyInfo,
    Recipe,
    RecipeIngredient,
    RecipeInstruction,
)


class PreferencesPayload(BaseModel):
    """Preferences collected by the recipe wizard."""

    allergies: list[str] = Field(default_factory=list)
    dietary_preferences: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dietary_preferences", "dietaryPreferences"),
    )
    skill_level: int = Field(
        default=1,
        ge=1,
        le=3,
        validation_alias=AliasChoices("skill_level", "skillLevel"),
    )
    cooking_time: int = Field(
        default=30,
        gt=0,
        validation_alias=AliasChoices("cooking_time", "cookingTime"),
    )
    equipment: list[str] = Field(default_factory=list)

    def to_domain(self) -> UserPreferences:
        """Convert to domain preferences, dropping unknown allergens."""
        return UserPreferences(
            allergies=parse_allergen_tags(self.allergies),
            dietary_preferences=tuple(self.dietary_preferences),
            skill_level=self.skill_level,
            cooking_time=self.cooking_time,
            equipment=tuple(self.equipment),
        )


class GenerateRecipesRequest(BaseModel):
    """Body of a recipe generation request."""

    ingredients: list[str]
    preferences: PreferencesPayload = Field(default_factory=PreferencesPayload)


class IngredientPayload(BaseModel):
    """Recipe ingredient line."""

    id: str | None = None
    name: str | None = None
    amount: str = "1"
    unit: str | None = None
    essential: bool = True


class InstructionPayload(BaseModel):
    """Recipe instruction step."""

    id: int | None = None
    text: str = ""
    safety_note: str | None = Field(
        default=None, validation_alias=AliasChoices("safety_note", "safetyNote")
    )


class AllergyInfoPayload(BaseModel):
    """Allergy annotations supplied with a recipe."""

    safe: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class RecipePayload(BaseModel):
    """Recipe submitted for validation."""

    id: str = "submitted"
    title: str = ""
    description: str = ""
    skill_level: str = Field(
        default="beginner",
        validation_alias=AliasChoices("skill_level", "skillLevel"),
    )
    prep_time: int = Field(
        default=0, validation_alias=AliasChoices("prep_time", "prepTime")
    )
    cook_time: int = Field(
        default=0, validation_alias=AliasChoices("cook_time", "cookTime")
    )
    servings: int = 1
    ingredients: list[IngredientPayload] = Field(default_factory=list)
    instructions: list[InstructionPayload] = Field(default_factory=list)
    allergy_info: AllergyInfoPayload = Field(
        default_factory=AllergyInfoPayload,
        validation_alias=AliasChoices("allergy_info", "allergyInfo"),
    )
    safety_notes: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("safety_notes", "safetyNotes"),
    )

    def to_domain(self) -> Recipe:
        """Convert the payload into a recipe."""
        return Recipe(
            id=self.id,
            title=self.title,
            description=self.description,
            skill_level=self.skill_level,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            servings=self.servings,
            ingredients=tuple(
                RecipeIngredient(
                    id=item.id or str(index + 1),
                    name=item.name or "",
                    amount=item.amount,
                    unit=item.unit,
                    essential=item.essential,
                )
                for index, item in enumerate(self.ingredients)
            ),
            instructions=tuple(
                RecipeInstruction(
                    id=step.id or index + 1,
                    text=step.text,
                    safety_note=step.safety_note,
                )
                for index, step in enumerate(self.instructions)
            ),
            allergy_info=AllergyInfo(
                safe_for=tuple(self.allergy_info.safe),
                warnings=parse_allergen_tags(self.allergy_info.warnings),
            ),
            safety_notes=tuple(self.safety_notes),
        )


class ValidateRecipeRequest(BaseModel):
    """Body of a recipe validation request."""

    recipe: RecipePayload
    allergies: list[str] = Field(default_factory=list)
    user_ingredients: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("user_ingredients", "userIngredients"),
    )
