"""Models for recipe drafts returned by the language model."""

import math

from pydantic import AliasChoices, BaseModel, Field, field_validator


def _number_or_none(value: object) -> object:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float) and math.isfinite(value):
        return value
    return None


def _list_or_empty(value: object) -> object:
    return value if isinstance(value, list) else []


class IngredientDraft(BaseModel):
    """Ingredient line as written by the model."""

    id: str | int | None = None
    name: str | None = None
    amount: str | int | float | None = None
    unit: str | None = None
    essential: bool | None = None


class InstructionDraft(BaseModel):
    """Instruction step as written by the model."""

    id: int | None = None
    text: str | None = None
    safety_note: str | None = Field(
        default=None, validation_alias=AliasChoices("safety_note", "safetyNote")
    )


class AllergyInfoDraft(BaseModel):
    """Allergy annotations as written by the model."""

    safe: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @field_validator("safe", "warnings", mode="before")
    @classmethod
    def _coerce_list(cls, value: object) -> object:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]


class RecipeDraft(BaseModel):
    """Loosely structured recipe produced by the model."""

    title: str | None = None
    description: str | None = None
    skill_level: str | None = Field(
        default=None, validation_alias=AliasChoices("skill_level", "skillLevel")
    )
    prep_time: float | None = Field(
        default=None, validation_alias=AliasChoices("prep_time", "prepTime")
    )
    cook_time: float | None = Field(
        default=None, validation_alias=AliasChoices("cook_time", "cookTime")
    )
    servings: float | None = None
    ingredients: list[IngredientDraft] | None = None
    instructions: list[InstructionDraft] | None = None
    allergy_info: AllergyInfoDraft | None = Field(
        default=None, validation_alias=AliasChoices("allergy_info", "allergyInfo")
    )
    safety_notes: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("safety_notes", "safetyNotes"),
    )

    @field_validator("prep_time", "cook_time", "servings", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> object:
        return _number_or_none(value)

    @field_validator("allergy_info", mode="before")
    @classmethod
    def _coerce_allergy_info(cls, value: object) -> object:
        return value if isinstance(value, dict) else None

    @field_validator("safety_notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value: object) -> object:
        return [note for note in _list_or_empty(value) if isinstance(note, str)]
