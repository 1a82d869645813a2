"""Recipe domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from pantry_chef.domain.allergens import AllergenTag

SkillLevel = Literal["beginner", "intermediate", "advanced"]
Severity = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class RecipeIngredient:
    """Ingredient line of a recipe."""

    id: str
    name: str
    amount: str = "1"
    unit: str | None = None
    essential: bool = True
    available: bool = False


@dataclass(frozen=True)
class RecipeInstruction:
    """Single preparation step."""

    id: int
    text: str
    safety_note: str | None = None


@dataclass(frozen=True)
class AllergyInfo:
    """Allergen annotations attached to a recipe."""

    safe_for: tuple[str, ...] = ()
    warnings: tuple[AllergenTag, ...] = ()


@dataclass(frozen=True)
class SafetyVerdict:
    """Outcome of validating a recipe for a user."""

    is_valid: bool
    message: str | None = None


@dataclass(frozen=True)
class MatchResult:
    """How well a recipe matches the ingredients a user has on hand."""

    missing_ingredient_names: tuple[str, ...]
    match_percentage: int


@dataclass(frozen=True)
class SafetyConcerns:
    """Food handling concerns found in a recipe."""

    concerns: tuple[str, ...]
    severity: Severity


@dataclass(frozen=True)
class Recipe:
    """Recipe with its derived availability and safety annotations."""

    id: str
    title: str
    description: str
    skill_level: SkillLevel | str
    prep_time: int
    cook_time: int
    servings: int
    ingredients: tuple[RecipeIngredient, ...]
    instructions: tuple[RecipeInstruction, ...]
    allergy_info: AllergyInfo = field(default_factory=AllergyInfo)
    safety_notes: tuple[str, ...] = ()
    rating: float | None = None
    missing_ingredients: tuple[str, ...] = ()
    match: int | None = None
    safety_check: SafetyVerdict | None = None
    safety_concerns: SafetyConcerns | None = None
    created_at: datetime | None = None
