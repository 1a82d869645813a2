"""Recipe safety validation and food handling analysis."""

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Protocol

from pantry_chef.domain.allergens import AllergenTag
from pantry_chef.domain.recipes import Recipe, SafetyConcerns, SafetyVerdict
from pantry_chef.domain.text_matching import contains_any, normalize
from pantry_chef.services.allergens import AllergenMatcher

RAW_MEAT_MESSAGE = (
    "Recipe appears to contain raw meat without proper cooking instructions."
)
DECLARED_ALLERGY_MESSAGE = "Recipe contains ingredients you are allergic to."

_MEAT_KEYWORDS = ("chicken", "beef", "pork", "turkey", "lamb")
_COOKING_KEYWORDS = ("cook", "heat", "bake", "roast", "grill", "fry")
_HIGH_RISK_KEYWORDS = ("egg", "meat", "chicken", "fish", "beef", "pork")
_HANDLING_KEYWORDS = ("meat", "chicken", "beef", "pork", "fish")
_TEMPERATURE_KEYWORDS = ("internal temperature", "165", "75c", "75°c")


class SafetyCheck(Protocol):
    """Single step of recipe validation."""

    def evaluate(
        self, recipe: Recipe, user_allergies: Collection[AllergenTag]
    ) -> SafetyVerdict | None:
        """Return a failing verdict, or None when the check passes."""


def _is_raw_meat(name: str | None) -> bool:
    normalized = normalize(name)
    if contains_any(normalized, _MEAT_KEYWORDS):
        return True
    return "meat" in normalized and "cooked" not in normalized


def _is_cooking_step(text: str | None) -> bool:
    normalized = normalize(text)
    if "pre-cooked" in normalized:
        return False
    return contains_any(normalized, _COOKING_KEYWORDS)


class RawMeatCheck:
    """Fails recipes with raw meat but no cooking step."""

    def evaluate(
        self, recipe: Recipe, user_allergies: Collection[AllergenTag]
    ) -> SafetyVerdict | None:
        if not any(_is_raw_meat(ingredient.name) for ingredient in recipe.ingredients):
            return None
        if any(_is_cooking_step(step.text) for step in recipe.instructions):
            return None
        return SafetyVerdict(is_valid=False, message=RAW_MEAT_MESSAGE)


class DeclaredAllergyCheck:
    """Fails recipes whose own allergy warnings hit a user allergy."""

    def evaluate(
        self, recipe: Recipe, user_allergies: Collection[AllergenTag]
    ) -> SafetyVerdict | None:
        if any(tag in user_allergies for tag in recipe.allergy_info.warnings):
            return SafetyVerdict(is_valid=False, message=DECLARED_ALLERGY_MESSAGE)
        return None


@dataclass(frozen=True)
class DeepAllergenCheck:
    """Fails recipes whose ingredients resolve to a user allergen."""

    matcher: AllergenMatcher

    def evaluate(
        self, recipe: Recipe, user_allergies: Collection[AllergenTag]
    ) -> SafetyVerdict | None:
        report = self.matcher.detect(recipe.ingredients, user_allergies)
        if report.is_safe:
            return None
        allergens = ", ".join(tag.value for tag in report.allergens_present)
        return SafetyVerdict(
            is_valid=False, message=f"Recipe contains allergens: {allergens}"
        )


@dataclass(frozen=True)
class RecipeSafetyValidator:
    """Runs safety checks in order and stops at the first failure."""

    matcher: AllergenMatcher
    checks: Sequence[SafetyCheck] | None = None

    def __post_init__(self) -> None:
        if self.checks is None:
            object.__setattr__(
                self,
                "checks",
                (
                    RawMeatCheck(),
                    DeclaredAllergyCheck(),
                    DeepAllergenCheck(self.matcher),
                ),
            )

    def validate(
        self, recipe: Recipe, user_allergies: Collection[AllergenTag] = ()
    ) -> SafetyVerdict:
        """Validate a recipe for a user with the given allergies."""
        for check in self.checks:
            verdict = check.evaluate(recipe, user_allergies)
            if verdict is not None:
                return verdict
        return SafetyVerdict(is_valid=True)


class SafetyConcernAnalyzer:
    """Lists food handling concerns without failing the recipe."""

    def analyze(self, recipe: Recipe) -> SafetyConcerns:
        """Return handling concerns and an overall severity."""
        concerns: list[str] = []
        high_risk = any(
            "raw" in normalize(ingredient.name)
            and contains_any(ingredient.name, _HIGH_RISK_KEYWORDS)
            for ingredient in recipe.ingredients
        )
        if high_risk:
            concerns.append(
                "Recipe contains high-risk raw ingredients that require proper "
                "handling and cooking"
            )
            if not any(
                contains_any(step.text, _TEMPERATURE_KEYWORDS)
                for step in recipe.instructions
            ):
                concerns.append(
                    "No specific instructions for cooking to safe internal temperature"
                )

        handles_meat = any(
            contains_any(ingredient.name, _HANDLING_KEYWORDS)
            for ingredient in recipe.ingredients
        )
        if handles_meat and not _mentions_hand_washing(recipe):
            concerns.append("No reminder to wash hands after handling raw meat")

        severity = "low"
        if concerns:
            severity = "high" if high_risk else "medium"
        return SafetyConcerns(concerns=tuple(concerns), severity=severity)


def _mentions_hand_washing(recipe: Recipe) -> bool:
    texts = [step.text for step in recipe.instructions] + list(recipe.safety_notes)
    return any(
        "wash" in normalize(text) and "hand" in normalize(text) for text in texts
    )
