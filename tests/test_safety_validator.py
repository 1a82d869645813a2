"""Tests for recipe safety validation."""

from dataclasses import replace

from pantry_chef.domain.allergens import AllergenTag
from pantry_chef.domain.recipes import AllergyInfo, SafetyVerdict
from pantry_chef.services.safety import (
    DECLARED_ALLERGY_MESSAGE,
    RAW_MEAT_MESSAGE,
    RecipeSafetyValidator,
    SafetyConcernAnalyzer,
)
from tests.conftest import make_recipe


def test_raw_chicken_without_cooking_step_fails(
    safety_validator: RecipeSafetyValidator,
) -> None:
    recipe = make_recipe(["chicken breast"], ["serve with rice"])

    verdict = safety_validator.validate(recipe, set())

    assert verdict == SafetyVerdict(is_valid=False, message=RAW_MEAT_MESSAGE)


def test_adding_cooking_step_passes(safety_validator: RecipeSafetyValidator) -> None:
    recipe = make_recipe(
        ["chicken breast"],
        ["serve with rice", "bake at 200°C for 25 minutes"],
    )

    verdict = safety_validator.validate(recipe, set())

    assert verdict == SafetyVerdict(is_valid=True)


def test_pre_cooked_step_does_not_count(
    safety_validator: RecipeSafetyValidator,
) -> None:
    recipe = make_recipe(["ground beef"], ["add the pre-cooked beef and heat through"])

    verdict = safety_validator.validate(recipe, set())

    assert verdict.message == RAW_MEAT_MESSAGE


def test_cooked_meat_needs_no_cooking_step(
    safety_validator: RecipeSafetyValidator,
) -> None:
    recipe = make_recipe(["cooked deli meat"], ["slice and serve"])

    assert safety_validator.validate(recipe, set()).is_valid


def test_declared_allergy_warning_fails(
    safety_validator: RecipeSafetyValidator,
) -> None:
    recipe = make_recipe(
        ["rice"],
        ["boil the rice"],
        allergy_info=AllergyInfo(warnings=(AllergenTag.PEANUTS,)),
    )

    verdict = safety_validator.validate(recipe, {AllergenTag.PEANUTS})

    assert verdict == SafetyVerdict(is_valid=False, message=DECLARED_ALLERGY_MESSAGE)


def test_deep_allergen_check_lists_present_allergens(
    safety_validator: RecipeSafetyValidator,
) -> None:
    recipe = make_recipe(["cheese", "bread"], ["toast the bread"])

    verdict = safety_validator.validate(
        recipe, {AllergenTag.DAIRY, AllergenTag.GLUTEN}
    )

    assert not verdict.is_valid
    assert verdict.message == "Recipe contains allergens: dairy, gluten"


def test_raw_meat_check_runs_first(safety_validator: RecipeSafetyValidator) -> None:
    recipe = make_recipe(["pork chop", "butter"], ["rest the pork"])

    verdict = safety_validator.validate(recipe, {AllergenTag.DAIRY})

    assert verdict.message == RAW_MEAT_MESSAGE


def test_validation_is_repeatable(safety_validator: RecipeSafetyValidator) -> None:
    recipe = make_recipe(["cheese"], ["melt the cheese"])
    allergies = {AllergenTag.DAIRY}

    first = safety_validator.validate(recipe, allergies)
    second = safety_validator.validate(recipe, allergies)

    assert first == second


def test_custom_check_order(safety_validator: RecipeSafetyValidator) -> None:
    class AlwaysFails:
        def evaluate(self, recipe, user_allergies):  # type: ignore[no-untyped-def]
            return SafetyVerdict(is_valid=False, message="nope")

    validator = replace(safety_validator, checks=(AlwaysFails(),))

    verdict = validator.validate(make_recipe([], []), set())

    assert verdict.message == "nope"


def test_concerns_for_raw_high_risk_ingredients() -> None:
    recipe = make_recipe(["raw chicken thighs"], ["grill the chicken"])

    result = SafetyConcernAnalyzer().analyze(recipe)

    assert result.severity == "high"
    assert len(result.concerns) == 3


def test_hand_washing_note_clears_concern() -> None:
    recipe = make_recipe(
        ["white fish fillet"],
        ["roast the fish"],
        safety_notes=("Wash your hands after handling fish.",),
    )

    result = SafetyConcernAnalyzer().analyze(recipe)

    assert result.concerns == ()
    assert result.severity == "low"


def test_missing_hand_washing_is_medium() -> None:
    recipe = make_recipe(["beef strips"], ["fry the beef until browned"])

    result = SafetyConcernAnalyzer().analyze(recipe)

    assert result.concerns == ("No reminder to wash hands after handling raw meat",)
    assert result.severity == "medium"


def test_explicit_empty_pipeline_is_kept(
    safety_validator: RecipeSafetyValidator,
) -> None:
    validator = RecipeSafetyValidator(safety_validator.matcher, checks=())
    recipe = make_recipe(["chicken breast"], ["serve with rice"])

    assert validator.checks == ()
    assert validator.validate(recipe, set()) == SafetyVerdict(is_valid=True)


def test_default_pipeline_order(safety_validator: RecipeSafetyValidator) -> None:
    assert [type(check).__name__ for check in safety_validator.checks] == [
        "RawMeatCheck",
        "DeclaredAllergyCheck",
        "DeepAllergenCheck",
    ]
