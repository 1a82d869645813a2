"""Tests for ingredient availability matching."""

import pytest

from pantry_chef.domain.recipes import RecipeIngredient
from pantry_chef.services.availability import (
    AvailabilityMatcher,
    is_available,
    match_percentage,
)


def _ingredient(name: str, essential: bool = True) -> RecipeIngredient:
    return RecipeIngredient(id=name, name=name, essential=essential)


def test_garlic_phrase_matches_user_garlic() -> None:
    result = AvailabilityMatcher().compute(
        [_ingredient("2 cloves garlic, minced"), _ingredient("1 lemon, juiced")],
        ["garlic"],
    )

    assert result.ingredients[0].available is True
    assert result.ingredients[1].available is False
    assert result.match.missing_ingredient_names == ("1 lemon",)
    assert result.match.match_percentage == 50


def test_missing_names_keep_recipe_order_and_skip_optional() -> None:
    result = AvailabilityMatcher().compute(
        [
            _ingredient("onion, diced"),
            _ingredient("parsley", essential=False),
            _ingredient("  carrot , sliced"),
        ],
        [],
    )

    assert result.match.missing_ingredient_names == ("onion", "carrot")
    assert result.match.match_percentage == 0


def test_empty_recipe_is_fully_matched() -> None:
    result = AvailabilityMatcher().compute([], ["rice"])

    assert result.ingredients == ()
    assert result.match.missing_ingredient_names == ()
    assert result.match.match_percentage == 100


def test_only_optional_ingredients_is_fully_matched() -> None:
    result = AvailabilityMatcher().compute([_ingredient("basil", essential=False)], [])

    assert result.match.match_percentage == 100


def test_inputs_are_not_mutated() -> None:
    original = _ingredient("tomato")

    result = AvailabilityMatcher().compute([original], ["Tomato"])

    assert original.available is False
    assert result.ingredients[0].available is True


@pytest.mark.parametrize(
    ("name", "user_ingredients", "expected"),
    (
        ("Chicken thighs", ["chicken"], True),
        ("rice", ["brown rice"], True),
        ("salt", ["  SALT "], True),
        ("olive oil", ["butter"], False),
        ("", ["garlic"], False),
        ("garlic", ["", "  "], False),
    ),
)
def test_is_available(name: str, user_ingredients: list[str], expected: bool) -> None:
    assert is_available(name, user_ingredients) is expected


@pytest.mark.parametrize(
    ("available", "total", "expected"),
    ((0, 0, 100), (1, 8, 13), (2, 3, 67), (1, 3, 33), (3, 3, 100), (0, 4, 0)),
)
def test_match_percentage_rounds_half_up(
    available: int, total: int, expected: int
) -> None:
    assert match_percentage(available, total) == expected
