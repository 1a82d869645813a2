"""User preference models."""

from dataclasses import dataclass

from pantry_chef.domain.allergens import AllergenTag


@dataclass(frozen=True)
class UserPreferences:
    """Preferences collected by the recipe wizard."""

    allergies: tuple[AllergenTag, ...] = ()
    dietary_preferences: tuple[str, ...] = ()
    skill_level: int = 1
    cooking_time: int = 30
    equipment: tuple[str, ...] = ()
