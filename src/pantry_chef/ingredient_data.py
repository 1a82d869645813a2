"""Static ingredient reference data."""

from pantry_chef.domain.allergens import AllergenTag
from pantry_chef.domain.catalog import (
    IngredientCatalog,
    IngredientCatalogEntry,
    IngredientCategory,
)

CATEGORIES: tuple[IngredientCategory, ...] = (
    IngredientCategory("all", "All"),
    IngredientCategory("proteins", "Proteins"),
    IngredientCategory("vegetables", "Vegetables"),
    IngredientCategory("dairy", "Dairy"),
    IngredientCategory("grains", "Grains"),
    IngredientCategory("fruits", "Fruits"),
    IngredientCategory("spices", "Spices"),
    IngredientCategory("condiments", "Condiments"),
)

# (id, name, category, allergens)
_INGREDIENTS: tuple[tuple[str, str, str, tuple[AllergenTag, ...]], ...] = (
    ("chicken", "Chicken", "proteins", ()),
    ("beef", "Beef", "proteins", ()),
    ("pork", "Pork", "proteins", ()),
    ("shrimp", "Shrimp", "proteins", (AllergenTag.SHELLFISH,)),
    ("tofu", "Tofu", "proteins", (AllergenTag.SOY,)),
    ("eggs", "Eggs", "proteins", (AllergenTag.EGGS,)),
    ("salmon", "Salmon", "proteins", (AllergenTag.FISH,)),
    ("tuna", "Tuna", "proteins", (AllergenTag.FISH,)),
    ("onion", "Onion", "vegetables", ()),
    ("garlic", "Garlic", "vegetables", ()),
    ("tomato", "Tomato", "vegetables", ()),
    ("potato", "Potato", "vegetables", ()),
    ("carrot", "Carrot", "vegetables", ()),
    ("bell-pepper", "Bell Pepper", "vegetables", ()),
    ("broccoli", "Broccoli", "vegetables", ()),
    ("spinach", "Spinach", "vegetables", ()),
    ("cucumber", "Cucumber", "vegetables", ()),
    ("zucchini", "Zucchini", "vegetables", ()),
    ("cheese", "Cheese", "dairy", (AllergenTag.DAIRY,)),
    ("milk", "Milk", "dairy", (AllergenTag.DAIRY,)),
    ("butter", "Butter", "dairy", (AllergenTag.DAIRY,)),
    ("yogurt", "Yogurt", "dairy", (AllergenTag.DAIRY,)),
    ("cream", "Cream", "dairy", (AllergenTag.DAIRY,)),
    ("rice", "Rice", "grains", ()),
    ("pasta", "Pasta", "grains", (AllergenTag.GLUTEN,)),
    ("bread", "Bread", "grains", (AllergenTag.GLUTEN,)),
    ("flour", "Flour", "grains", (AllergenTag.GLUTEN,)),
    ("oats", "Oats", "grains", ()),
    ("quinoa", "Quinoa", "grains", ()),
    ("apple", "Apple", "fruits", ()),
    ("banana", "Banana", "fruits", ()),
    ("orange", "Orange", "fruits", ()),
    ("lemon", "Lemon", "fruits", ()),
    ("lime", "Lime", "fruits", ()),
    ("avocado", "Avocado", "fruits", ()),
    ("salt", "Salt", "spices", ()),
    ("pepper", "Pepper", "spices", ()),
    ("cumin", "Cumin", "spices", ()),
    ("paprika", "Paprika", "spices", ()),
    ("oregano", "Oregano", "spices", ()),
    ("basil", "Basil", "spices", ()),
    ("thyme", "Thyme", "spices", ()),
    ("olive-oil", "Olive Oil", "condiments", ()),
    ("vegetable-oil", "Vegetable Oil", "condiments", ()),
    ("soy-sauce", "Soy Sauce", "condiments", (AllergenTag.SOY, AllergenTag.GLUTEN)),
    ("vinegar", "Vinegar", "condiments", ()),
    ("mayo", "Mayonnaise", "condiments", (AllergenTag.EGGS,)),
    ("ketchup", "Ketchup", "condiments", ()),
    ("mustard", "Mustard", "condiments", ()),
)


def build_default_catalog() -> IngredientCatalog:
    """Build the catalog shipped with the application."""
    return IngredientCatalog(
        entries=(
            IngredientCatalogEntry(
                id=ingredient_id,
                name=name,
                category=category,
                allergy_tags=frozenset(tags),
            )
            for ingredient_id, name, category, tags in _INGREDIENTS
        ),
        categories=CATEGORIES,
    )
