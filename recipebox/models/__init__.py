"""Models package."""
from .recipe import (
    AggregatedIngredient,
    GroceryItem,
    ImportedRecipe,
    ImportResult,
    Ingredient,
    ParsedRecipe,
    PlannedMeal,
    RecipeSelection,
)

__all__ = [
    "AggregatedIngredient",
    "GroceryItem",
    "ImportedRecipe",
    "ImportResult",
    "Ingredient",
    "ParsedRecipe",
    "PlannedMeal",
    "RecipeSelection",
]
