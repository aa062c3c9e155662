"""Services package."""
from .grocery_list import build_grocery_list, compute_recipe_multipliers, format_quantity
from .ingredient_aggregator import aggregate_ingredients, guess_category

__all__ = [
    "aggregate_ingredients",
    "build_grocery_list",
    "compute_recipe_multipliers",
    "format_quantity",
    "guess_category",
]
