"""
recipebox: recipe extraction and grocery list aggregation.

This package turns recipe web pages (schema.org JSON-LD or plain markup)
and AI chat markdown exports into structured recipes, and merges the
ingredients of planned recipes into a categorized grocery list.
"""
from __future__ import annotations

from .extractors.recipe_extractor import (
    RecipeExtractor,
    parse_recipe_from_html,
    parse_recipe_from_url,
)
from .models.recipe import (
    AggregatedIngredient,
    GroceryItem,
    ImportedRecipe,
    ImportResult,
    Ingredient,
    ParsedRecipe,
    PlannedMeal,
    RecipeSelection,
)
from .parsers.duration_parser import parse_duration
from .parsers.ingredient_parser import IngredientLineParser, parse_ingredient_line
from .parsers.markdown_parser import MarkdownRecipeParser, parse_grok_recipe
from .services.grocery_list import build_grocery_list, compute_recipe_multipliers
from .services.ingredient_aggregator import aggregate_ingredients, guess_category

__version__ = "0.1.0"

__all__ = [
    "AggregatedIngredient",
    "GroceryItem",
    "ImportResult",
    "ImportedRecipe",
    "Ingredient",
    "IngredientLineParser",
    "MarkdownRecipeParser",
    "ParsedRecipe",
    "PlannedMeal",
    "RecipeExtractor",
    "RecipeSelection",
    "aggregate_ingredients",
    "build_grocery_list",
    "compute_recipe_multipliers",
    "guess_category",
    "parse_duration",
    "parse_grok_recipe",
    "parse_ingredient_line",
    "parse_recipe_from_html",
    "parse_recipe_from_url",
]
