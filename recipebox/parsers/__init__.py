"""Parsers package."""
from .bulk_parser import parse_bulk_ingredients, parse_bulk_instructions
from .duration_parser import parse_duration
from .html_parser import HTMLFallbackParser
from .ingredient_parser import (
    MARKDOWN_INGREDIENT_PARSER,
    URL_INGREDIENT_PARSER,
    IngredientLineParser,
    parse_ingredient_line,
    parse_quantity,
    quantity_to_number,
)
from .jsonld_parser import JSONLDRecipeParser, find_recipe_node
from .markdown_parser import MarkdownRecipeParser, parse_grok_recipe

__all__ = [
    "HTMLFallbackParser",
    "IngredientLineParser",
    "JSONLDRecipeParser",
    "MARKDOWN_INGREDIENT_PARSER",
    "MarkdownRecipeParser",
    "URL_INGREDIENT_PARSER",
    "find_recipe_node",
    "parse_bulk_ingredients",
    "parse_bulk_instructions",
    "parse_duration",
    "parse_grok_recipe",
    "parse_ingredient_line",
    "parse_quantity",
    "quantity_to_number",
]
