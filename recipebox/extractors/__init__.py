"""Extractors package."""
from .recipe_extractor import RecipeExtractor, parse_recipe_from_html, parse_recipe_from_url
from .scraper import fetch_page_html, validate_url

__all__ = [
    "RecipeExtractor",
    "fetch_page_html",
    "parse_recipe_from_html",
    "parse_recipe_from_url",
    "validate_url",
]
