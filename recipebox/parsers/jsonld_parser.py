"""
JSON-LD Recipe Parser.

This module handles parsing of structured recipe data embedded in web pages
as schema.org JSON-LD, including Recipe objects nested inside arrays and
@graph collections.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any

from bs4 import BeautifulSoup

from ..const import DEFAULT_SERVINGS, UNTITLED_RECIPE
from ..models.recipe import ParsedRecipe
from .base_parser import BaseRecipeParser
from .duration_parser import parse_duration
from .ingredient_parser import URL_INGREDIENT_PARSER

_LOGGER = logging.getLogger(__name__)


def is_recipe(item: Any) -> bool:
    """Check if a JSON-LD item represents a Recipe."""
    if not isinstance(item, dict):
        return False

    item_type = item.get('@type')
    types = item_type if isinstance(item_type, list) else [item_type]
    return any(
        isinstance(t, str) and (t == 'Recipe' or t.endswith(('/Recipe', ':Recipe')))
        for t in types
    )


def find_recipe_node(data: Any) -> dict[str, Any] | None:
    """Depth-first search for the first Recipe object in decoded JSON-LD.

    The node itself is checked before its children, and children are
    visited in document order (arrays, @graph, nested object values).
    """
    if isinstance(data, dict):
        if is_recipe(data):
            return data
        children = data.values()
    elif isinstance(data, list):
        children = data
    else:
        return None

    for child in children:
        found = find_recipe_node(child)
        if found is not None:
            return found
    return None


class JSONLDRecipeParser(BaseRecipeParser):
    """Parses recipe data from schema.org JSON-LD script blocks.

    This parser reads pre-structured data and needs no heuristics beyond
    mapping schema.org fields onto ParsedRecipe.
    """

    def parse_document(self, soup: BeautifulSoup) -> ParsedRecipe | None:
        """Return the first Recipe found in the page's JSON-LD blocks.

        Args:
            soup: The parsed page

        Returns:
            ParsedRecipe, or None when no block holds a Recipe
        """
        json_lds = soup.find_all('script', type='application/ld+json')
        _LOGGER.debug("Found %d JSON-LD scripts", len(json_lds))

        for idx, json_ld in enumerate(json_lds):
            text = json_ld.string
            if not text or not text.strip():
                continue

            try:
                data = json.loads(text, strict=False)
            except json.JSONDecodeError as e:
                _LOGGER.debug("Failed to parse JSON-LD script %d: %s", idx, e)
                continue

            node = find_recipe_node(data)
            if node is not None:
                _LOGGER.debug("Found recipe data in JSON-LD script %d", idx)
                return self._build_recipe(node)

        return None

    def _build_recipe(self, node: dict[str, Any]) -> ParsedRecipe:
        ingredients = []
        for raw in _as_list(node.get('recipeIngredient')):
            if not isinstance(raw, str):
                continue
            ingredient = URL_INGREDIENT_PARSER.parse(raw)
            if ingredient:
                ingredients.append(ingredient)

        name = node.get('name')
        title = name.strip() if isinstance(name, str) and name.strip() else UNTITLED_RECIPE

        recipe = ParsedRecipe(
            title=title,
            image_url=_parse_image(node.get('image')),
            ingredients=ingredients,
            instructions=_parse_instructions(node.get('recipeInstructions')),
            servings=_parse_servings(node.get('recipeYield')),
            prep_time=parse_duration(node.get('prepTime')),
            cook_time=parse_duration(node.get('cookTime')),
        )
        _LOGGER.info("Parsed JSON-LD recipe '%s' with %d ingredients and %d steps",
                     recipe.title, len(recipe.ingredients), len(recipe.instructions))
        return recipe


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _parse_instructions(raw: Any) -> list[str]:
    """Normalize recipeInstructions into a list of step strings.

    Accepts a newline separated string, a list of strings, a list of
    HowToStep objects (their 'text'), and HowToSection objects whose
    itemListElement holds further steps.
    """
    if isinstance(raw, str):
        return [step.strip() for step in re.split(r'\n+', raw) if step.strip()]

    steps = []
    if not isinstance(raw, list):
        return steps

    for item in raw:
        if isinstance(item, str):
            if item.strip():
                steps.append(item.strip())
        elif isinstance(item, dict):
            if 'itemListElement' in item:
                steps.extend(_parse_instructions(_as_list(item['itemListElement'])))
            elif isinstance(item.get('text'), str) and item['text'].strip():
                steps.append(item['text'].strip())
    return steps


def _parse_image(image: Any) -> str | None:
    """Pick the image URL: a string, the first list entry, or an object's url."""
    if isinstance(image, list):
        image = image[0] if image else None
        if isinstance(image, list):
            return None

    if isinstance(image, str):
        return image.strip() or None
    if isinstance(image, dict):
        url = image.get('url')
        return url if isinstance(url, str) and url else None
    return None


def _parse_servings(recipe_yield: Any) -> int:
    """Read a serving count from recipeYield, defaulting to DEFAULT_SERVINGS."""
    if isinstance(recipe_yield, list):
        recipe_yield = recipe_yield[0] if recipe_yield else None

    servings = None
    if isinstance(recipe_yield, bool):
        servings = None
    elif isinstance(recipe_yield, (int, float)):
        servings = int(recipe_yield)
    elif isinstance(recipe_yield, str):
        match = re.search(r'\d+', recipe_yield)
        if match:
            servings = int(match.group())

    if not servings or servings <= 0:
        return DEFAULT_SERVINGS
    return servings
