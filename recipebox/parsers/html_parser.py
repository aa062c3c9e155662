"""
Heuristic HTML Recipe Parser.

Fallback for pages without JSON-LD: looks for conventionally named markup
(ingredient and instruction lists, recipe headings, hero images). Low
precision by nature, it always returns a result, possibly empty.
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from ..const import MAX_TITLE_LENGTH, UNTITLED_RECIPE
from ..models.recipe import ParsedRecipe
from .base_parser import BaseRecipeParser
from .ingredient_parser import URL_INGREDIENT_PARSER

_LOGGER = logging.getLogger(__name__)

# Ordered selector tables, first hit wins
TITLE_SELECTORS = (
    ('h1[class*="recipe"]', None),
    ('h1[class*="title"]', None),
    ('h1', None),
    ('meta[property="og:title"]', 'content'),
    ('title', None),
)

IMAGE_SELECTORS = (
    ('meta[property="og:image"]', 'content'),
    ('img[class*="recipe"]', 'src'),
    ('img[class*="recipe"]', 'data-src'),
)

INGREDIENT_SELECTOR = '[class*="ingredient"] li'

INSTRUCTION_SELECTOR = ', '.join((
    '[class*="instruction"] li',
    '[class*="direction"] li',
    '[class*="step"] li',
    '[class*="step"] p',
))


def _element_text(element: Tag) -> str:
    return ' '.join(element.get_text(' ', strip=True).split())


def _first_value(soup: BeautifulSoup, selectors: tuple[tuple[str, str | None], ...]) -> str | None:
    """Return the first non-empty text or attribute matched by the selector table."""
    for selector, attribute in selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        if attribute:
            value = element.get(attribute)
            value = value.strip() if isinstance(value, str) else None
        else:
            value = _element_text(element)
        if value:
            return value
    return None


def _outermost(elements: list[Tag]) -> list[Tag]:
    """Drop matches nested inside an earlier match, such as a <p> within a step <li>."""
    kept: list[Tag] = []
    seen: set[int] = set()
    for element in elements:
        if any(id(parent) in seen for parent in element.parents):
            continue
        seen.add(id(element))
        kept.append(element)
    return kept


class HTMLFallbackParser(BaseRecipeParser):
    """Scrapes recipe sections from plain markup using class name heuristics.

    Servings and times are not attempted; they keep their defaults.
    """

    def parse_document(self, soup: BeautifulSoup) -> ParsedRecipe:
        title = _first_value(soup, TITLE_SELECTORS) or UNTITLED_RECIPE
        image_url = _first_value(soup, IMAGE_SELECTORS)

        ingredients = []
        for element in soup.select(INGREDIENT_SELECTOR):
            text = _element_text(element)
            if not text:
                continue
            ingredient = URL_INGREDIENT_PARSER.parse(text)
            if ingredient:
                ingredients.append(ingredient)

        instructions = [
            text for text in (_element_text(el) for el in _outermost(soup.select(INSTRUCTION_SELECTOR)))
            if text
        ]

        _LOGGER.info("Fallback HTML parsing found %d ingredients and %d steps",
                     len(ingredients), len(instructions))

        return ParsedRecipe(
            title=title[:MAX_TITLE_LENGTH],
            image_url=image_url,
            ingredients=ingredients,
            instructions=instructions,
        )
