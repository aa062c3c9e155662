"""
Bulk paste parser.

Splits pasted blocks of text (one ingredient or one step per line) into
structured ingredients and instruction steps.
"""
from __future__ import annotations

import logging
import re

from ..models.recipe import Ingredient
from .ingredient_parser import URL_INGREDIENT_PARSER, IngredientLineParser

_LOGGER = logging.getLogger(__name__)

_INGREDIENT_MARKER_RE = re.compile(r'^(?:[•\-*]+\s*|\d+[.)]\s+)')
_STEP_NUMBER_RE = re.compile(r'^(?:step\s*)?\d+[.):]\s*', re.IGNORECASE)
_BULLET_RE = re.compile(r'^[•\-*]\s*')


def parse_bulk_ingredients(
    text: str,
    smart: bool = True,
    parser: IngredientLineParser = URL_INGREDIENT_PARSER,
) -> list[Ingredient]:
    """Parse one ingredient per line.

    Args:
        text: Pasted ingredient block
        smart: Split amount/unit/name; when False the whole line is the name
        parser: Ingredient line parser used in smart mode

    Returns:
        List of ingredients, blank lines skipped
    """
    ingredients = []
    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if not smart:
            ingredients.append(Ingredient(name=line))
            continue

        ingredient = parser.parse(_INGREDIENT_MARKER_RE.sub('', line))
        if ingredient:
            ingredients.append(ingredient)
        else:
            _LOGGER.debug("Skipping unparseable ingredient line '%s'", line)

    return ingredients


def parse_bulk_instructions(text: str) -> list[str]:
    """Parse one instruction step per line, dropping '1.', 'Step 2:' and bullets."""
    steps = []
    for raw_line in (text or "").splitlines():
        step = _BULLET_RE.sub('', _STEP_NUMBER_RE.sub('', raw_line.strip()))
        if step:
            steps.append(step)
    return steps
