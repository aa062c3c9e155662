"""
Ingredient Aggregator.

Merges the ingredient lists of several recipes into one grocery list,
scaling each recipe by its serving multiplier and summing entries that
share a name and unit. Incompatible units are never summed; they are kept
under a separate "<name> (<unit>)" key instead.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..const import CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from ..models.recipe import AggregatedIngredient, Ingredient, RecipeSelection
from ..parsers.ingredient_parser import quantity_to_number

_LOGGER = logging.getLogger(__name__)


def guess_category(name: str) -> str:
    """Guess the grocery category of an ingredient from keywords in its name.

    Categories are tried in table order and the first keyword hit wins.
    """
    lower_name = name.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower_name for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def _units_compatible(existing_unit: str, unit: str) -> bool:
    return not existing_unit or not unit or existing_unit.lower() == unit.lower()


def _new_entry(ingredient: Ingredient, amount: float, title: str) -> AggregatedIngredient:
    return AggregatedIngredient(
        amount=amount,
        unit=ingredient.unit,
        category=ingredient.category or guess_category(ingredient.name),
        from_recipes=[title],
    )


def _merge(entry: AggregatedIngredient, amount: float, title: str) -> None:
    entry.amount += amount
    if title not in entry.from_recipes:
        entry.from_recipes.append(title)


def aggregate_ingredients(
    recipes: Iterable[RecipeSelection | Mapping[str, Any]],
) -> dict[str, AggregatedIngredient]:
    """Combine ingredients from multiple recipes.

    Args:
        recipes: Selected recipes with title, ingredients and an optional
            multiplier (missing or zero means 1)

    Returns:
        Insertion-ordered mapping from normalized ingredient name (suffixed
        with the unit on conflicts) to the combined entry
    """
    aggregated: dict[str, AggregatedIngredient] = {}

    for recipe in recipes:
        selection = recipe if isinstance(recipe, RecipeSelection) else RecipeSelection.model_validate(recipe)
        multiplier = selection.multiplier or 1

        for ingredient in selection.ingredients:
            key = ingredient.name.lower().strip()
            if not key:
                continue

            amount = quantity_to_number(ingredient.amount) * multiplier
            existing = aggregated.get(key)

            if existing is None:
                aggregated[key] = _new_entry(ingredient, amount, selection.title)
            elif _units_compatible(existing.unit, ingredient.unit):
                _merge(existing, amount, selection.title)
            else:
                alt_key = f"{key} ({ingredient.unit})"
                _LOGGER.debug("Unit conflict for '%s': %s vs %s, keeping '%s' separate",
                              key, existing.unit, ingredient.unit, alt_key)
                alternate = aggregated.get(alt_key)
                if alternate is not None and _units_compatible(alternate.unit, ingredient.unit):
                    _merge(alternate, amount, selection.title)
                else:
                    aggregated[alt_key] = _new_entry(ingredient, amount, selection.title)

    _LOGGER.debug("Aggregated ingredients into %d grocery entries", len(aggregated))
    return aggregated
