"""
Grocery list building.

This module turns meal plans into per-recipe serving multipliers, and
aggregated ingredients into display-ready grocery items grouped by category.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..const import DEFAULT_CATEGORY, GROCERY_CATEGORIES
from ..models.recipe import AggregatedIngredient, GroceryItem, PlannedMeal

_LOGGER = logging.getLogger(__name__)


def format_quantity(quantity: float | int | None) -> str:
    """Render a summed grocery amount for display.

    Whole amounts print without decimals, others with at most two, and an
    amount that could not be read (0 or None) prints as an empty string.

    Examples:
        >>> format_quantity(5.5)
        '5.5'
        >>> format_quantity(3.0)
        '3'
        >>> format_quantity(0)
        ''
    """
    if not quantity or quantity < 0:
        return ""
    return f"{quantity:.2f}".rstrip('0').rstrip('.')


def compute_recipe_multipliers(
    planned_meals: Iterable[PlannedMeal | Mapping[str, Any]],
) -> dict[str, float]:
    """Sum serving multipliers per recipe across meal plan slots.

    Each slot contributes (servings_override or recipe_servings) / recipe_servings,
    so a recipe planned twice at its own size gets a multiplier of 2.

    Args:
        planned_meals: Meal plan slots

    Returns:
        Mapping of recipe id to total multiplier
    """
    multipliers: dict[str, float] = {}

    for meal in planned_meals:
        plan = meal if isinstance(meal, PlannedMeal) else PlannedMeal.model_validate(meal)

        if plan.recipe_servings <= 0:
            _LOGGER.warning(
                "Cannot scale recipe %s: servings not available or invalid", plan.recipe_id)
            plan_multiplier = 1.0
        else:
            servings = plan.servings_override or plan.recipe_servings
            plan_multiplier = servings / plan.recipe_servings

        multipliers[plan.recipe_id] = multipliers.get(plan.recipe_id, 0.0) + plan_multiplier
        _LOGGER.debug("Recipe %s multiplier now %.2f", plan.recipe_id, multipliers[plan.recipe_id])

    return multipliers


def build_grocery_list(
    aggregated: Mapping[str, AggregatedIngredient],
) -> dict[str, list[GroceryItem]]:
    """Group aggregated ingredients into display items by category.

    Categories follow GROCERY_CATEGORIES order, unknown categories are filed
    under "Other", and empty categories are left out.

    Args:
        aggregated: Output of aggregate_ingredients

    Returns:
        Ordered mapping of category to grocery items
    """
    groups: dict[str, list[GroceryItem]] = {category: [] for category in GROCERY_CATEGORIES}

    for key, entry in aggregated.items():
        category = entry.category if entry.category in groups else DEFAULT_CATEGORY
        groups[category].append(GroceryItem(
            key=key,
            name=key,
            amount=format_quantity(entry.amount),
            unit=entry.unit,
            category=category,
            from_recipes=list(entry.from_recipes),
        ))

    return {category: items for category, items in groups.items() if items}
