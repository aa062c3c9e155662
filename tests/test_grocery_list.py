"""
Tests for meal plan multipliers and grocery list grouping.
"""

import pytest

from recipebox.models.recipe import AggregatedIngredient, PlannedMeal
from recipebox.services.grocery_list import (
    build_grocery_list,
    compute_recipe_multipliers,
    format_quantity,
)
from recipebox.services.ingredient_aggregator import aggregate_ingredients


@pytest.mark.parametrize("quantity, expected", [
    (2.0, "2"),
    (2, "2"),
    (2.5, "2.5"),
    (1 / 3, "0.33"),
    (5.5, "5.5"),
    (10, "10"),
    (12.0, "12"),
    (0, ""),
    (-1, ""),
    (None, ""),
])
def test_format_quantity(quantity, expected):
    assert format_quantity(quantity) == expected


class TestComputeRecipeMultipliers:

    def test_sums_slots_per_recipe(self):
        multipliers = compute_recipe_multipliers([
            {"recipe_id": "tacos", "recipe_servings": 4},
            {"recipe_id": "tacos", "recipe_servings": 4, "servings_override": 2},
            PlannedMeal(recipe_id="curry", recipe_servings=2, servings_override=6),
        ])
        assert multipliers == {"tacos": 1.5, "curry": 3.0}

    def test_invalid_servings_count_as_one(self):
        assert compute_recipe_multipliers([{"recipe_id": "mystery", "recipe_servings": 0}]) == {"mystery": 1.0}

    def test_empty_plan(self):
        assert compute_recipe_multipliers([]) == {}


class TestBuildGroceryList:

    def test_groups_in_category_order(self, selections):
        grocery_list = build_grocery_list(aggregate_ingredients(selections))

        assert list(grocery_list) == ["Dairy & Eggs", "Pantry"]
        assert [item.key for item in grocery_list["Pantry"]] == ["flour", "flour (g)"]

        flour = grocery_list["Pantry"][0]
        assert flour.name == "flour"
        assert flour.amount == "5.5"
        assert flour.unit == "cups"
        assert flour.category == "Pantry"
        assert flour.from_recipes == ["Pancakes", "Bread"]

    def test_unknown_category_goes_to_other(self):
        grocery_list = build_grocery_list({
            "pretzels": AggregatedIngredient(amount=1, category="Snacks"),
        })
        assert list(grocery_list) == ["Other"]
        assert grocery_list["Other"][0].category == "Other"

    def test_zero_amount_shows_blank(self):
        grocery_list = build_grocery_list({
            "salt": AggregatedIngredient(amount=0, category="Spices & Seasonings"),
        })
        assert grocery_list["Spices & Seasonings"][0].amount == ""

    def test_empty(self):
        assert build_grocery_list({}) == {}
