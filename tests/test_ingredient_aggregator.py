"""
Tests for combining recipe ingredients into grocery entries.
"""

import pytest

from recipebox.models.recipe import Ingredient, RecipeSelection
from recipebox.services.ingredient_aggregator import aggregate_ingredients, guess_category


class TestAggregateIngredients:

    def test_scales_and_merges_by_name(self, selections):
        aggregated = aggregate_ingredients(selections)

        assert list(aggregated) == ["flour", "egg", "flour (g)"]

        flour = aggregated["flour"]
        assert flour.amount == pytest.approx(5.5)
        assert flour.unit == "cups"
        assert flour.category == "Pantry"
        assert flour.from_recipes == ["Pancakes", "Bread"]

        egg = aggregated["egg"]
        assert egg.amount == 2
        assert egg.category == "Dairy & Eggs"
        assert egg.from_recipes == ["Pancakes"]

    def test_unit_conflict_goes_to_alternate_key(self, selections):
        grams = aggregate_ingredients(selections)["flour (g)"]

        assert grams.amount == 300
        assert grams.unit == "g"
        assert grams.from_recipes == ["Bread"]

    def test_units_compared_case_insensitively(self):
        aggregated = aggregate_ingredients([
            RecipeSelection(title="A", ingredients=[Ingredient(amount="1", unit="Cups", name="rice")]),
            RecipeSelection(title="B", ingredients=[Ingredient(amount="2", unit="cups", name="Rice")]),
        ])
        assert list(aggregated) == ["rice"]
        assert aggregated["rice"].amount == 3

    @pytest.mark.parametrize("multiplier", [None, 0])
    def test_missing_multiplier_counts_as_one(self, multiplier):
        aggregated = aggregate_ingredients([
            {"title": "Soup", "multiplier": multiplier,
             "ingredients": [{"amount": "2", "unit": "cups", "name": "broth"}]},
        ])
        assert aggregated["broth"].amount == 2

    def test_unreadable_amount_counts_as_zero(self):
        aggregated = aggregate_ingredients([
            {"title": "Soup", "ingredients": [{"amount": "a pinch", "name": "salt"}]},
        ])
        assert aggregated["salt"].amount == 0
        assert aggregated["salt"].category == "Spices & Seasonings"

    def test_same_recipe_listed_once(self):
        aggregated = aggregate_ingredients([
            {"title": "Salad", "ingredients": [
                {"amount": "1", "name": "tomato"},
                {"amount": "2", "name": "Tomato"},
            ]},
        ])
        assert aggregated["tomato"].amount == 3
        assert aggregated["tomato"].from_recipes == ["Salad"]

    def test_explicit_category_is_kept(self):
        aggregated = aggregate_ingredients([
            {"title": "Dessert", "ingredients": [
                {"amount": "1", "unit": "pint", "name": "ice cream", "category": "Frozen"},
            ]},
        ])
        assert aggregated["ice cream"].category == "Frozen"

    def test_empty_input(self):
        assert aggregate_ingredients([]) == {}


@pytest.mark.parametrize("name, expected", [
    ("Red Onion", "Produce"),
    ("black pepper", "Produce"),
    ("whole milk", "Dairy & Eggs"),
    ("chicken thighs", "Meat & Seafood"),
    ("sourdough bread", "Bakery"),
    ("all-purpose flour", "Pantry"),
    ("cumin", "Spices & Seasonings"),
    ("frozen peas", "Frozen"),
    ("ketchup", "Condiments"),
    ("paper towels", "Other"),
])
def test_guess_category(name, expected):
    assert guess_category(name) == expected


class TestRepeatedRecipes:

    def test_same_title_twice_sums_once_listed(self):
        entry = {"title": "A", "ingredients": [{"amount": "1", "unit": "cup", "name": "flour"}]}

        aggregated = aggregate_ingredients([entry, dict(entry)])

        assert aggregated["flour"].amount == 2
        assert aggregated["flour"].from_recipes == ["A"]

    def test_doubled_single_recipe(self):
        aggregated = aggregate_ingredients([
            {"title": "A", "multiplier": 2,
             "ingredients": [{"amount": "1", "unit": "cup", "name": "flour"}]},
        ])

        assert aggregated["flour"].amount == 2
        assert aggregated["flour"].unit == "cup"
        assert aggregated["flour"].from_recipes == ["A"]
