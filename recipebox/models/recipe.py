"""
Recipe data models for recipebox.

This module defines the Pydantic models shared by the extraction pipelines
(web page, chat export, bulk paste) and the grocery list aggregation.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..const import DEFAULT_SERVINGS


class Ingredient(BaseModel):
    """A structured representation of a single ingredient line.

    Attributes:
        amount: Display amount as written (e.g., '2', '1/2', '3-4', '~2')
        unit: Unit of measurement as written (e.g., 'cups', 'tbsp'), or ''
        name: The name of the ingredient (e.g., 'all-purpose flour')
        notes: Optional preparation notes (e.g., 'sifted', 'room temperature')
        category: Optional grocery category (e.g., 'Produce')
    """

    amount: str = Field(
        default="",
        description="The display amount, e.g., '1/2' or '3-4'"
    )
    unit: str = Field(
        default="",
        description="The unit of measurement, e.g., 'cups', 'g', 'cloves'"
    )
    name: str = Field(
        description="The name of the ingredient, e.g., 'all-purpose flour'"
    )
    notes: str | None = Field(
        default=None,
        description="Preparation notes, e.g., 'sifted'"
    )
    category: str | None = Field(
        default=None,
        description="Grocery category used when building shopping lists"
    )


class ParsedRecipe(BaseModel):
    """A recipe extracted from free text or a web page.

    Instances are frozen: callers decide whether and how to persist them.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="The title of the recipe")
    image_url: str | None = Field(default=None)
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    servings: int = Field(default=DEFAULT_SERVINGS)
    prep_time: int | None = Field(
        default=None,
        description="Preparation time in whole minutes"
    )
    cook_time: int | None = Field(
        default=None,
        description="Cooking time in whole minutes"
    )


class ImportedRecipe(ParsedRecipe):
    """A recipe imported from an AI chat markdown export."""

    source_url: str | None = Field(default=None)
    notes: str | None = Field(default=None)
    tags: list[str] = Field(default_factory=list)
    stars: int = Field(default=0)


class ImportResult(BaseModel):
    """Outcome of a markdown import: a recipe, or an error, plus warnings."""

    recipe: ImportedRecipe | None = None
    error: str | None = None
    warnings: list[str] | None = None

    @property
    def success(self) -> bool:
        return self.recipe is not None


class RecipeSelection(BaseModel):
    """A recipe chosen for a shopping list, scaled by a serving multiplier."""

    title: str
    ingredients: list[Ingredient] = Field(default_factory=list)
    multiplier: float | None = Field(default=1)


class AggregatedIngredient(BaseModel):
    """One combined grocery entry.

    Attributes:
        amount: Summed numeric amount, full precision
        unit: Unit shared by every contribution to this entry
        category: Grocery category
        from_recipes: Distinct titles of the recipes that contributed
    """

    amount: float = 0.0
    unit: str = ""
    category: str
    from_recipes: list[str] = Field(default_factory=list)


class PlannedMeal(BaseModel):
    """A meal plan slot, as needed for computing serving multipliers."""

    recipe_id: str
    recipe_servings: int = Field(default=DEFAULT_SERVINGS)
    servings_override: int | None = None


class GroceryItem(BaseModel):
    """A display-ready grocery list line."""

    key: str
    name: str
    amount: str
    unit: str
    category: str
    from_recipes: list[str] = Field(default_factory=list)
