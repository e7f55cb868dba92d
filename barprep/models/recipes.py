"""
Recipe Catalog Data Models

A recipe is an ordered list of ingredient lines. Quantities are per drink,
container sizes are per purchasable unit (bottle, can, jar).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from barprep.models.common import IngredientType


class Ingredient(BaseModel):
    """A single recipe line."""

    name: str = Field(..., min_length=1)
    type: IngredientType = IngredientType.OTHERS
    quantity_per_drink: float = Field(default=0.0, ge=0)
    unit: str = Field(default="unit")

    # Volume (or count) per purchasable container; None means count-based
    container_size: Optional[float] = Field(default=None, gt=0)


class CocktailRecipe(BaseModel):
    """A cocktail on the menu."""

    id: str
    name: str
    english_description: str = ""
    method: str = ""
    ingredients: List[Ingredient] = Field(default_factory=list)
