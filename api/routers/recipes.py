"""
Recipe catalog endpoints.

Handlers are plain functions: loading and reloading the catalog calls
Google Sheets synchronously, so FastAPI runs them in its threadpool.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from api.dependencies import get_event_service
from barprep.models.recipes import CocktailRecipe, Ingredient
from barprep.services import EventService
from barprep.services.recipe_parser import recipe_id

router = APIRouter()


class RecipeCreate(BaseModel):
    """New recipe from the menu builder."""
    name: str = Field(..., min_length=1)
    english_description: str = ""
    method: str = ""
    ingredients: List[Ingredient] = Field(default_factory=list)


@router.get("", response_model=List[CocktailRecipe])
def list_recipes(service: EventService = Depends(get_event_service)):
    """List the recipe catalog in catalog order."""
    return service.list_recipes()


@router.post("", response_model=CocktailRecipe, status_code=status.HTTP_201_CREATED)
def add_recipe(
    request: RecipeCreate,
    service: EventService = Depends(get_event_service),
):
    """Add a recipe to the in-session catalog."""
    name = request.name.strip()
    recipe = CocktailRecipe(
        id=recipe_id(name),
        name=name,
        english_description=request.english_description,
        method=request.method,
        ingredients=request.ingredients,
    )
    return service.add_recipe(recipe)


@router.post("/reload", response_model=List[CocktailRecipe])
def reload_recipes(service: EventService = Depends(get_event_service)):
    """Re-fetch the catalog from Google Sheets (or the bundled defaults)."""
    return service.reload_recipes()
