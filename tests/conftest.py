"""Pytest configuration and fixtures."""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["DEBUG"] = "true"
os.environ["SHEETS_SPREADSHEET_ID"] = ""
os.environ["SHEETS_API_KEY"] = ""

from barprep.models.common import IngredientType  # noqa: E402
from barprep.models.recipes import CocktailRecipe, Ingredient  # noqa: E402


@pytest.fixture
def api_client() -> Generator[TestClient, None, None]:
    """Create a FastAPI test client with fresh in-memory state."""
    from api.dependencies import get_event_service, get_sheets_client
    from api.main import app

    get_sheets_client.cache_clear()
    get_event_service.cache_clear()

    with TestClient(app) as client:
        yield client


@pytest.fixture
def butterfly() -> CocktailRecipe:
    """The house signature cocktail."""
    return CocktailRecipe(
        id="the-butterfly",
        name="The Butterfly",
        english_description="Butterfly pea, lemon, Gin, Eggwhites",
        ingredients=[
            Ingredient(name="Gin", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=26),
            Ingredient(name="Butterfly Pea Syrup", type=IngredientType.SYRUP, quantity_per_drink=0.75, unit="oz", container_size=26),
            Ingredient(name="Lemon Juice", type=IngredientType.JUICE, quantity_per_drink=0.75, unit="oz", container_size=26),
            Ingredient(name="Eggwhite", type=IngredientType.JUICE, quantity_per_drink=1, unit="splash", container_size=8),
            Ingredient(name="Pea Flowers", type=IngredientType.GARNISH, quantity_per_drink=1, unit="garnish", container_size=26),
            Ingredient(name="Low Ball", type=IngredientType.GLASS, quantity_per_drink=1, unit="glass", container_size=26),
        ],
    )


@pytest.fixture
def margarita() -> CocktailRecipe:
    return CocktailRecipe(
        id="spicy-margarita",
        name="Spicy Margarita",
        ingredients=[
            Ingredient(name="Tequila", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=26),
            Ingredient(name="Lime Juice", type=IngredientType.JUICE, quantity_per_drink=1, unit="oz", container_size=26),
            Ingredient(name="Tajin", type=IngredientType.GARNISH, quantity_per_drink=1, unit="garnish"),
            Ingredient(name="Low Ball", type=IngredientType.GLASS, quantity_per_drink=1, unit="glass"),
        ],
    )


@pytest.fixture
def mojito() -> CocktailRecipe:
    return CocktailRecipe(
        id="classic-mojito",
        name="Classic Mojito",
        ingredients=[
            Ingredient(name="Rum", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=26),
            Ingredient(name="Lime Juice", type=IngredientType.JUICE, quantity_per_drink=0.75, unit="oz", container_size=26),
            Ingredient(name="Club Soda", type=IngredientType.SODA, quantity_per_drink=2, unit="oz", container_size=12),
            Ingredient(name="Highball", type=IngredientType.GLASS, quantity_per_drink=1, unit="glass"),
        ],
    )


@pytest.fixture
def catalog(butterfly, margarita, mojito) -> list:
    return [butterfly, margarita, mojito]

