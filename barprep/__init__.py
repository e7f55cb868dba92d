"""
barprep Core Package

Packing list calculation for cocktail catering events: recipe catalog,
event import, the packing engine, exports and assistant commands.
No framework dependencies (FastAPI) in this package.
"""

__version__ = "1.0.0"

from barprep.models.events import Event
from barprep.models.packing import PackingItem, PackingList
from barprep.models.recipes import CocktailRecipe, Ingredient
from barprep.services.packing_engine import compute_packing_list

__all__ = [
    "Event",
    "CocktailRecipe",
    "Ingredient",
    "PackingItem",
    "PackingList",
    "compute_packing_list",
]
