"""Data models for barprep."""

from barprep.models.assistant import AssistantCommand, CommandName, CommandResult, EmailDraft
from barprep.models.common import EventStatus, EventType, IngredientType
from barprep.models.events import Bartender, BarRental, Event, GlassItem, GlassRental
from barprep.models.packing import PackingItem, PackingList, PackingSummary, empty_categories
from barprep.models.recipes import CocktailRecipe, Ingredient

__all__ = [
    # Common
    "IngredientType",
    "EventType",
    "EventStatus",
    # Recipes
    "Ingredient",
    "CocktailRecipe",
    # Events
    "Event",
    "Bartender",
    "BarRental",
    "GlassRental",
    "GlassItem",
    # Packing
    "PackingItem",
    "PackingList",
    "PackingSummary",
    "empty_categories",
    # Assistant
    "AssistantCommand",
    "CommandName",
    "CommandResult",
    "EmailDraft",
]
