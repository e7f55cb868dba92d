"""
Packing List Data Models

Output of the packing calculation engine. Every IngredientType value is
always present as a key in PackingList.categories.
"""

from datetime import datetime, timezone
from typing import Dict, List

from pydantic import BaseModel, Field

from barprep.models.common import IngredientType


class PackingItem(BaseModel):
    """A single procurement line."""

    name: str
    quantity_needed_oz: float = 0.0
    containers_needed: int = Field(default=0, ge=0)
    unit: str = "unit"
    breakdown: str = ""


class PackingSummary(BaseModel):
    """Drink counts for the event."""

    total_drinks: int = 0
    drinks_per_cocktail: int = 0


def empty_categories() -> Dict[IngredientType, List[PackingItem]]:
    """A category map with every category present and empty."""
    return {category: [] for category in IngredientType}


class PackingList(BaseModel):
    """A complete packing list for one event."""

    event_id: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    summary: PackingSummary = Field(default_factory=PackingSummary)
    categories: Dict[IngredientType, List[PackingItem]] = Field(default_factory=empty_categories)

    @property
    def total_items(self) -> int:
        return sum(len(items) for items in self.categories.values())

    def find(self, name: str):
        """Find a line item by name (case-insensitive) in any category."""
        target = name.lower()
        for items in self.categories.values():
            for item in items:
                if item.name.lower() == target:
                    return item
        return None
