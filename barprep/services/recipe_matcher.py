"""
Recipe Matcher

Looks up event cocktail selections in the recipe catalog. Lookup is an exact,
case-insensitive name match; fuzzy matching is only used to suggest the
closest catalog name when a selection is not found.
"""

import logging
from typing import Dict, Iterable, Optional

from rapidfuzz import fuzz, process

from barprep.models.recipes import CocktailRecipe

logger = logging.getLogger(__name__)


class RecipeMatcher:
    """Case-insensitive index over a recipe catalog."""

    def __init__(
        self,
        recipes: Iterable[CocktailRecipe],
        suggestion_threshold: float = 75.0,
    ):
        """
        Build the index.

        Args:
            recipes: Recipe catalog, in catalog order
            suggestion_threshold: Minimum rapidfuzz score (0-100) for a suggestion
        """
        self.suggestion_threshold = suggestion_threshold
        self._by_name: Dict[str, CocktailRecipe] = {}

        for recipe in recipes:
            key = recipe.name.lower()
            # First recipe wins when names collide
            if key not in self._by_name:
                self._by_name[key] = recipe

    def __len__(self) -> int:
        return len(self._by_name)

    def find(self, name: str) -> Optional[CocktailRecipe]:
        """Return the recipe with this name, ignoring case."""
        if not name:
            return None
        return self._by_name.get(name.lower())

    def suggest(self, name: str) -> Optional[str]:
        """Return the closest catalog name for an unmatched selection."""
        if not name or not self._by_name:
            return None

        match = process.extractOne(
            name.lower(),
            list(self._by_name.keys()),
            scorer=fuzz.WRatio,
            score_cutoff=self.suggestion_threshold,
        )
        if match is None:
            return None
        return self._by_name[match[0]].name
