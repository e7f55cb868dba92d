"""
Event Service

Holds the working set of events and the recipe catalog for one process.
Events are replaced, never edited in place: every change stores a new
snapshot. Nothing is persisted.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from barprep.models.assistant import CommandName, CommandResult
from barprep.models.events import Event
from barprep.models.packing import PackingList
from barprep.models.recipes import CocktailRecipe
from barprep.services.assistant import AssistantService
from barprep.services.packing_engine import compute_packing_list
from barprep.services.sheets_client import SheetsClient

logger = logging.getLogger(__name__)


class EventService:
    """Service for event state, assistant commands and packing lists."""

    def __init__(self, sheets: SheetsClient):
        self.sheets = sheets
        self.assistant = AssistantService(recipes=[])
        self._events: Dict[str, Event] = {}
        self._packing_lists: Dict[str, PackingList] = {}
        self._loaded = False
        self._lock = threading.RLock()

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self) -> None:
        """Load recipes and events from the sheet (or bundled defaults)."""
        with self._lock:
            self.reload_recipes()
            self._events = {event.id: event for event in self.sheets.fetch_events()}
            self._packing_lists = {}
            self._loaded = True
        logger.info(f"Loaded {len(self._events)} events and {len(self.recipes)} recipes")

    def _ensure_loaded(self) -> None:
        with self._lock:
            if not self._loaded:
                self.load()

    def reload_recipes(self) -> List[CocktailRecipe]:
        self.assistant.recipes = self.sheets.fetch_recipes()
        self._packing_lists = {}
        return self.recipes

    # =========================================================================
    # Recipes
    # =========================================================================

    @property
    def recipes(self) -> List[CocktailRecipe]:
        return self.assistant.recipes

    def list_recipes(self) -> List[CocktailRecipe]:
        self._ensure_loaded()
        return list(self.recipes)

    def add_recipe(self, recipe: CocktailRecipe) -> CocktailRecipe:
        """Add a recipe to the catalog; cached packing lists are dropped."""
        self._ensure_loaded()
        self.assistant.add_recipe(recipe)
        self._packing_lists = {}
        return recipe

    # =========================================================================
    # Events
    # =========================================================================

    def list_events(self) -> List[Event]:
        self._ensure_loaded()
        return list(self._events.values())

    def get_event(self, event_id: str) -> Optional[Event]:
        self._ensure_loaded()
        return self._events.get(event_id)

    def save_event(self, event: Event) -> Event:
        """Store a new snapshot of an event; its cached packing list is dropped."""
        self._ensure_loaded()
        self._events[event.id] = event
        self._packing_lists.pop(event.id, None)
        return event

    # =========================================================================
    # Packing Lists
    # =========================================================================

    def generate_packing_list(self, event_id: str) -> Optional[PackingList]:
        event = self.get_event(event_id)
        if event is None:
            return None
        packing_list = compute_packing_list(event, self.recipes)
        self._packing_lists[event_id] = packing_list
        return packing_list

    def get_packing_list(self, event_id: str) -> Optional[PackingList]:
        """Last generated list for the event, generating one if needed."""
        self._ensure_loaded()
        if event_id in self._packing_lists:
            return self._packing_lists[event_id]
        return self.generate_packing_list(event_id)

    # =========================================================================
    # Assistant
    # =========================================================================

    def run_command(
        self,
        event_id: str,
        name: str,
        args: Optional[Dict[str, Any]] = None,
    ) -> Optional[CommandResult]:
        """
        Run an assistant command against a stored event.

        Returns None if the event does not exist.

        Raises:
            CommandError: If the command is unknown or its arguments are invalid
        """
        event = self.get_event(event_id)
        if event is None:
            return None

        result = self.assistant.execute(event, name, args)

        if result.command == CommandName.ADD_RECIPE:
            self._packing_lists = {}
        elif result.packing_list is not None:
            self._packing_lists[event_id] = result.packing_list
        elif result.command != CommandName.SEND_EMAIL:
            self.save_event(result.event)

        return result
