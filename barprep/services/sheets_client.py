"""
Google Sheets Client

Reads the recipe and event tabs through the Sheets v4 values API.
Every failure path falls back to the bundled defaults so the app keeps
working offline or with a misconfigured sheet.
"""

import logging
from typing import List, Optional

import requests

from barprep.models.events import Event
from barprep.models.recipes import CocktailRecipe
from barprep.services.default_catalog import DEFAULT_RECIPES, INITIAL_EVENT
from barprep.services.event_parser import parse_event_rows
from barprep.services.recipe_parser import parse_recipe_rows

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets/{spreadsheet_id}/values/{range}"


class SheetsClient:
    """Read-only client for the catering spreadsheet."""

    def __init__(
        self,
        spreadsheet_id: Optional[str] = None,
        api_key: Optional[str] = None,
        recipes_tab: str = "Recipes",
        events_tab: str = "Active_Events",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.api_key = api_key
        self.recipes_tab = recipes_tab
        self.events_tab = events_tab
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self.spreadsheet_id and self.api_key)

    def fetch_values(self, sheet_range: str) -> List[List[str]]:
        """
        Fetch raw cell values for a range such as "Recipes!A2:H".

        Raises:
            requests.RequestException: On network or HTTP errors
            ValueError: If the response is not a values payload
        """
        url = SHEETS_API_URL.format(spreadsheet_id=self.spreadsheet_id, range=sheet_range)
        response = self.session.get(url, params={"key": self.api_key}, timeout=self.timeout)
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
        values = payload.get("values") or []
        if not isinstance(values, list):
            raise ValueError(f"expected a list of rows, got {type(values).__name__}")
        return [row if isinstance(row, list) else [row] for row in values]

    def fetch_recipes(self) -> List[CocktailRecipe]:
        """Load the recipe catalog, or the bundled catalog on any failure."""
        if not self.spreadsheet_id:
            logger.info("No spreadsheet ID configured. Using bundled recipes.")
            return list(DEFAULT_RECIPES)
        if not self.api_key:
            logger.warning("Sheets API key missing, skipping fetch. Using bundled recipes.")
            return list(DEFAULT_RECIPES)

        try:
            rows = self.fetch_values(f"{self.recipes_tab}!A2:H")
            recipes = parse_recipe_rows(rows)[0] if rows else []
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch recipes from Google Sheets: {e}. Using bundled recipes.")
            return list(DEFAULT_RECIPES)
        except ValueError as e:
            logger.error(f"Invalid response from Google Sheets: {e}. Using bundled recipes.")
            return list(DEFAULT_RECIPES)
        except Exception:
            logger.exception("Unexpected error loading recipes from Google Sheets. Using bundled recipes.")
            return list(DEFAULT_RECIPES)

        if not recipes:
            logger.info("No recipes found in sheet. Using bundled recipes.")
            return list(DEFAULT_RECIPES)

        logger.info(f"Loaded {len(recipes)} recipes from Google Sheets")
        return recipes

    def fetch_events(self) -> List[Event]:
        """Load booked events, or the sample event on any failure."""
        if not self.configured:
            logger.warning("Missing Sheets configuration, returning sample event.")
            return [INITIAL_EVENT]

        try:
            rows = self.fetch_values(f"{self.events_tab}!A2:Q")
            events = parse_event_rows(rows) if rows else []
        except requests.RequestException as e:
            logger.warning(f"Failed to fetch events from Google Sheets: {e}")
            return [INITIAL_EVENT]
        except ValueError as e:
            logger.error(f"Invalid response from Google Sheets: {e}")
            return [INITIAL_EVENT]
        except Exception:
            logger.exception("Unexpected error loading events from Google Sheets")
            return [INITIAL_EVENT]

        if not events:
            return [INITIAL_EVENT]

        return events
