"""
API Dependencies

Dependency injection for services.
"""

from functools import lru_cache

from api.config import get_settings
from barprep.services import EventService, SheetsClient


@lru_cache()
def get_sheets_client() -> SheetsClient:
    """Get singleton Google Sheets client."""
    settings = get_settings()
    return SheetsClient(
        spreadsheet_id=settings.sheets_spreadsheet_id,
        api_key=settings.sheets_api_key,
        recipes_tab=settings.sheets_recipes_tab,
        events_tab=settings.sheets_events_tab,
        timeout=settings.sheets_timeout_seconds,
    )


@lru_cache()
def get_event_service() -> EventService:
    """Get singleton event service."""
    return EventService(sheets=get_sheets_client())
