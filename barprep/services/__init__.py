"""
barprep Business Logic Services

Pure functions and in-memory services with no framework dependencies.
"""

from barprep.services.packing_engine import compute_packing_list
from barprep.services.recipe_parser import parse_recipe_file, parse_recipe_rows
from barprep.services.event_parser import parse_event_rows
from barprep.services.recipe_matcher import RecipeMatcher
from barprep.services.sheets_client import SheetsClient
from barprep.services.exporter import email_subject, event_brief_text, to_clipboard_tsv
from barprep.services.assistant import AssistantService, CommandError
from barprep.services.event_service import EventService

__all__ = [
    "compute_packing_list",
    "parse_recipe_file",
    "parse_recipe_rows",
    "parse_event_rows",
    "RecipeMatcher",
    "SheetsClient",
    "to_clipboard_tsv",
    "event_brief_text",
    "email_subject",
    "AssistantService",
    "CommandError",
    "EventService",
]
