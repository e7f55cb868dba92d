"""
Assistant Command Models

Structured commands issued by the conversational layer. The set of command
names is fixed; argument names match the tool schema exposed to the model.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from barprep.models.events import Event
from barprep.models.packing import PackingList


class CommandName(str, Enum):
    """Commands the assistant may issue."""
    UPDATE_HEADCOUNT = "updateHeadcount"
    GENERATE_PACKING_LIST = "generatePackingList"
    ADD_RECIPE = "addRecipe"
    UPDATE_EVENT_COCKTAILS = "updateEventCocktails"
    UPDATE_EVENT_DETAILS = "updateEventDetails"
    UPDATE_RENTAL_ITEMS = "updateRentalItems"
    SEND_EMAIL = "sendEmail"


class AssistantCommand(BaseModel):
    """A single function call from the assistant."""

    name: CommandName
    args: Dict[str, Any] = Field(default_factory=dict)


class EmailDraft(BaseModel):
    """Email ready to hand to the user's mail client."""

    recipient_email: str = ""
    subject: str
    body: str


class CommandResult(BaseModel):
    """Outcome of a dispatched command."""

    command: CommandName
    message: str
    event: Event
    packing_list: Optional[PackingList] = None
    email: Optional[EmailDraft] = None
