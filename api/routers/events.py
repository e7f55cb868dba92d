"""
Event API Routes

Event state, assistant commands, and per-event packing lists.
"""

from datetime import date
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from api.dependencies import get_event_service
from api.middleware.errors import EventNotFoundError, ValidationError
from barprep.models.assistant import CommandResult
from barprep.models.events import Event
from barprep.models.packing import PackingList
from barprep.services import EventService
from barprep.services.exporter import email_subject, event_brief_text, to_clipboard_tsv

router = APIRouter()


class CommandRequest(BaseModel):
    """A function call issued by the assistant."""
    name: str = Field(..., description="Command name, e.g. updateHeadcount")
    args: Dict[str, Any] = Field(default_factory=dict)


class PackingListExport(BaseModel):
    """Copy/paste renderings of a packing list."""
    event_id: str
    tsv_text: str
    brief_text: str
    email_subject: str


# =============================================================================
# Events
# =============================================================================

@router.get("", response_model=List[Event])
def list_events(service: EventService = Depends(get_event_service)):
    """List events loaded from the booking sheet."""
    return service.list_events()


@router.get("/{event_id}", response_model=Event)
def get_event(event_id: str, service: EventService = Depends(get_event_service)):
    event = service.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    return event


@router.put("/{event_id}", response_model=Event)
def update_event(
    event_id: str,
    event: Event,
    service: EventService = Depends(get_event_service),
):
    """Replace an event with an edited snapshot."""
    if event.id != event_id:
        raise ValidationError(
            "Event id in body does not match URL",
            details={"url_id": event_id, "body_id": event.id},
        )
    if service.get_event(event_id) is None:
        raise EventNotFoundError(event_id)
    return service.save_event(event)


# =============================================================================
# Assistant
# =============================================================================

@router.post("/{event_id}/commands", response_model=CommandResult)
def run_command(
    event_id: str,
    request: CommandRequest,
    service: EventService = Depends(get_event_service),
):
    """
    Apply an assistant command to the event.

    Unknown commands and bad arguments return 400 COMMAND_ERROR.
    """
    result = service.run_command(event_id, request.name, request.args)
    if result is None:
        raise EventNotFoundError(event_id)
    return result


# =============================================================================
# Packing Lists
# =============================================================================

@router.get("/{event_id}/packing-list", response_model=PackingList)
def get_packing_list(event_id: str, service: EventService = Depends(get_event_service)):
    """Latest packing list for the event (generated on first request)."""
    packing_list = service.get_packing_list(event_id)
    if packing_list is None:
        raise EventNotFoundError(event_id)
    return packing_list


@router.post("/{event_id}/packing-list", response_model=PackingList)
def generate_packing_list(event_id: str, service: EventService = Depends(get_event_service)):
    """Recompute the packing list from the current event and catalog."""
    packing_list = service.generate_packing_list(event_id)
    if packing_list is None:
        raise EventNotFoundError(event_id)
    return packing_list


@router.get("/{event_id}/packing-list/export", response_model=PackingListExport)
def export_packing_list(event_id: str, service: EventService = Depends(get_event_service)):
    """
    Export the packing list for copy/paste.

    Returns tab-separated rows for spreadsheets and a plain-text brief for email.
    """
    event = service.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)

    packing_list = service.get_packing_list(event_id)
    return PackingListExport(
        event_id=event_id,
        tsv_text=to_clipboard_tsv(event, packing_list),
        brief_text=event_brief_text(event, packing_list),
        email_subject=email_subject(event, date.today()),
    )
