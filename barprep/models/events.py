"""
Event Data Models

A booked event as supplied by the event dashboard or the sheet importer.
Only event_type, headcount, cocktail_selections, client_supplies_alcohol and
the rental flags feed the packing calculation; the rest is display data.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from barprep.models.common import EventStatus, EventType

logger = logging.getLogger(__name__)


class Bartender(BaseModel):
    """Lead bartender assigned to the event."""
    name: str = "TBD"
    email: str = ""


class BarRental(BaseModel):
    """Mobile bar rental."""
    required: bool = False
    size: Optional[str] = None
    color: Optional[str] = None


class GlassItem(BaseModel):
    """A rented glass type."""
    type: str
    quantity: int = Field(default=0, ge=0)


class GlassRental(BaseModel):
    """Glassware rental. When not required, plastic cups are packed instead."""
    required: bool = False
    items: List[GlassItem] = Field(default_factory=list)


class Event(BaseModel):
    """A booked event."""

    id: str
    event_type: EventType = EventType.BAR_SERVICE
    headcount: int = Field(default=0, ge=0)
    cocktail_selections: List[str] = Field(default_factory=list)
    client_supplies_alcohol: bool = False

    bar_rental: BarRental = Field(default_factory=BarRental)
    glass_rental: GlassRental = Field(default_factory=GlassRental)

    # Client / logistics
    client_name: str = "Unknown Client"
    client_phone: str = ""
    is_paid: bool = False
    event_date: Optional[str] = None
    end_time: Optional[str] = None
    location: str = "TBD"
    status: EventStatus = EventStatus.INQUIRY
    bartender: Bartender = Field(default_factory=Bartender)

    @field_validator("event_type", mode="before")
    @classmethod
    def _default_unknown_event_type(cls, value):
        # Anything that isn't a known type is provisioned as bar service
        if isinstance(value, EventType):
            return value
        for member in EventType:
            if str(value).strip().lower() == member.value.lower():
                return member
        logger.warning(f"Unknown event type {value!r}, using {EventType.BAR_SERVICE.value}")
        return EventType.BAR_SERVICE
