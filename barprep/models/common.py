"""Common types used across the event packing system."""

from enum import Enum


# ============================================================================
# Catalog Enums
# ============================================================================

class IngredientType(str, Enum):
    """Ingredient category. Declaration order is the packing list order."""
    ALCOHOL = "alcohol"
    SYRUP = "syrup"
    JUICE = "juice"
    GARNISH = "garnish"
    GLASS = "glass"
    SODA = "soda"
    OTHERS = "others"

    @classmethod
    def parse(cls, value) -> "IngredientType":
        """Parse free text from a sheet cell, defaulting to OTHERS."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return cls.OTHERS


# ============================================================================
# Event Enums
# ============================================================================

class EventType(str, Enum):
    """Provisioning strategy for an event."""
    BAR_SERVICE = "Bar Service"
    WORKSHOP = "Workshop"


class EventStatus(str, Enum):
    """Booking pipeline status."""
    INQUIRY = "Inquiry"
    PROPOSAL_SENT = "Proposal Sent"
    BOOKED = "Booked"
    READY_FOR_PREP = "Ready for Prep"
    COMPLETED = "Completed"
