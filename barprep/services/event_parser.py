"""
Event Sheet Parser

Maps rows of the "Active_Events" tab (fed by the booking system) to Event
models.

Column mapping:
    A: Client Name      G: Headcount         M: Bar Rental (Yes/No/Details)
    B: Phone            H: Cocktails         N: Bar Size
    C: Email            I: Type              O: Bar Color
    D: Date             J: Paid              P: Glass Rental (Yes/No)
    E: Time (18-23)     K: Lead Bartender    Q: Glass Types
    F: Location         L: Bartender Email
"""

import logging
import re
from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

from barprep.models.common import EventStatus, EventType
from barprep.models.events import Bartender, BarRental, Event, GlassItem, GlassRental

logger = logging.getLogger(__name__)

DEFAULT_START = "18:00"
DEFAULT_END = "23:00"
DEFAULT_BAR_SIZE = "6ft Mobile"
DEFAULT_BAR_COLOR = "Standard"
DEFAULT_GLASS_TYPE = "Standard Mix"


def parse_event_rows(
    rows: Sequence[Sequence[Any]],
    today: Optional[date] = None,
) -> List[Event]:
    """
    Parse sheet rows into events.

    Args:
        rows: Data rows (header row already removed)
        today: Date used when a row has no date (defaults to today)

    Returns:
        One Event per row, id "evt-sheet-<row index>"
    """
    today = today or date.today()
    events = [_parse_row(index, row, today) for index, row in enumerate(rows)]
    logger.info(f"Parsed {len(events)} events from sheet")
    return events


def _parse_row(index: int, row: Sequence[Any], today: date) -> Event:
    start_iso, end_iso = _parse_schedule(_cell(row, 3), _cell(row, 4), today)

    bar_text = _cell(row, 12).lower()
    bar_required = "yes" in bar_text or len(bar_text) > 3
    glass_required = "yes" in _cell(row, 15).lower()

    glass_types = _cell(row, 16)
    if glass_types:
        glass_items = [GlassItem(type=g.strip(), quantity=0) for g in glass_types.split(",") if g.strip()]
    elif glass_required:
        glass_items = [GlassItem(type=DEFAULT_GLASS_TYPE, quantity=0)]
    else:
        glass_items = []

    cocktails = _cell(row, 7)
    is_workshop = "workshop" in _cell(row, 8).lower()

    return Event(
        id=f"evt-sheet-{index}",
        client_name=_cell(row, 0) or "Unknown Client",
        client_phone=_cell(row, 1),
        event_date=start_iso,
        end_time=end_iso,
        location=_cell(row, 5) or "TBD",
        headcount=_parse_headcount(_cell(row, 6)),
        cocktail_selections=[c.strip() for c in cocktails.split(",") if c.strip()],
        event_type=EventType.WORKSHOP if is_workshop else EventType.BAR_SERVICE,
        is_paid="yes" in _cell(row, 9).lower(),
        status=EventStatus.BOOKED,
        bartender=Bartender(name=_cell(row, 10) or "TBD", email=_cell(row, 11)),
        bar_rental=BarRental(
            required=bar_required,
            size=_cell(row, 13) or (DEFAULT_BAR_SIZE if bar_required else ""),
            color=_cell(row, 14) or (DEFAULT_BAR_COLOR if bar_required else ""),
        ),
        glass_rental=GlassRental(required=glass_required, items=glass_items),
        client_supplies_alcohol=False,
    )


def _parse_schedule(date_text: str, time_text: str, today: date) -> Tuple[str, str]:
    """Build start/end ISO strings from a date cell and a "18:00 - 23:00" cell."""
    date_text = date_text or today.isoformat()

    if "T" in date_text:
        day = date_text.split("T")[0]
        return f"{day}T{DEFAULT_START}:00", f"{day}T{DEFAULT_END}:00"

    times = [t.strip() for t in (time_text or DEFAULT_START).split("-")]
    start = times[0] if times and times[0] else DEFAULT_START
    end = times[1] if len(times) > 1 and times[1] else DEFAULT_END

    return f"{date_text}T{_as_clock(start)}", f"{date_text}T{_as_clock(end)}"


def _as_clock(text: str) -> str:
    return text if ":" in text else f"{text}:00"


def _parse_headcount(text: str) -> int:
    match = re.match(r"^\s*\+?(\d+)", text or "")
    if not match:
        if text:
            logger.warning(f"Unreadable headcount {text!r}, using 0")
        return 0
    return int(match.group(1))


def _cell(row: Sequence[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()
