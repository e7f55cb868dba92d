"""
Packing List Export

Text renderings of a packing list for copy/paste and email:
- Tab-separated rows that paste straight into Excel or Google Sheets
- A plain-text event brief used as the email body and print view
"""

from datetime import date
from typing import List, Optional

from barprep.models.common import EventType
from barprep.models.events import Event
from barprep.models.packing import PackingList
from barprep.services.packing_engine import format_quantity

TSV_HEADER = "Category\tItem Name\tUnits Needed\tUnit Type\tTotal Quantity\tMeasure"


def to_clipboard_tsv(event: Event, packing_list: PackingList) -> str:
    """Render the packing list as tab-separated rows with an event header."""
    lines = [
        f"EVENT: {event.client_name}\tPHONE: {event.client_phone or 'N/A'}\t"
        f"PAID: {'YES' if event.is_paid else 'NO'}\tDATE: {_event_day(event)}",
        "",
        TSV_HEADER,
    ]

    for category, items in packing_list.categories.items():
        for item in items:
            unit_type = "units" if item.containers_needed > 1 else "unit"
            lines.append(
                f"{category.value.upper()}\t{item.name}\t{item.containers_needed}\t"
                f"{unit_type}\t{format_quantity(item.quantity_needed_oz)}\t{item.unit}"
            )

    return "\n".join(lines) + "\n"


def event_brief_text(event: Event, packing_list: Optional[PackingList] = None) -> str:
    """Plain-text event brief with the packing list appended when available."""
    lines = [
        f"EVENT BRIEF - {event.client_name}",
        "",
        f"Type: {event.event_type.value}",
        f"Date: {_event_day(event)} ({_clock(event.event_date)} - {_clock(event.end_time)})",
        f"Location: {event.location}",
        f"Guests: {event.headcount}",
        f"Phone: {event.client_phone or 'N/A'}",
        f"Paid: {'YES' if event.is_paid else 'NO'}",
        f"Lead Bartender: {event.bartender.name}",
        "",
        f"Selected Cocktails: {', '.join(event.cocktail_selections) or 'None'}",
        f"Bar Rental: {_bar_rental_text(event)}",
        f"Glassware: {_glass_rental_text(event)}",
    ]

    if event.client_supplies_alcohol:
        lines.append("Alcohol: supplied by client")

    if packing_list is not None:
        lines.extend(["", "PACKING LIST"])
        if event.event_type == EventType.BAR_SERVICE:
            lines.append(
                f"Total drinks: {packing_list.summary.total_drinks} "
                f"({packing_list.summary.drinks_per_cocktail} per cocktail)"
            )
        for category, items in packing_list.categories.items():
            if not items:
                continue
            lines.append("")
            lines.append(category.value.upper())
            for item in items:
                lines.append(f"  [ ] {item.name}: {item.containers_needed} x {item.unit}")

    return "\n".join(lines)


def email_subject(event: Event, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"Packing List - {event.client_name} - {today.isoformat()}"


def _event_day(event: Event) -> str:
    if not event.event_date:
        return "TBD"
    return event.event_date.split("T")[0]


def _clock(value: Optional[str]) -> str:
    if not value or "T" not in value:
        return "TBD"
    return value.split("T")[1][:5]


def _bar_rental_text(event: Event) -> str:
    rental = event.bar_rental
    if not rental.required:
        return "None"
    details: List[str] = [d for d in (rental.size, rental.color) if d]
    return ", ".join(details) or "Yes"


def _glass_rental_text(event: Event) -> str:
    rental = event.glass_rental
    if not rental.required:
        return "Plastic cups"
    if not rental.items:
        return "Rental (types TBD)"
    return ", ".join(f"{g.type} x{g.quantity}" for g in rental.items)
