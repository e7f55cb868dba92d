"""
Assistant Command Service

Applies the fixed set of assistant commands to an event. Commands never
mutate the event they are given: each returns a new Event snapshot, and
generatePackingList is the only command that runs the packing engine.
"""

import logging
import math
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import ValidationError

from barprep.models.assistant import AssistantCommand, CommandName, CommandResult, EmailDraft
from barprep.models.common import EventStatus, IngredientType
from barprep.models.events import Event, GlassItem
from barprep.models.recipes import CocktailRecipe, Ingredient
from barprep.services.exporter import email_subject, event_brief_text
from barprep.services.packing_engine import compute_packing_list
from barprep.services.recipe_matcher import RecipeMatcher
from barprep.services.recipe_parser import recipe_id

logger = logging.getLogger(__name__)

DETAIL_FIELDS = {
    "location": "location",
    "clientName": "client_name",
    "clientPhone": "client_phone",
    "eventDate": "event_date",
    "endTime": "end_time",
}

BAR_SIZE_KEYWORDS = ("ft", "mobile")


class CommandError(ValueError):
    """A command could not be applied (unknown command or bad arguments)."""


class AssistantService:
    """Dispatches assistant commands against an in-session recipe catalog."""

    def __init__(self, recipes: Sequence[CocktailRecipe]):
        self.recipes: List[CocktailRecipe] = list(recipes)
        self._handlers: Dict[CommandName, Callable[[Event, Dict[str, Any]], CommandResult]] = {
            CommandName.UPDATE_HEADCOUNT: self._update_headcount,
            CommandName.GENERATE_PACKING_LIST: self._generate_packing_list,
            CommandName.ADD_RECIPE: self._add_recipe,
            CommandName.UPDATE_EVENT_COCKTAILS: self._update_cocktails,
            CommandName.UPDATE_EVENT_DETAILS: self._update_details,
            CommandName.UPDATE_RENTAL_ITEMS: self._update_rental,
            CommandName.SEND_EMAIL: self._send_email,
        }

    def dispatch(self, event: Event, command: AssistantCommand) -> CommandResult:
        """
        Apply a command to an event.

        Raises:
            CommandError: If the command is unknown or its arguments are invalid
        """
        handler = self._handlers.get(command.name)
        if handler is None:
            raise CommandError(f"Unknown command: {command.name}")

        logger.info(f"Assistant command {command.name.value} on event {event.id}")
        return handler(event, command.args)

    def execute(self, event: Event, name: str, args: Optional[Dict[str, Any]] = None) -> CommandResult:
        """Dispatch a raw function call (name + args) from the assistant."""
        try:
            command = AssistantCommand(name=name, args=args or {})
        except ValidationError:
            raise CommandError(f"Unknown command: {name}")
        return self.dispatch(event, command)

    def add_recipe(self, recipe: CocktailRecipe) -> CocktailRecipe:
        """
        Add a recipe to the session catalog.

        Raises:
            CommandError: If a recipe with the same name (any case) exists
        """
        if RecipeMatcher(self.recipes).find(recipe.name) is not None:
            raise CommandError(f"Recipe already exists: {recipe.name}")
        self.recipes.append(recipe)
        logger.info(f"Added recipe {recipe.name} with {len(recipe.ingredients)} ingredients")
        return recipe

    # =========================================================================
    # Handlers
    # =========================================================================

    def _update_headcount(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        raw = _require(args, "newCount")
        try:
            count = float(raw)
        except (TypeError, ValueError):
            raise CommandError(f"newCount must be a number, got {raw!r}")
        if not math.isfinite(count) or count < 0 or count != int(count):
            raise CommandError(f"newCount must be a whole number of guests, got {raw!r}")

        updated = event.model_copy(update={"headcount": int(count)}, deep=True)
        return self._result(CommandName.UPDATE_HEADCOUNT, updated, f"Headcount updated to {int(count)}.")

    def _generate_packing_list(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        packing_list = compute_packing_list(event, self.recipes)
        return CommandResult(
            command=CommandName.GENERATE_PACKING_LIST,
            message=f"Packing list generated with {packing_list.total_items} items.",
            event=event,
            packing_list=packing_list,
        )

    def _add_recipe(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        name = str(_require(args, "name")).strip()
        try:
            ingredients = [
                Ingredient(
                    name=str(raw.get("name", "")).strip(),
                    type=IngredientType.parse(raw.get("type")),
                    quantity_per_drink=raw.get("quantityPerDrink") or 0,
                    unit=raw.get("unit") or "unit",
                    container_size=raw.get("containerSize") or None,
                )
                for raw in args.get("ingredients") or []
            ]
            recipe = CocktailRecipe(
                id=recipe_id(name),
                name=name,
                english_description=args.get("englishDescription") or "",
                method=args.get("method") or "",
                ingredients=ingredients,
            )
        except (AttributeError, ValidationError) as e:
            raise CommandError(f"Invalid recipe {name!r}: {e}")

        self.add_recipe(recipe)
        return self._result(CommandName.ADD_RECIPE, event, f"Added {name} to the menu.")

    def _update_cocktails(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        action = str(_require(args, "action")).lower()
        name = str(_require(args, "cocktailName")).strip()
        selections = list(event.cocktail_selections)
        current = {s.lower() for s in selections}

        if action == "add":
            if name.lower() not in current:
                recipe = RecipeMatcher(self.recipes).find(name)
                selections.append(recipe.name if recipe else name)
            message = f"Added {name}."
        elif action == "remove":
            selections = [s for s in selections if s.lower() != name.lower()]
            message = f"Removed {name}."
        else:
            raise CommandError(f"action must be 'add' or 'remove', got {action!r}")

        updated = event.model_copy(update={"cocktail_selections": selections}, deep=True)
        return self._result(CommandName.UPDATE_EVENT_COCKTAILS, updated, message)

    def _update_details(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        field = str(_require(args, "field"))
        value = str(_require(args, "value"))
        updated = event.model_copy(deep=True)

        if field in DETAIL_FIELDS:
            setattr(updated, DETAIL_FIELDS[field], value)
        elif field == "status":
            try:
                updated.status = EventStatus(value)
            except ValueError:
                raise CommandError(f"Unknown status: {value!r}")
        elif field == "bartenderName":
            updated.bartender.name = value
        elif field == "bartenderEmail":
            updated.bartender.email = value
        elif field == "isPaid":
            updated.is_paid = value.lower() in ("true", "yes")
        else:
            raise CommandError(f"Unknown event field: {field!r}")

        return self._result(CommandName.UPDATE_EVENT_DETAILS, updated, f"Updated {field}.")

    def _update_rental(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        action = str(_require(args, "action")).lower()
        item_type = str(_require(args, "itemType")).lower()
        subtype = args.get("subtype")
        quantity = args.get("quantity")
        updated = event.model_copy(deep=True)

        if action not in ("add", "remove", "update", "reset"):
            raise CommandError(f"Unknown rental action: {action!r}")

        if item_type == "glass":
            rental = updated.glass_rental
            if action == "reset":
                rental.required = False
                rental.items = []
            elif action == "remove":
                rental.required = False
            else:
                rental.required = True
                if subtype:
                    _set_glass_quantity(rental.items, str(subtype), quantity)
        elif item_type == "bar":
            rental = updated.bar_rental
            if action == "remove":
                rental.required = False
            else:
                rental.required = True
                if subtype:
                    if any(k in str(subtype).lower() for k in BAR_SIZE_KEYWORDS):
                        rental.size = str(subtype)
                    else:
                        rental.color = str(subtype)
        else:
            raise CommandError(f"itemType must be 'bar' or 'glass', got {item_type!r}")

        return self._result(CommandName.UPDATE_RENTAL_ITEMS, updated, f"Updated {item_type} rental ({action}).")

    def _send_email(self, event: Event, args: Dict[str, Any]) -> CommandResult:
        recipient_name = args.get("recipientName") or ""
        bartender_first = event.bartender.name.split(" ")[0].lower()

        recipient_email = ""
        if recipient_name and bartender_first and bartender_first in str(recipient_name).lower():
            recipient_email = event.bartender.email

        draft = EmailDraft(
            recipient_email=recipient_email,
            subject=email_subject(event, date.today()),
            body=event_brief_text(event, compute_packing_list(event, self.recipes)),
        )
        return CommandResult(
            command=CommandName.SEND_EMAIL,
            message="Email draft ready.",
            event=event,
            email=draft,
        )

    def _result(self, command: CommandName, event: Event, message: str) -> CommandResult:
        return CommandResult(command=command, message=message, event=event)


def _require(args: Dict[str, Any], key: str) -> Any:
    value = args.get(key)
    if value is None or value == "":
        raise CommandError(f"Missing argument: {key}")
    return value


def _set_glass_quantity(items: List[GlassItem], glass_type: str, quantity: Optional[Any]) -> None:
    """Update an existing glass type's quantity, or add it when a quantity is given."""
    if quantity is None:
        return
    try:
        count = int(quantity)
    except (TypeError, ValueError, OverflowError):
        raise CommandError(f"quantity must be a number, got {quantity!r}")
    if count < 0:
        raise CommandError(f"quantity must not be negative, got {count}")

    for item in items:
        if item.type.lower() == glass_type.lower():
            item.quantity = count
            return
    items.append(GlassItem(type=glass_type, quantity=count))
