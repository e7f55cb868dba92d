"""
Packing Calculation Engine

Turns an event plus a recipe catalog into a categorized packing list.

Two provisioning strategies:
- Bar Service: finished-drink volume math, one drink of each selected
  cocktail per guest, topped up with house essentials and core spirits.
- Workshop: kit ratios sized to the number of attendees.

The engine never mutates its inputs and never raises: any failure yields an
empty, well-formed packing list so the caller can always render something.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from barprep.models.common import EventType, IngredientType
from barprep.models.events import Event
from barprep.models.packing import PackingItem, PackingList, PackingSummary, empty_categories
from barprep.models.recipes import CocktailRecipe, Ingredient
from barprep.services.default_catalog import DEFAULT_RECIPES
from barprep.services.recipe_matcher import RecipeMatcher

logger = logging.getLogger(__name__)


# ============================================================================
# Business Rules
# ============================================================================

# A splash is estimated at a quarter ounce regardless of the catalog quantity
SPLASH_UNIT = "splash"
SPLASH_ESTIMATE_OZ = 0.25
SPLASH_UNIT_LABEL = "oz (est)"

# Plastic cups replace glassware when no glass rental is booked (+20% buffer)
PLASTIC_CUP_NAME = "Plastic Cup"
PLASTIC_CUP_BUFFER = 1.2

# Workshop kit ratios
WORKSHOP_ALCOHOL_PEOPLE_PER_BOTTLE = 5
WORKSHOP_ALCOHOL_BOTTLE_OZ = 16
WORKSHOP_MIXER_PEOPLE_PER_BOTTLE = 4
WORKSHOP_MIXER_BOTTLE_OZ = 4
WORKSHOP_MIXER_KEYWORDS = ("lemon", "lime", "egg")
WORKSHOP_GARNISH_PEOPLE_PER_JAR = 5

# "White bucket" soda stock packed for every bar service
HOUSE_ESSENTIALS = [
    ("Sprite", 6, "cans"),
    ("Ginger Ale", 6, "cans"),
    ("Coke", 6, "cans"),
    ("Tonic Water", 6, "cans"),
    ("Club Soda", 6, "cans"),
    ("Club Soda (2L)", 1, "bottle"),
]
HOUSE_ESSENTIAL_BREAKDOWN = "White Bucket Essential"

# Backstops against an incomplete catalog
CORE_SPIRITS = ["Vodka", "Gin", "Rum", "Tequila", "Whiskey", "Triple Sec"]
UNIVERSAL_SYRUPS = ["Simple Syrup", "Butterfly Pea Syrup"]
BACKUP_QUANTITY = 1
BACKUP_UNIT = "bottle"
BACKUP_BREAKDOWN = "Bar Essential / Backup"

ERROR_EVENT_ID = "error"

# Container counts within this distance of a whole number are float noise
CEIL_TOLERANCE = 1e-9


@dataclass
class _Line:
    """Running total for one ingredient name."""
    name: str
    type: IngredientType
    quantity: float
    containers: int
    unit: str
    breakdown: str


AccumulatorMap = Dict[str, _Line]


# ============================================================================
# Entry Point
# ============================================================================

def compute_packing_list(
    event: Optional[Event],
    recipes: Optional[Sequence[CocktailRecipe]] = None,
) -> PackingList:
    """
    Compute the packing list for an event.

    Args:
        event: The event to provision
        recipes: Recipe catalog (defaults to the bundled catalog)

    Returns:
        A new PackingList. Every category key is present, possibly empty.
    """
    try:
        if event is None:
            raise ValueError("Event data is missing")

        catalog = DEFAULT_RECIPES if recipes is None else recipes
        is_workshop = event.event_type == EventType.WORKSHOP

        if is_workshop:
            lines = _workshop_lines(event, catalog)
        else:
            lines = _bar_service_lines(event, catalog)

        packing_list = _format_list(event, lines)

        if not is_workshop and not event.client_supplies_alcohol:
            for spirit in CORE_SPIRITS:
                _ensure_item(packing_list, spirit, IngredientType.ALCOHOL)

        for syrup in UNIVERSAL_SYRUPS:
            _ensure_item(packing_list, syrup, IngredientType.SYRUP)

        logger.info(
            f"Computed {event.event_type.value} packing list for {event.id}: "
            f"{packing_list.total_items} items, {packing_list.summary.total_drinks} drinks"
        )
        return packing_list

    except Exception:
        logger.critical("Critical error during packing list calculation", exc_info=True)
        return _empty_list(event)


# ============================================================================
# Strategies
# ============================================================================

def _bar_service_lines(event: Event, recipes: Sequence[CocktailRecipe]) -> AccumulatorMap:
    """Volume-driven accumulation: one drink of each cocktail per guest."""
    drinks = event.headcount
    use_plastic = not event.glass_rental.required
    lines: AccumulatorMap = {}

    for recipe in _selected_recipes(event, recipes):
        for ing in recipe.ingredients:
            if _is_excluded(event, ing):
                continue

            total = _per_drink_oz(ing) * drinks
            if ing.container_size:
                containers = _ceil(total / ing.container_size)
            else:
                containers = _ceil(total)

            name = ing.name
            is_cup = ing.type == IngredientType.GLASS and use_plastic
            if is_cup:
                name = PLASTIC_CUP_NAME
                containers = _ceil(drinks * PLASTIC_CUP_BUFFER)

            trace = f"{recipe.name} ({format_quantity(total)} oz)"
            existing = lines.get(name)

            if existing is None:
                lines[name] = _Line(
                    name=name,
                    type=ing.type,
                    quantity=total,
                    containers=containers,
                    unit=SPLASH_UNIT_LABEL if _is_splash(ing) else ing.unit,
                    breakdown=trace,
                )
                continue

            existing.quantity += total
            if is_cup:
                existing.containers += containers
            elif ing.container_size:
                # Round once on the accumulated volume, not per recipe
                existing.containers = _ceil(existing.quantity / ing.container_size)
            else:
                existing.containers = _ceil(existing.quantity)
            existing.breakdown += f", {trace}"

    for name, count, unit in HOUSE_ESSENTIALS:
        _add_house_essential(lines, name, count, unit)

    return lines


def _workshop_lines(event: Event, recipes: Sequence[CocktailRecipe]) -> AccumulatorMap:
    """Ratio-driven accumulation: kits sized to attendee count."""
    headcount = event.headcount
    use_plastic = not event.glass_rental.required
    lines: AccumulatorMap = {}

    for recipe in _selected_recipes(event, recipes):
        for ing in recipe.ingredients:
            if _is_excluded(event, ing):
                continue

            name = ing.name
            if ing.type == IngredientType.GLASS and use_plastic:
                name = PLASTIC_CUP_NAME

            containers, quantity, unit, rule = _workshop_rule(ing, headcount, use_plastic)
            existing = lines.get(name)

            if existing is None:
                lines[name] = _Line(
                    name=name,
                    type=ing.type,
                    quantity=quantity,
                    containers=containers,
                    unit=unit,
                    breakdown=f"{recipe.name} [{rule}]",
                )
            else:
                # Workshop kits are provisioned per recipe, so counts add up
                existing.containers += containers
                existing.quantity += quantity
                existing.breakdown += f", {recipe.name}"

    return lines


def _workshop_rule(
    ing: Ingredient,
    headcount: int,
    use_plastic: bool,
) -> Tuple[int, float, str, str]:
    """Return (containers, quantity, unit, rule text) for a workshop ingredient."""
    if ing.type == IngredientType.ALCOHOL:
        containers = _ceil(headcount / WORKSHOP_ALCOHOL_PEOPLE_PER_BOTTLE)
        return (
            containers,
            containers * WORKSHOP_ALCOHOL_BOTTLE_OZ,
            "oz",
            f"{WORKSHOP_ALCOHOL_BOTTLE_OZ}oz btl (1 per {WORKSHOP_ALCOHOL_PEOPLE_PER_BOTTLE})",
        )

    if ing.type == IngredientType.SYRUP or _is_workshop_mixer(ing.name):
        containers = _ceil(headcount / WORKSHOP_MIXER_PEOPLE_PER_BOTTLE)
        return (
            containers,
            containers * WORKSHOP_MIXER_BOTTLE_OZ,
            "oz",
            f"btl (1 per {WORKSHOP_MIXER_PEOPLE_PER_BOTTLE})",
        )

    if ing.type == IngredientType.GARNISH:
        containers = _ceil(headcount / WORKSHOP_GARNISH_PEOPLE_PER_JAR)
        return containers, containers, "jars", f"Jar (1 per {WORKSHOP_GARNISH_PEOPLE_PER_JAR})"

    if ing.type == IngredientType.GLASS and use_plastic:
        containers = _ceil(headcount * PLASTIC_CUP_BUFFER)
        return containers, containers, ing.unit, f"{PLASTIC_CUP_BUFFER} per person (Plastic)"

    return _ceil(headcount), headcount, ing.unit, "1 per person"


# ============================================================================
# Helpers
# ============================================================================

def _selected_recipes(event: Event, recipes: Sequence[CocktailRecipe]) -> Iterator[CocktailRecipe]:
    """Yield the recipe for each selection, skipping names not in the catalog."""
    matcher = RecipeMatcher(recipes)

    for selection in event.cocktail_selections:
        recipe = matcher.find(selection)
        if recipe is None:
            suggestion = matcher.suggest(selection)
            hint = f" (closest match: {suggestion!r})" if suggestion else ""
            logger.warning(f"Recipe not found for selection {selection!r}{hint}. Skipping.")
            continue
        yield recipe


def _is_excluded(event: Event, ing: Ingredient) -> bool:
    return event.client_supplies_alcohol and ing.type == IngredientType.ALCOHOL


def _is_splash(ing: Ingredient) -> bool:
    return ing.unit.strip().lower() == SPLASH_UNIT


def _per_drink_oz(ing: Ingredient) -> float:
    if _is_splash(ing):
        return SPLASH_ESTIMATE_OZ
    return ing.quantity_per_drink


def _is_workshop_mixer(name: str) -> bool:
    # Substring match: "Eggplant Garnish" would also count as a mixer
    lowered = name.lower()
    return any(keyword in lowered for keyword in WORKSHOP_MIXER_KEYWORDS)


def _ceil(value: float) -> int:
    """Round up, ignoring float noise such as 3.0000000000000004."""
    if value <= 0:
        return 0
    nearest = round(value)
    if nearest >= 1 and abs(value - nearest) < CEIL_TOLERANCE:
        return int(nearest)
    # Any positive amount needs at least one container
    return math.ceil(value)


def format_quantity(value: float) -> str:
    """Round half up to one decimal and drop a trailing .0"""
    rounded = math.floor(round(value * 10, 9) + 0.5) / 10
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.1f}"


def _add_house_essential(lines: AccumulatorMap, name: str, count: int, unit: str) -> None:
    """Add white bucket stock, merging into a recipe line with the same name."""
    existing = lines.get(name)
    if existing is not None:
        existing.containers += count
        existing.breakdown += f", White Bucket (+{count})"
        return

    lines[name] = _Line(
        name=name,
        type=IngredientType.SODA,
        quantity=0.0,
        containers=count,
        unit=unit,
        breakdown=HOUSE_ESSENTIAL_BREAKDOWN,
    )


def _ensure_item(packing_list: PackingList, name: str, category: IngredientType) -> None:
    """Add a backup line unless the category already has this item."""
    items = packing_list.categories[category]
    target = name.lower()
    if any(item.name.lower() == target for item in items):
        return

    items.append(PackingItem(
        name=name,
        quantity_needed_oz=0.0,
        containers_needed=BACKUP_QUANTITY,
        unit=BACKUP_UNIT,
        breakdown=BACKUP_BREAKDOWN,
    ))


def _format_list(event: Event, lines: AccumulatorMap) -> PackingList:
    """Bucket accumulated lines by category, preserving first-seen order."""
    categories = empty_categories()

    for line in lines.values():
        bucket = categories.get(line.type, categories[IngredientType.OTHERS])
        bucket.append(PackingItem(
            name=line.name,
            quantity_needed_oz=line.quantity,
            containers_needed=line.containers,
            unit=line.unit,
            breakdown=line.breakdown,
        ))

    return PackingList(
        event_id=event.id,
        summary=PackingSummary(
            total_drinks=event.headcount * len(event.cocktail_selections),
            drinks_per_cocktail=event.headcount,
        ),
        categories=categories,
    )


def _empty_list(event) -> PackingList:
    return PackingList(
        event_id=getattr(event, "id", None) or ERROR_EVENT_ID,
        summary=PackingSummary(total_drinks=0, drinks_per_cocktail=0),
        categories=empty_categories(),
    )
