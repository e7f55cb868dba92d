"""Tests for the packing calculation engine."""

import logging
import math

import pytest

from barprep.models.common import EventType, IngredientType
from barprep.models.events import Event, GlassRental
from barprep.models.recipes import CocktailRecipe, Ingredient
from barprep.services.packing_engine import (
    CORE_SPIRITS,
    ERROR_EVENT_ID,
    HOUSE_ESSENTIALS,
    compute_packing_list,
    format_quantity,
)


def create_test_event(
    selections=("The Butterfly",),
    headcount: int = 25,
    event_type: EventType = EventType.BAR_SERVICE,
    client_supplies_alcohol: bool = False,
    glass_required: bool = False,
) -> Event:
    """Create a test event."""
    return Event(
        id="evt-test",
        event_type=event_type,
        headcount=headcount,
        cocktail_selections=list(selections),
        client_supplies_alcohol=client_supplies_alcohol,
        glass_rental=GlassRental(required=glass_required),
    )


def item(packing_list, category: IngredientType, name: str):
    """Find a line item by name within a category."""
    for line in packing_list.categories[category]:
        if line.name == name:
            return line
    return None


def names(packing_list, category: IngredientType) -> list:
    return [line.name for line in packing_list.categories[category]]


class TestBarServiceExample:
    """The Butterfly for 25 guests, no glass rental."""

    @pytest.fixture
    def packing_list(self, catalog):
        return compute_packing_list(create_test_event(), catalog)

    def test_gin_rounds_up_to_whole_bottles(self, packing_list):
        gin = item(packing_list, IngredientType.ALCOHOL, "Gin")
        assert gin.quantity_needed_oz == pytest.approx(50)
        assert gin.containers_needed == 2
        assert gin.breakdown == "The Butterfly (50 oz)"

    def test_syrup_not_duplicated_by_backstop(self, packing_list):
        syrups = names(packing_list, IngredientType.SYRUP)
        assert syrups.count("Butterfly Pea Syrup") == 1
        syrup = item(packing_list, IngredientType.SYRUP, "Butterfly Pea Syrup")
        assert syrup.quantity_needed_oz == pytest.approx(18.75)
        assert syrup.containers_needed == 1

    def test_splash_is_estimated_at_quarter_ounce(self, packing_list):
        eggwhite = item(packing_list, IngredientType.JUICE, "Eggwhite")
        assert eggwhite.quantity_needed_oz == pytest.approx(6.25)
        assert eggwhite.containers_needed == 1
        assert eggwhite.unit == "oz (est)"

    def test_glassware_becomes_plastic_cups_with_buffer(self, packing_list):
        assert names(packing_list, IngredientType.GLASS) == ["Plastic Cup"]
        cups = item(packing_list, IngredientType.GLASS, "Plastic Cup")
        assert cups.containers_needed == 30

    def test_house_essentials_present(self, packing_list):
        soda = {line.name: line for line in packing_list.categories[IngredientType.SODA]}
        for name, count, unit in HOUSE_ESSENTIALS:
            assert soda[name].containers_needed == count
            assert soda[name].unit == unit
            assert soda[name].breakdown == "White Bucket Essential"

    def test_missing_core_spirits_are_backed_up(self, packing_list):
        assert names(packing_list, IngredientType.ALCOHOL) == [
            "Gin", "Vodka", "Rum", "Tequila", "Whiskey", "Triple Sec",
        ]
        for spirit in ("Vodka", "Rum", "Tequila", "Whiskey", "Triple Sec"):
            backup = item(packing_list, IngredientType.ALCOHOL, spirit)
            assert backup.containers_needed == 1
            assert backup.unit == "bottle"
            assert backup.breakdown == "Bar Essential / Backup"

    def test_simple_syrup_backstop(self, packing_list):
        simple = item(packing_list, IngredientType.SYRUP, "Simple Syrup")
        assert simple.containers_needed == 1
        assert simple.breakdown == "Bar Essential / Backup"

    def test_summary(self, packing_list):
        assert packing_list.event_id == "evt-test"
        assert packing_list.summary.total_drinks == 25
        assert packing_list.summary.drinks_per_cocktail == 25


class TestBarServiceAccumulation:
    """Ingredients shared across cocktails."""

    def test_containers_recomputed_from_accumulated_volume(self, catalog):
        event = create_test_event(["Spicy Margarita", "Classic Mojito"], headcount=10)
        packing_list = compute_packing_list(event, catalog)

        lime = item(packing_list, IngredientType.JUICE, "Lime Juice")
        assert lime.quantity_needed_oz == pytest.approx(17.5)
        # 10oz + 7.5oz fits one 26oz bottle; per-recipe rounding would give 2
        assert lime.containers_needed == 1
        assert lime.breakdown == "Spicy Margarita (10 oz), Classic Mojito (7.5 oz)"

    def test_plastic_cups_accumulate_per_recipe(self, catalog):
        event = create_test_event(["Spicy Margarita", "Classic Mojito"], headcount=10)
        packing_list = compute_packing_list(event, catalog)

        assert names(packing_list, IngredientType.GLASS) == ["Plastic Cup"]
        cups = item(packing_list, IngredientType.GLASS, "Plastic Cup")
        assert cups.containers_needed == 24

    def test_count_based_items_round_up(self, catalog):
        event = create_test_event(["Spicy Margarita"], headcount=10)
        packing_list = compute_packing_list(event, catalog)

        tajin = item(packing_list, IngredientType.GARNISH, "Tajin")
        assert tajin.containers_needed == 10

    def test_house_essential_merges_into_recipe_line(self, catalog):
        event = create_test_event(["Classic Mojito"], headcount=10)
        packing_list = compute_packing_list(event, catalog)

        club_soda = [line for line in packing_list.categories[IngredientType.SODA] if line.name == "Club Soda"]
        assert len(club_soda) == 1
        # 20oz / 12oz cans = 2, plus 6 white bucket cans
        assert club_soda[0].containers_needed == 8
        assert club_soda[0].breakdown == "Classic Mojito (20 oz), White Bucket (+6)"

    def test_glass_rental_keeps_glass_names(self, catalog):
        event = create_test_event(["Spicy Margarita", "Classic Mojito"], headcount=10, glass_required=True)
        packing_list = compute_packing_list(event, catalog)

        assert names(packing_list, IngredientType.GLASS) == ["Low Ball", "Highball"]

    def test_selection_lookup_ignores_case(self, catalog):
        event = create_test_event(["the BUTTERFLY"])
        packing_list = compute_packing_list(event, catalog)

        assert item(packing_list, IngredientType.ALCOHOL, "Gin").containers_needed == 2

    def test_insertion_order_follows_recipes(self, catalog):
        event = create_test_event(["Spicy Margarita", "Classic Mojito"], headcount=10)
        packing_list = compute_packing_list(event, catalog)

        assert names(packing_list, IngredientType.ALCOHOL)[:2] == ["Tequila", "Rum"]


class TestWorkshop:
    """Headcount-ratio provisioning."""

    def test_alcohol_one_16oz_bottle_per_five(self):
        recipe = CocktailRecipe(
            id="vodka-class",
            name="Vodka Class",
            ingredients=[Ingredient(name="Vodka", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=26)],
        )
        event = create_test_event(["Vodka Class"], headcount=12, event_type=EventType.WORKSHOP)
        packing_list = compute_packing_list(event, [recipe])

        vodka = item(packing_list, IngredientType.ALCOHOL, "Vodka")
        assert vodka.containers_needed == 3
        assert vodka.quantity_needed_oz == 48
        assert vodka.unit == "oz"
        assert vodka.breakdown == "Vodka Class [16oz btl (1 per 5)]"

    def test_butterfly_kit(self, catalog):
        event = create_test_event(headcount=12, event_type=EventType.WORKSHOP)
        packing_list = compute_packing_list(event, catalog)

        syrup = item(packing_list, IngredientType.SYRUP, "Butterfly Pea Syrup")
        assert (syrup.containers_needed, syrup.quantity_needed_oz) == (3, 12)

        # Lemon and egg ingredients follow the syrup ratio
        lemon = item(packing_list, IngredientType.JUICE, "Lemon Juice")
        eggwhite = item(packing_list, IngredientType.JUICE, "Eggwhite")
        assert (lemon.containers_needed, lemon.quantity_needed_oz, lemon.unit) == (3, 12, "oz")
        assert (eggwhite.containers_needed, eggwhite.quantity_needed_oz) == (3, 12)

        garnish = item(packing_list, IngredientType.GARNISH, "Pea Flowers")
        assert (garnish.containers_needed, garnish.quantity_needed_oz, garnish.unit) == (3, 3, "jars")

        cups = item(packing_list, IngredientType.GLASS, "Plastic Cup")
        assert cups.containers_needed == math.ceil(12 * 1.2)

    def test_no_bar_service_backstops(self, catalog):
        event = create_test_event(headcount=12, event_type=EventType.WORKSHOP)
        packing_list = compute_packing_list(event, catalog)

        assert packing_list.categories[IngredientType.SODA] == []
        assert names(packing_list, IngredientType.ALCOHOL) == ["Gin"]
        # Universal syrup backstop still applies
        assert item(packing_list, IngredientType.SYRUP, "Simple Syrup").containers_needed == 1

    def test_shared_ingredients_add_container_counts(self, catalog):
        event = create_test_event(["Spicy Margarita", "Classic Mojito"], headcount=12, event_type=EventType.WORKSHOP)
        packing_list = compute_packing_list(event, catalog)

        lime = item(packing_list, IngredientType.JUICE, "Lime Juice")
        assert lime.containers_needed == 6
        assert lime.quantity_needed_oz == 24
        assert lime.breakdown == "Spicy Margarita [btl (1 per 4)], Classic Mojito"

        cups = item(packing_list, IngredientType.GLASS, "Plastic Cup")
        assert cups.containers_needed == 30

    def test_other_categories_one_per_person(self, catalog):
        event = create_test_event(["Classic Mojito"], headcount=12, event_type=EventType.WORKSHOP, glass_required=True)
        packing_list = compute_packing_list(event, catalog)

        club_soda = item(packing_list, IngredientType.SODA, "Club Soda")
        assert club_soda.containers_needed == 12
        assert club_soda.breakdown == "Classic Mojito [1 per person]"
        assert item(packing_list, IngredientType.GLASS, "Highball").containers_needed == 12

    def test_egg_substring_matches_any_ingredient(self):
        # Known quirk: the mixer ratio is chosen by substring
        recipe = CocktailRecipe(
            id="veggie",
            name="Veggie",
            ingredients=[Ingredient(name="Eggplant Garnish", type=IngredientType.GARNISH, quantity_per_drink=1, unit="garnish")],
        )
        event = create_test_event(["Veggie"], headcount=8, event_type=EventType.WORKSHOP)
        packing_list = compute_packing_list(event, [recipe])

        eggplant = item(packing_list, IngredientType.GARNISH, "Eggplant Garnish")
        assert eggplant.containers_needed == 2
        assert eggplant.unit == "oz"


class TestAlcoholExclusion:
    """Client supplies their own alcohol."""

    @pytest.mark.parametrize("event_type", [EventType.BAR_SERVICE, EventType.WORKSHOP])
    def test_no_alcohol_lines(self, catalog, event_type):
        event = create_test_event(
            ["The Butterfly", "Spicy Margarita"],
            event_type=event_type,
            client_supplies_alcohol=True,
        )
        packing_list = compute_packing_list(event, catalog)

        assert packing_list.categories[IngredientType.ALCOHOL] == []
        assert item(packing_list, IngredientType.JUICE, "Lemon Juice") is not None


class TestZeroHeadcount:
    """Nobody coming still packs the backstops."""

    def test_bar_service(self, catalog):
        packing_list = compute_packing_list(create_test_event(headcount=0), catalog)

        gin = item(packing_list, IngredientType.ALCOHOL, "Gin")
        assert gin.quantity_needed_oz == 0
        assert gin.containers_needed == 0
        assert item(packing_list, IngredientType.GLASS, "Plastic Cup").containers_needed == 0

        assert item(packing_list, IngredientType.SODA, "Sprite").containers_needed == 6
        assert item(packing_list, IngredientType.ALCOHOL, "Vodka").containers_needed == 1
        assert item(packing_list, IngredientType.SYRUP, "Simple Syrup").containers_needed == 1

    def test_workshop(self, catalog):
        event = create_test_event(headcount=0, event_type=EventType.WORKSHOP)
        packing_list = compute_packing_list(event, catalog)

        for category in (IngredientType.ALCOHOL, IngredientType.JUICE, IngredientType.GARNISH, IngredientType.GLASS):
            assert all(line.containers_needed == 0 for line in packing_list.categories[category])
        assert item(packing_list, IngredientType.SYRUP, "Simple Syrup").containers_needed == 1


class TestFailSafe:
    """The engine never raises."""

    def test_all_categories_present(self, catalog):
        packing_list = compute_packing_list(create_test_event(["Classic Mojito"]), catalog)

        assert list(packing_list.categories.keys()) == list(IngredientType)
        assert packing_list.categories[IngredientType.OTHERS] == []

    def test_missing_event_returns_empty_list(self, catalog):
        packing_list = compute_packing_list(None, catalog)

        assert packing_list.event_id == ERROR_EVENT_ID
        assert list(packing_list.categories.keys()) == list(IngredientType)
        assert all(items == [] for items in packing_list.categories.values())
        assert packing_list.summary.total_drinks == 0

    def test_malformed_catalog_returns_empty_list(self, caplog):
        with caplog.at_level(logging.CRITICAL):
            packing_list = compute_packing_list(create_test_event(), [None])

        assert packing_list.event_id == "evt-test"
        assert all(items == [] for items in packing_list.categories.values())
        assert packing_list.summary.drinks_per_cocktail == 0
        assert "Critical error" in caplog.text

    def test_unmatched_selection_is_skipped(self, catalog, caplog):
        event = create_test_event(["Butterfly", "Spicy Margarita"], headcount=10)

        with caplog.at_level(logging.WARNING):
            packing_list = compute_packing_list(event, catalog)

        assert item(packing_list, IngredientType.ALCOHOL, "Tequila").containers_needed == 1
        # Gin only appears as a backup since The Butterfly was not matched
        assert item(packing_list, IngredientType.ALCOHOL, "Gin").breakdown == "Bar Essential / Backup"
        assert "Recipe not found" in caplog.text
        assert "The Butterfly" in caplog.text

    def test_unknown_event_type_uses_bar_service(self, catalog):
        event = Event(id="evt-odd", event_type="Cocktail Party", headcount=10, cocktail_selections=["Classic Mojito"])
        packing_list = compute_packing_list(event, catalog)

        assert event.event_type == EventType.BAR_SERVICE
        assert item(packing_list, IngredientType.SODA, "Sprite") is not None

    def test_empty_recipe_contributes_nothing(self):
        recipe = CocktailRecipe(id="empty", name="Empty")
        packing_list = compute_packing_list(create_test_event(["Empty"]), [recipe])

        assert packing_list.categories[IngredientType.JUICE] == []
        assert packing_list.summary.total_drinks == 25


class TestPurity:
    """Inputs are never mutated and results are repeatable."""

    def test_idempotent_categories(self, catalog):
        event = create_test_event(["The Butterfly", "Spicy Margarita"])

        first = compute_packing_list(event, catalog)
        second = compute_packing_list(event, catalog)

        assert first.model_dump()["categories"] == second.model_dump()["categories"]
        assert first is not second

    def test_inputs_unchanged(self, catalog):
        event = create_test_event(["Spicy Margarita", "Classic Mojito"], headcount=10)
        event_before = event.model_dump()
        catalog_before = [recipe.model_dump() for recipe in catalog]

        compute_packing_list(event, catalog)

        assert event.model_dump() == event_before
        assert [recipe.model_dump() for recipe in catalog] == catalog_before

    def test_defaults_to_bundled_catalog(self):
        packing_list = compute_packing_list(create_test_event(["Spicy Margarita"]))
        assert item(packing_list, IngredientType.ALCOHOL, "Tequila") is not None


class TestContainerRounding:
    """Container counts round up without being thrown off by float noise."""

    def create_test_recipe(self, quantity: float, container_size: float) -> CocktailRecipe:
        return CocktailRecipe(
            id="house-shot",
            name="House Shot",
            ingredients=[Ingredient(
                name="Bitters", type=IngredientType.OTHERS,
                quantity_per_drink=quantity, unit="oz", container_size=container_size,
            )],
        )

    def test_float_noise_does_not_add_a_container(self):
        # 0.1 * 3 / 0.3 == 1.0000000000000002
        recipe = self.create_test_recipe(0.1, 0.3)
        packing_list = compute_packing_list(create_test_event(["House Shot"], headcount=3), [recipe])

        assert item(packing_list, IngredientType.OTHERS, "Bitters").containers_needed == 1

    def test_tiny_positive_amount_needs_one_container(self):
        recipe = self.create_test_recipe(1e-12, 26)
        packing_list = compute_packing_list(create_test_event(["House Shot"], headcount=1), [recipe])

        assert item(packing_list, IngredientType.OTHERS, "Bitters").containers_needed == 1

    def test_just_over_a_whole_container(self):
        recipe = self.create_test_recipe(26.001, 26)
        packing_list = compute_packing_list(create_test_event(["House Shot"], headcount=1), [recipe])

        assert item(packing_list, IngredientType.OTHERS, "Bitters").containers_needed == 2


@pytest.mark.parametrize(
    "value, expected",
    [(50.0, "50"), (18.75, "18.8"), (6.25, "6.3"), (7.5, "7.5"), (0, "0")],
)
def test_format_quantity(value, expected):
    assert format_quantity(value) == expected


def test_core_spirits_constant():
    assert CORE_SPIRITS == ["Vodka", "Gin", "Rum", "Tequila", "Whiskey", "Triple Sec"]
