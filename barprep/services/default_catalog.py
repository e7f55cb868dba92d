"""
Bundled Defaults

Recipe catalog and sample event used when the Google Sheet is not configured
or cannot be reached.
"""

from barprep.models.common import EventStatus, EventType, IngredientType
from barprep.models.events import Bartender, BarRental, Event, GlassItem, GlassRental
from barprep.models.recipes import CocktailRecipe, Ingredient

# Standard containers (oz)
BOTTLE_26_OZ = 26.0
EGGWHITE_CARTON_OZ = 8.0
SODA_CAN_OZ = 12.0


DEFAULT_RECIPES = [
    CocktailRecipe(
        id="the-butterfly",
        name="The Butterfly",
        english_description="Butterfly pea, lemon, Gin, Eggwhites",
        method=(
            "ADD all ingredients to the shaker. DRY SHAKE for 15 seconds. "
            "ADD ice and SHAKE again. POUR into a glass. TOP with more ice if needed. GARNISH."
        ),
        ingredients=[
            Ingredient(name="Gin", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Butterfly Pea Syrup", type=IngredientType.SYRUP, quantity_per_drink=0.75, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Lemon Juice", type=IngredientType.JUICE, quantity_per_drink=0.75, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Eggwhite", type=IngredientType.JUICE, quantity_per_drink=1, unit="splash", container_size=EGGWHITE_CARTON_OZ),
            Ingredient(name="Pea Flowers", type=IngredientType.GARNISH, quantity_per_drink=1, unit="garnish", container_size=BOTTLE_26_OZ),
            Ingredient(name="Low Ball", type=IngredientType.GLASS, quantity_per_drink=1, unit="glass", container_size=BOTTLE_26_OZ),
        ],
    ),
    CocktailRecipe(
        id="spicy-margarita",
        name="Spicy Margarita",
        english_description="Tequila, lime, jalapeno syrup, tajin rim",
        method="ADD all ingredients to the shaker with ice. SHAKE. STRAIN over fresh ice. GARNISH.",
        ingredients=[
            Ingredient(name="Tequila", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Triple Sec", type=IngredientType.ALCOHOL, quantity_per_drink=0.5, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Jalapeno Syrup", type=IngredientType.SYRUP, quantity_per_drink=0.5, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Lime Juice", type=IngredientType.JUICE, quantity_per_drink=1, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Tajin", type=IngredientType.GARNISH, quantity_per_drink=1, unit="garnish"),
            Ingredient(name="Low Ball", type=IngredientType.GLASS, quantity_per_drink=1, unit="glass"),
        ],
    ),
    CocktailRecipe(
        id="classic-mojito",
        name="Classic Mojito",
        english_description="Rum, lime, mint, soda",
        method="MUDDLE mint with syrup. ADD rum and lime, fill with ice. TOP with club soda. GARNISH.",
        ingredients=[
            Ingredient(name="Rum", type=IngredientType.ALCOHOL, quantity_per_drink=2, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Simple Syrup", type=IngredientType.SYRUP, quantity_per_drink=0.75, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Lime Juice", type=IngredientType.JUICE, quantity_per_drink=0.75, unit="oz", container_size=BOTTLE_26_OZ),
            Ingredient(name="Club Soda", type=IngredientType.SODA, quantity_per_drink=2, unit="oz", container_size=SODA_CAN_OZ),
            Ingredient(name="Mint", type=IngredientType.GARNISH, quantity_per_drink=1, unit="garnish"),
            Ingredient(name="Highball", type=IngredientType.GLASS, quantity_per_drink=1, unit="glass"),
        ],
    ),
]


INITIAL_EVENT = Event(
    id="evt-init-001",
    event_type=EventType.BAR_SERVICE,
    client_name="Sarah Jenkins",
    client_phone="514-555-0123",
    is_paid=False,
    event_date="2023-11-15T18:00:00",
    end_time="2023-11-15T23:00:00",
    headcount=25,
    location="Old Port Loft, Montreal",
    status=EventStatus.READY_FOR_PREP,
    cocktail_selections=["The Butterfly", "Spicy Margarita"],
    bartender=Bartender(name="Alex Mixer", email="alex@mtlcocktails.com"),
    bar_rental=BarRental(required=True, size="6ft Mobile", color="Gold Finish"),
    glass_rental=GlassRental(
        required=True,
        items=[GlassItem(type="Lowball", quantity=50), GlassItem(type="Coupe", quantity=30)],
    ),
    client_supplies_alcohol=False,
)
