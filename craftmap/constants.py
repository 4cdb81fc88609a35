"""
Defaults and lookup tables for the crafting game.

Everything here is a plain module constant:
- gather tables used by :class:`craftmap.game.hero.Hero`
- the recipe book (result name -> required item names)
- the starter areas shown by the CLI
- CLI defaults (hero name, seed, log level environment variable)
"""

# Environment variable read by the CLI for the default logging level
LOG_LEVEL_ENV = "CRAFTMAP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_HERO_NAME = "Hero"
DEFAULT_SEED = None  # None -> seeded from system entropy

# -------------------------------------------------------------------
# Gather tables
# -------------------------------------------------------------------
RAW_PRODUCTS = ("Coal", "Copper Ore", "Iron Ore", "Stone", "Gold Ore")
NATURAL_PRODUCTS = ("Wood", "Fiber", "Resin", "Sap", "Flint")
FOOD_PRODUCTS = ("Berries", "Mushroom", "Apple", "Herbs")
HUNT_PRODUCTS = ("Hide", "Bone", "Feather", "Meat")

# kind -> (products, nothing-found message, found-prefix)
GATHER_TABLE = {
    "raw": (RAW_PRODUCTS, "You mined but found nothing.", "You mined and found "),
    "natural": (NATURAL_PRODUCTS, "You foraged but found nothing.", "You foraged and found "),
    "food": (FOOD_PRODUCTS, "You gathered but found no food.", "You gathered "),
    "hunt": (HUNT_PRODUCTS, "You hunted but found nothing.", "You hunted and got "),
}

# -------------------------------------------------------------------
# Recipes (result -> requirements, each consumed once)
# -------------------------------------------------------------------
RECIPES = {
    "Torch": ("Wood", "Resin"),
    "Rope": ("Fiber", "Fiber"),
    "Stone Axe": ("Stone", "Wood", "Fiber"),
    "Iron Ingot": ("Iron Ore", "Coal"),
    "Iron Sword": ("Iron Ingot", "Wood", "Hide"),
    "Arrow": ("Flint", "Wood", "Feather"),
    "Stew": ("Meat", "Mushroom", "Herbs"),
    "Leather Armor": ("Hide", "Hide", "Fiber"),
}

# -------------------------------------------------------------------
# Starter areas: (id, name, description, north, east, south, west)
# -1 means there is no exit in that direction.
# -------------------------------------------------------------------
AREAS = (
    (0, "Clearing", "A quiet clearing ringed by birch trees.", 1, 2, -1, -1),
    (1, "Old Quarry", "Broken stone and a dark seam of ore.", -1, -1, 0, -1),
    (2, "Riverbank", "Reeds sway beside slow brown water.", -1, -1, 3, 0),
    (3, "Hunting Grounds", "Tracks crisscross the muddy ground.", 2, -1, -1, -1),
)
