import io
import random

import pytest

from craftmap import constants
from craftmap.errors import CraftError, InvalidArgument
from craftmap.game import Area, Hero, Item


class FixedRandom:
    """Stand-in RNG whose randrange always returns a preset index."""

    def __init__(self, index):
        self.index = index

    def randrange(self, *args, **kwargs):
        return self.index


# -----------------------------
# Hero
# -----------------------------
def test_hero_requires_name():
    with pytest.raises(InvalidArgument):
        Hero("")
    hero = Hero("Ada")
    with pytest.raises(ValueError):
        hero.set_name("")
    hero.set_name("Bo")
    assert hero.get_name() == "Bo"


def test_collect_item_increments():
    hero = Hero("Ada")
    hero.collect_item("Wood")
    hero.collect_item("Wood")
    hero.collect_item("Apple")
    assert hero.count("Wood") == 2
    assert hero.count("Apple") == 1
    assert hero.count("Stone") == 0


def test_display_inventory_sorted():
    hero = Hero("Ada")
    for item in ("Wood", "Apple", "Wood"):
        hero.collect_item(item)
    buf = io.StringIO()
    hero.display_inventory(buf)
    assert buf.getvalue() == "Ada's Inventory:\nApple:1\nWood:2\n"


def test_inventory_property_is_a_copy():
    hero = Hero("Ada")
    hero.collect_item("Wood")
    inv = hero.inventory
    inv.insert("Wood", 99)
    assert hero.count("Wood") == 1


def test_craft_consumes_requirements():
    hero = Hero("Ada")
    hero.collect_item("Wood")
    hero.collect_item("Resin")
    assert hero.can_craft(["Wood", "Resin"])
    assert hero.craft("Torch", ["Wood", "Resin"]) == "Torch"
    assert hero.count("Torch") == 1
    assert hero.count("Wood") == 0
    assert hero.inventory.render() == "Resin:0\nTorch:1\nWood:0\n"


def test_craft_missing_requirement_raises_and_keeps_inventory():
    hero = Hero("Ada")
    hero.collect_item("Wood")
    assert not hero.can_craft(["Wood", "Resin"])
    with pytest.raises(CraftError):
        hero.craft("Torch", ["Wood", "Resin"])
    assert hero.count("Wood") == 1
    assert "Torch" not in hero.inventory


def test_repeated_requirement_needs_each_unit():
    hero = Hero("Ada")
    hero.collect_item("Fiber")
    assert not hero.can_craft(["Fiber", "Fiber"])
    hero.collect_item("Fiber")
    hero.craft("Rope", ["Fiber", "Fiber"])
    assert hero.count("Fiber") == 0
    assert hero.count("Rope") == 1


def test_gather_found_and_nothing():
    hero = Hero("Ada")
    products = ("Coal", "Stone")
    item, msg = hero.gather(products, "nothing", "found ", FixedRandom(1))
    assert item == "Stone"
    assert msg == "found Stone."
    assert hero.count("Stone") == 1

    item, msg = hero.gather(products, "nothing", "found ", FixedRandom(2))
    assert item is None
    assert msg == "nothing"
    assert len(hero.inventory) == 1


@pytest.mark.parametrize("kind", sorted(constants.GATHER_TABLE))
def test_gather_kinds_are_reproducible(kind):
    a, b = Hero("A"), Hero("B")
    rng_a, rng_b = random.Random(42), random.Random(42)
    for _ in range(20):
        getattr(a, kind)(rng_a)
        getattr(b, kind)(rng_b)
    assert a.inventory == b.inventory
    products = constants.GATHER_TABLE[kind][0]
    assert all(k in products for k in a.inventory)


def test_hunt_messages():
    hero = Hero("Ada")
    _, msg = hero.hunt(FixedRandom(0))
    assert msg == f"You hunted and got {constants.HUNT_PRODUCTS[0]}."
    _, msg = hero.hunt(FixedRandom(len(constants.HUNT_PRODUCTS)))
    assert msg == "You hunted but found nothing."


# -----------------------------
# Item / Area
# -----------------------------
def test_item():
    item = Item("Torch", ["Wood", "Resin"])
    assert item.get_name() == "Torch"
    assert item.get_req() == ("Wood", "Resin")
    assert str(item) == "Wood, Resin"
    with pytest.raises(InvalidArgument):
        Item("", [])


def test_area_directions_and_render():
    area = Area(0, "Clearing", "Quiet.", 1, 2, -1, -1)
    assert area.get_id() == 0
    assert area.get_name() == "Clearing"
    assert area.get_desc() == "Quiet."
    assert area.check_direction("n") == 1
    assert area.check_direction("E") == 2
    assert area.check_direction("s") == -1
    assert area.check_direction("x") == -1
    assert area.check_direction("") == -1
    assert area.render() == "Clearing\nQuiet.\nPossible Exits: N E \n"
    with pytest.raises(InvalidArgument):
        Area(1, "", "nameless")
