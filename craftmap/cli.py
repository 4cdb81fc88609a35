"""
craftmap Command-Line Interface (CLI)

Small front end over the ordered map and the crafting game. It ties together:
- SortedMap (ordered key:value dumps)
- Hero gathering and crafting
- The recipe book and starter areas from ``constants``

Usage examples:
    python -m craftmap.cli sort b=1 a=2 c=3
    python -m craftmap.cli sort --int-keys 10=x 9=y
    python -m craftmap.cli gather --kind raw --times 5 --seed 42
    python -m craftmap.cli craft Torch --have Wood=1 --have Resin=2
    python -m craftmap.cli recipes
    python -m craftmap.cli areas
"""

import argparse
import logging
import os
import random
import sys

from . import constants
from .datastructures import SortedMap
from .errors import CraftMapError, NotFound
from .game import Area, Hero, Item

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: argument parsing helpers
# -------------------------------------------------------------------
def parse_pair(text):
    """Split ``KEY=VALUE`` into a (key, value) tuple of strings."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def parse_count(text):
    """Split ``NAME=COUNT`` into (name, int count)."""
    name, value = parse_pair(text)
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"count for {name!r} must be an integer, got {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"count for {name!r} must be >= 0")
    return name, count


def build_recipe_book():
    """Return the recipe book as a SortedMap of result name -> Item."""
    book = SortedMap()
    for name, requirements in constants.RECIPES.items():
        book.insert(name, Item(name, requirements))
    return book


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Insert the given pairs and print them in ascending key order."""
    m = SortedMap()
    for key, value in args.pairs:
        if args.int_keys:
            try:
                key = int(key)
            except ValueError:
                raise argparse.ArgumentTypeError(f"key {key!r} is not an integer")
        m.insert(key, value)
    m.display()


def cmd_gather(args):
    """Run repeated gathers with a seeded RNG and show the inventory."""
    hero = Hero(args.name)
    rng = random.Random(args.seed)
    action = getattr(hero, args.kind)
    for _ in range(args.times):
        _, message = action(rng)
        print(message)
    hero.display_inventory()


def cmd_craft(args):
    """Seed an inventory from --have pairs and craft one item."""
    book = build_recipe_book()
    try:
        recipe = book.value_at(args.item)
    except NotFound:
        raise CraftMapError(f"unknown recipe: {args.item}")

    hero = Hero(args.name)
    for name, count in args.have:
        for _ in range(count):
            hero.collect_item(name)

    hero.craft(recipe.get_name(), recipe.get_req())
    print(f"Successfully crafted {recipe.get_name()}!")
    hero.display_inventory()


def cmd_recipes(args):
    """List the recipe book in ascending order."""
    build_recipe_book().display()


def cmd_areas(args):
    """Print every starter area."""
    for row in constants.AREAS:
        Area(*row).print_area()
        print()


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m craftmap.cli", description="Ordered map and crafting CLI")
    p.add_argument(
        "--log-level",
        default=os.environ.get(constants.LOG_LEVEL_ENV, constants.DEFAULT_LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- ordered map ---
    s = sub.add_parser("sort", help="Print KEY=VALUE pairs in key order")
    s.add_argument("pairs", nargs="*", type=parse_pair, metavar="KEY=VALUE")
    s.add_argument("--int-keys", action="store_true", help="Compare keys as integers")
    s.set_defaults(func=cmd_sort)

    # --- game ---
    s = sub.add_parser("gather", help="Gather resources")
    s.add_argument("--kind", choices=sorted(constants.GATHER_TABLE), default="raw")
    s.add_argument("--times", type=int, default=1)
    s.add_argument("--seed", type=int, default=constants.DEFAULT_SEED)
    s.add_argument("--name", default=constants.DEFAULT_HERO_NAME)
    s.set_defaults(func=cmd_gather)

    s = sub.add_parser("craft", help="Craft an item from the recipe book")
    s.add_argument("item")
    s.add_argument("--have", action="append", type=parse_count, default=[], metavar="NAME=COUNT")
    s.add_argument("--name", default=constants.DEFAULT_HERO_NAME)
    s.set_defaults(func=cmd_craft)

    s = sub.add_parser("recipes", help="List recipes")
    s.set_defaults(func=cmd_recipes)

    s = sub.add_parser("areas", help="List starter areas")
    s.set_defaults(func=cmd_areas)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m craftmap.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        args.func(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except CraftMapError as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
