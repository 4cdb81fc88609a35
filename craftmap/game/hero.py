"""Hero: a named player whose inventory is a ``SortedMap[str, int]``.

The inventory only changes through the map's public operations. Counts are
read, recomputed and written back with ``insert``; the map has no atomic
increment. Gathering takes an explicit ``random.Random`` so callers decide
how (and whether) it is seeded.
"""

from __future__ import annotations

import logging
import random
import sys
from typing import Iterable, Optional, Sequence, TextIO, Tuple

from .. import constants
from ..datastructures import SortedMap
from ..errors import CraftError, InvalidArgument

logger = logging.getLogger(__name__)


class Hero:
    __slots__ = ("_name", "_inventory")

    def __init__(self, name: str) -> None:
        if not name:
            raise InvalidArgument("Hero name cannot be empty")
        self._name = name
        self._inventory: SortedMap[str, int] = SortedMap()

    # -----------------------------
    # Identity
    # -----------------------------
    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        if not name:
            raise InvalidArgument("Hero name cannot be empty")
        self._name = name

    # -----------------------------
    # Inventory
    # -----------------------------
    @property
    def inventory(self) -> SortedMap[str, int]:
        """A copy of the inventory; changing it does not affect the hero."""
        return self._inventory.copy()

    def count(self, item: str) -> int:
        """Return how many of ``item`` the hero holds (0 when never collected)."""
        result = self._inventory.find(item)
        return result.value if result.found else 0

    def display_inventory(self, out: Optional[TextIO] = None) -> None:
        stream = out if out is not None else sys.stdout
        stream.write(f"{self._name}'s Inventory:\n")
        self._inventory.display(stream)

    def collect_item(self, item: str) -> None:
        """Add one ``item``, creating the entry if it is new."""
        result = self._inventory.find(item)
        if result.found:
            self._inventory.insert(item, result.value + 1)
        else:
            self._inventory.insert(item, 1)

    # -----------------------------
    # Crafting
    # -----------------------------
    def _tally(self, requirements: Iterable[str]) -> SortedMap[str, int]:
        # Repeated names need that many units, e.g. ("Fiber", "Fiber").
        needed: SortedMap[str, int] = SortedMap()
        for item in requirements:
            needed.insert(item, needed.get(item, 0) + 1)
        return needed

    def can_craft(self, requirements: Iterable[str]) -> bool:
        """True when every required item is held in the needed quantity."""
        for item, qty in self._tally(requirements).items():
            if self.count(item) < qty:
                return False
        return True

    def craft(self, result: str, requirements: Sequence[str]) -> str:
        """Consume one of each requirement and collect ``result``.

        Spent items stay in the inventory with a count of 0.

        Raises:
            CraftError: if :meth:`can_craft` is False for ``requirements``.
        """
        if not self.can_craft(requirements):
            raise CraftError(f"Cannot craft {result} - missing requirements")

        for item in requirements:
            self._inventory.update(item, self._inventory.value_at(item) - 1)

        self.collect_item(result)
        logger.info("%s crafted %s", self._name, result)
        return result

    # -----------------------------
    # Gathering
    # -----------------------------
    def gather(
        self,
        products: Sequence[str],
        no_item_msg: str,
        found_msg: str,
        rng: random.Random,
    ) -> Tuple[Optional[str], str]:
        """Pick one of ``products`` at random, or nothing.

        The draw has ``len(products) + 1`` outcomes; the extra one means
        nothing was found. Returns ``(item or None, message)``.
        """
        index = rng.randrange(len(products) + 1)
        if index == len(products):
            logger.debug("%s gathered nothing", self._name)
            return None, no_item_msg

        item = products[index]
        self.collect_item(item)
        logger.debug("%s gathered %s", self._name, item)
        return item, f"{found_msg}{item}."

    def _gather_kind(self, kind: str, rng: random.Random) -> Tuple[Optional[str], str]:
        products, no_item_msg, found_msg = constants.GATHER_TABLE[kind]
        return self.gather(products, no_item_msg, found_msg, rng)

    def raw(self, rng: random.Random) -> Tuple[Optional[str], str]:
        """Mine for raw materials."""
        return self._gather_kind("raw", rng)

    def natural(self, rng: random.Random) -> Tuple[Optional[str], str]:
        """Forage for natural resources."""
        return self._gather_kind("natural", rng)

    def food(self, rng: random.Random) -> Tuple[Optional[str], str]:
        return self._gather_kind("food", rng)

    def hunt(self, rng: random.Random) -> Tuple[Optional[str], str]:
        return self._gather_kind("hunt", rng)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Hero({self._name!r}, items={len(self._inventory)})"
