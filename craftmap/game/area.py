from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..errors import InvalidArgument

# Exit order used for storage and for the "Possible Exits" line
DIRECTIONS = ("N", "E", "S", "W")
NO_EXIT = -1


class Area:
    """A location with a name, a description and up to four exits.

    Each exit holds the id of the neighbouring area, or ``-1`` if there is
    no exit that way.
    """

    __slots__ = ("_id", "_name", "_desc", "_exits")

    def __init__(
        self,
        id: int,
        name: str,
        desc: str,
        north: int = NO_EXIT,
        east: int = NO_EXIT,
        south: int = NO_EXIT,
        west: int = NO_EXIT,
    ) -> None:
        if not name:
            raise InvalidArgument("Area name cannot be empty")
        self._id = id
        self._name = name
        self._desc = desc
        self._exits = (north, east, south, west)

    def get_name(self) -> str:
        return self._name

    def get_id(self) -> int:
        return self._id

    def get_desc(self) -> str:
        return self._desc

    def check_direction(self, direction: str) -> int:
        """Return the area id reached by going ``direction``, else -1.

        ``direction`` is one of N/E/S/W in either case.
        """
        d = direction.upper()
        if d not in DIRECTIONS:
            return NO_EXIT
        return self._exits[DIRECTIONS.index(d)]

    def render(self) -> str:
        exits = "".join(f"{d} " for d, target in zip(DIRECTIONS, self._exits) if target != NO_EXIT)
        return f"{self._name}\n{self._desc}\nPossible Exits: {exits}\n"

    def print_area(self, out: Optional[TextIO] = None) -> None:
        stream = out if out is not None else sys.stdout
        stream.write(self.render())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Area({self._id!r}, {self._name!r})"
