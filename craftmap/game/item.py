from __future__ import annotations
from typing import Iterable, Tuple

from ..errors import InvalidArgument


class Item:
    """A craftable item: a name plus the item names consumed to make it."""

    __slots__ = ("_name", "_req")

    def __init__(self, name: str, requirements: Iterable[str] = ()) -> None:
        if not name:
            raise InvalidArgument("Item name cannot be empty")
        self._name = name
        self._req: Tuple[str, ...] = tuple(requirements)

    def get_name(self) -> str:
        return self._name

    def get_req(self) -> Tuple[str, ...]:
        return self._req

    def __str__(self) -> str:
        return ", ".join(self._req)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Item({self._name!r}, {self._req!r})"
