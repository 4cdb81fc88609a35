from __future__ import annotations
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    """A single entry of a :class:`SortedMap` chain.

    Holds one key, one value and the only reference to the following node.
    The key is fixed at construction; the value and the link may change.
    Only the owning map rewires links, so ordering is its responsibility.
    """

    __slots__ = ("_key", "_value", "_next")

    def __init__(self, key: K, value: V, next: Optional["Node[K, V]"] = None) -> None:
        self._key = key
        self._value = value
        self._next = next

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    @property
    def next(self) -> Optional["Node[K, V]"]:
        return self._next

    def get_key(self) -> K:
        return self._key

    def get_value(self) -> V:
        return self._value

    def get_next(self) -> Optional["Node[K, V]"]:
        return self._next

    def set_value(self, value: V) -> None:
        """Replace the stored value in place."""
        self._value = value

    def set_next(self, next: Optional["Node[K, V]"]) -> None:
        """Point this node at ``next`` (or ``None`` to make it the tail).

        Raises:
            ValueError: if ``next`` is this node.
        """
        if next is self:
            raise ValueError("a node cannot link to itself")
        self._next = next

    def __str__(self) -> str:
        return f"{self._key}:{self._value}"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Node({self._key!r}, {self._value!r})"
