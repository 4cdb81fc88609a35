from __future__ import annotations

import copy
import logging
import sys
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    NamedTuple,
    Optional,
    Protocol,
    TextIO,
    Tuple,
    TypeVar,
    Union,
)

from ..errors import NotFound
from .node import Node

logger = logging.getLogger(__name__)


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any) -> bool: ...


K = TypeVar("K", bound=SupportsOrdering)
V = TypeVar("V")
D = TypeVar("D")


class Lookup(NamedTuple):
    """Outcome of :meth:`SortedMap.find`.

    ``found`` tells a stored ``None`` apart from a missing key.
    """

    found: bool
    value: Any = None


_MISSING = Lookup(False)


class SortedMap(Generic[K, V]):
    """Key-unique mapping stored as a singly-linked chain in ascending key order.

    Implementation notes
    --------------------
    • ``_head`` owns the first :class:`Node`; every node owns its successor.
    • Keys are distinct and strictly ascending after every call.
    • Inserting an existing key overwrites its value in place; nothing moves.
    • Lookups and inserts scan from the head, so they are O(n).
    • Copies are built by re-inserting each pair, never by sharing nodes.
    """

    __slots__ = ("_head", "_size")

    def __init__(
        self,
        it: Optional[Union["SortedMap[K, V]", Iterable[Tuple[K, V]]]] = None,
    ) -> None:
        self._head: Optional[Node[K, V]] = None
        self._size: int = 0
        if it is not None:
            self._insert_all(it)

    # ------------------------------- internals -------------------------------

    def _insert_all(self, it: Union["SortedMap[K, V]", Iterable[Tuple[K, V]]]) -> None:
        # Accept other maps, dict-likes or iterables of pairs
        if isinstance(it, SortedMap):
            pairs: Iterable[Tuple[K, V]] = it.items()
        elif hasattr(it, "items"):
            pairs = it.items()  # type: ignore[union-attr]
        else:
            pairs = it
        for k, v in pairs:
            self.insert(k, v)

    def _find_node(self, key: K) -> Optional[Node[K, V]]:
        """Return the node holding ``key`` or None.

        Stops early once a greater key is seen since the chain is sorted.
        """
        current = self._head
        while current is not None:
            if current.key == key:
                return current
            if key < current.key:
                return None
            current = current.next
        return None

    # --------------------------------- API -----------------------------------

    def insert(self, key: K, value: V) -> None:
        """Insert ``key`` at its ordered position, or overwrite its value.

        Size grows by one only when the key was absent.
        """
        head = self._head

        # Empty chain
        if head is None:
            self._head = Node(key, value)
            self._size += 1
            return

        # New smallest key
        if key < head.key:
            self._head = Node(key, value, head)
            self._size += 1
            return

        if key == head.key:
            head.set_value(value)
            return

        current = head
        while current.next is not None:
            following = current.next
            if key == following.key:
                following.set_value(value)
                return
            if key < following.key:
                current.set_next(Node(key, value, following))
                self._size += 1
                return
            current = following

        # Largest key so far: append at the tail
        current.set_next(Node(key, value))
        self._size += 1

    def update(self, key: K, value: V) -> None:
        """Overwrite the value of an existing key.

        Raises:
            NotFound: if ``key`` is absent. The map is left untouched.
        """
        self.at(key).set_value(value)

    def at(self, key: K) -> Node[K, V]:
        """Return the node holding ``key``.

        The handle is only valid until the next mutating call.

        Raises:
            NotFound: if ``key`` is absent.
        """
        node = self._find_node(key)
        if node is None:
            raise NotFound(key)
        return node

    def value_at(self, key: K) -> V:
        """Return the value stored for ``key``.

        Raises:
            NotFound: if ``key`` is absent.
        """
        return self.at(key).value

    def find(self, key: K) -> Lookup:
        """Look ``key`` up without raising.

        Returns ``Lookup(True, value)`` when present and ``Lookup(False)``
        otherwise.
        """
        node = self._find_node(key)
        if node is None:
            return _MISSING
        return Lookup(True, node.value)

    def get(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Safe accessor: return the value for ``key`` or ``default``."""
        result = self.find(key)
        return result.value if result.found else default

    def get_size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Unlink every node and reset to empty. Safe on an empty map."""
        if self._head is None:
            return
        released = self._size
        current = self._head
        self._head = None
        while current is not None:
            following = current.next
            current.set_next(None)
            current = following
        self._size = 0
        logger.debug("cleared %d entries", released)

    def assign(self, other: "SortedMap[K, V]") -> "SortedMap[K, V]":
        """Replace this map's contents with a copy of ``other``'s pairs.

        Assigning a map to itself leaves it unchanged. Returns ``self``.
        """
        if other is self:
            return self
        self.clear()
        self._insert_all(other)
        logger.debug("assigned %d entries", self._size)
        return self

    def copy(self) -> "SortedMap[K, V]":
        """Return an independent map with the same pairs in the same order."""
        return SortedMap(self)

    # ------------------------------- traversal -------------------------------

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in ascending key order."""
        current = self._head
        while current is not None:
            yield (current.key, current.value)
            current = current.next

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    def render(self) -> str:
        """Return one ``key:value`` line per entry, ascending, newline-terminated."""
        lines = []
        current = self._head
        while current is not None:
            lines.append(f"{current}\n")
            current = current.next
        return "".join(lines)

    def display(self, out: Optional[TextIO] = None) -> None:
        """Write :meth:`render` output to ``out`` (stdout by default)."""
        stream = out if out is not None else sys.stdout
        stream.write(self.render())

    # ------------------------------ magic methods ----------------------------

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __getitem__(self, key: K) -> V:
        return self.value_at(key)

    def __contains__(self, key: object) -> bool:
        return self.find(key).found  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedMap):
            return NotImplemented
        return self._size == other._size and list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "SortedMap[K, V]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "SortedMap[K, V]":
        out: SortedMap[K, V] = SortedMap()
        memo[id(self)] = out
        for k, v in self.items():
            out.insert(copy.deepcopy(k, memo), copy.deepcopy(v, memo))
        return out

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"SortedMap({{{pairs}}})"
