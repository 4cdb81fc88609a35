"""Ordered, key-unique linked map plus a small crafting game built on it."""

from .datastructures import Lookup, Node, SortedMap
from .errors import CraftError, CraftMapError, InvalidArgument, NotFound

__version__ = "0.1.0"

__all__ = [
    "Lookup",
    "Node",
    "SortedMap",
    "CraftError",
    "CraftMapError",
    "InvalidArgument",
    "NotFound",
]
