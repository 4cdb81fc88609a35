from .node import Node
from .sorted_map import Lookup, SortedMap

__all__ = [
    "Node",
    "Lookup",
    "SortedMap",
]
