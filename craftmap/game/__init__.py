from .area import Area
from .hero import Hero
from .item import Item

__all__ = [
    "Area",
    "Hero",
    "Item",
]
