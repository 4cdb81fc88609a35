"""Exception types shared by the container and the game layer."""

from __future__ import annotations

from typing import Any


class CraftMapError(Exception):
    """Base class for every error raised by ``craftmap``."""


class NotFound(CraftMapError, KeyError):
    """Raised when an operation requires a key that the map does not hold.

    Subclasses :class:`KeyError` so ``except KeyError`` call sites keep
    working, and keeps the missing key on ``.key``.
    """

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class InvalidArgument(CraftMapError, ValueError):
    """Raised when a required name is empty."""


class CraftError(CraftMapError):
    """Raised when a hero is asked to craft without the required items."""
