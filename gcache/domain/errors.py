"""Domain specific exceptions."""

from __future__ import annotations


class CacheError(Exception):
    """Base class for cache engine errors."""


class InvalidCapacityError(CacheError, ValueError):
    """Raised when a cache capacity is not strictly positive."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"max_size must be greater than 0, got {capacity}")


class InvalidArgumentError(CacheError, ValueError):
    """Raised when a keyed operation receives a missing key or value."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"The provided {argument} is None")


class EmptyCacheError(CacheError):
    """Raised when iterating over a cache with no entries."""

    def __init__(self) -> None:
        super().__init__("Cannot iterate over an empty cache")
