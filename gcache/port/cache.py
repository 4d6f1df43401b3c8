"""Cache port: Protocol for the LRU cache engine."""

from __future__ import annotations

from collections import OrderedDict
from typing import Hashable, Iterator, Protocol, runtime_checkable

from ..domain.models import CacheStats, Entry


@runtime_checkable
class CachePort(Protocol):
    """Port for a bounded, recency-ordered key-value cache.

    Keys and values are left untyped here; LRUCache carries the generic
    parameters.
    """

    def get(self, key: Hashable) -> object | None:
        """Retrieve a cached value and mark it most recently used, or None."""
        ...

    def put(self, key: Hashable, value: object) -> object:
        """Store a value, trimming the cache first when it is full."""
        ...

    def remove(self, key: Hashable) -> bool:
        """Delete an entry, returning whether anything was removed."""
        ...

    def update(self, key: Hashable, value: object) -> Entry:
        """Replace (or insert) the value stored for key."""
        ...

    def trim_to_size(self, target_size: int) -> None:
        """Evict least recently used entries until size <= target_size."""
        ...

    def resize(self, max_size: int) -> None:
        """Change the capacity ceiling and trim to it."""
        ...

    def evict_all(self) -> None:
        """Drop every entry."""
        ...

    def snapshot(self) -> OrderedDict:
        """Return an independent copy of the store in recency order."""
        ...

    def iterate(self) -> Iterator[Entry]:
        """Return a single-pass iterator over the current entries."""
        ...

    def stats(self) -> CacheStats:
        """Return the current counters."""
        ...

    def __len__(self) -> int:
        """Return the number of cached entries."""
        ...
