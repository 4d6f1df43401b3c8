"""LRU cache engine with hit/miss/put/eviction accounting."""

from __future__ import annotations

from collections import OrderedDict
from threading import RLock
from typing import Generic, Hashable, Iterator, TypeVar

import structlog

from ..domain.errors import EmptyCacheError, InvalidArgumentError, InvalidCapacityError
from ..domain.models import CacheStats, Entry

logger = structlog.get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """Bounded cache evicting the least recently used entries.

    The store is an ``OrderedDict`` kept in recency order, least recently
    used first. When a put finds the cache full, the cache is trimmed down to
    80% of its capacity before the new entry goes in, so evictions happen in
    batches rather than one per insert.

    Removing a key is accounted as an eviction. Clearing the cache resets the
    size but leaves the other counters alone.
    """

    def __init__(self, max_size: int) -> None:
        if max_size <= 0:
            raise InvalidCapacityError(max_size)
        self._max_size = max_size
        self._store: OrderedDict[K, V] = OrderedDict()
        self._lock = RLock()
        self._size = 0
        self._put_count = 0
        self._eviction_count = 0
        self._hit_count = 0
        self._miss_count = 0

    def resize(self, max_size: int) -> None:
        if max_size <= 0:
            raise InvalidCapacityError(max_size)
        with self._lock:
            previous = self._max_size
            self._max_size = max_size
            self.trim_to_size(max_size)
        logger.info("cache resized", previous_max_size=previous, max_size=max_size, size=self._size)

    def trim_to_size(self, target_size: int) -> None:
        """Evict from the least recently used end until size <= target_size.

        The capacity ceiling is left untouched.
        """
        evicted = 0
        with self._lock:
            while self._size > 0 and self._size > target_size:
                self._store.popitem(last=False)
                self._size -= 1
                self._eviction_count += 1
                evicted += 1
        if evicted:
            logger.debug("cache trimmed", evicted=evicted, target_size=target_size, size=self._size)

    def get(self, key: K) -> V | None:
        if key is None:
            raise InvalidArgumentError("key")
        with self._lock:
            if key not in self._store:
                self._miss_count += 1
                return None
            self._store.move_to_end(key)
            self._hit_count += 1
            return self._store[key]

    def remove(self, key: K) -> bool:
        if key is None:
            raise InvalidArgumentError("key")
        with self._lock:
            if key not in self._store:
                return False
            del self._store[key]
            self._size -= 1
            self._eviction_count += 1
            return True

    def put(self, key: K, value: V) -> V:
        """Insert or overwrite ``key``.

        Returns the previous value when the key was already cached, otherwise
        the value just inserted.
        """
        if key is None:
            raise InvalidArgumentError("key")
        if value is None:
            raise InvalidArgumentError("value")

        with self._lock:
            if self._size >= self._max_size:
                # floor(0.8 * max_size)
                self.trim_to_size(self._max_size * 4 // 5)

            self._put_count += 1
            previous = self._store.get(key)
            if previous is None:
                self._size += 1
            self._store[key] = value
            self._store.move_to_end(key)

        if previous is not None:
            return previous
        return value

    def update(self, key: K, value: V) -> Entry[K, V]:
        """Replace the entry for ``key``, inserting it when absent."""
        if key is None:
            raise InvalidArgumentError("key")
        if value is None:
            raise InvalidArgumentError("value")

        with self._lock:
            self.remove(key)
            self.put(key, value)
        return Entry(key, value)

    def evict_all(self) -> None:
        with self._lock:
            dropped = self._size
            self._store.clear()
            self._size = 0
        logger.info("cache cleared", dropped=dropped)

    def snapshot(self) -> OrderedDict[K, V]:
        """Return a copy of the store, least recently used first."""
        with self._lock:
            return OrderedDict(self._store)

    def iterate(self) -> Iterator[Entry[K, V]]:
        """Return a single-pass iterator over the entries in recency order.

        The order is captured when this is called; later mutations of the
        cache do not show up in an iterator already handed out. Reading
        through the iterator does not count as hits or refresh recency.

        Raises:
            EmptyCacheError: if the cache holds no entries.
        """
        with self._lock:
            if not self._store:
                raise EmptyCacheError()
            entries = [Entry(k, v) for k, v in self._store.items()]
        return iter(entries)

    # Statistics

    @property
    def size(self) -> int:
        return self._size

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def put_count(self) -> int:
        return self._put_count

    @property
    def eviction_count(self) -> int:
        return self._eviction_count

    @property
    def hit_count(self) -> int:
        return self._hit_count

    @property
    def miss_count(self) -> int:
        return self._miss_count

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=self._size,
                max_size=self._max_size,
                put_count=self._put_count,
                eviction_count=self._eviction_count,
                hit_count=self._hit_count,
                miss_count=self._miss_count,
            )

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._store

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"LRUCache(map={dict(self._store)!r}, size={self._size}, "
                f"max_size={self._max_size}, put_count={self._put_count}, "
                f"eviction_count={self._eviction_count}, hit_count={self._hit_count}, "
                f"miss_count={self._miss_count})"
            )
