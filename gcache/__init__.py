"""gcache: bounded LRU key-value cache service.

Usage:
    uv run python -m gcache
"""

from gcache.domain.models import CacheStats, Entry
from gcache.infra.cache import LRUCache

__all__ = ["CacheStats", "Entry", "LRUCache"]
__version__ = "0.1.0"
