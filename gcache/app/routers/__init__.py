"""Expose route modules."""

from . import admin, cache, health, stats

__all__ = ["admin", "cache", "health", "stats"]
