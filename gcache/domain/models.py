"""Domain models for gcache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Entry(Generic[K, V]):
    """Read-only key/value pair handed out by the cache."""

    key: K
    value: V


class CacheStats(BaseModel):
    """Point-in-time counters of a cache instance."""

    size: int
    max_size: int
    put_count: int
    eviction_count: int
    hit_count: int
    miss_count: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hit_rate(self) -> float:
        lookups = self.hit_count + self.miss_count
        if lookups == 0:
            return 0.0
        return round(self.hit_count / lookups, 4)


# --- HTTP schemas ---


class EntryResponse(BaseModel):
    key: str
    value: Any

    @classmethod
    def from_domain(cls, entry: Entry) -> "EntryResponse":
        return cls(key=str(entry.key), value=entry.value)


class MessageResponse(BaseModel):
    message: str
    key: str | None = None


class SnapshotResponse(BaseModel):
    """Entries ordered from least to most recently used."""

    entries: list[EntryResponse] = Field(default_factory=list)
    total: int = 0


class StatsResponse(CacheStats):
    summary: str


class ResizeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Range checks are left to the engine so callers get the domain error.
    max_size: int


class TrimRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_size: int = Field(..., ge=0)


class HealthResponse(BaseModel):
    status: Literal["ok"]
    service: str
    version: str
