"""Cache entry HTTP handlers (thin)."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from ...domain.models import Entry, EntryResponse, MessageResponse, SnapshotResponse
from ...port.cache import CachePort
from ..deps import get_cache_dep

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["cache"])


@router.get("/cache/{key}", response_model=EntryResponse)
async def get_value(key: str, cache: CachePort = Depends(get_cache_dep)) -> EntryResponse:
    value = cache.get(key)
    if value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Key not found")
    return EntryResponse(key=key, value=value)


@router.post(
    "/cache/{key}/{value}",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def put_value(
    key: str, value: str, cache: CachePort = Depends(get_cache_dep)
) -> MessageResponse:
    cache.put(key, value)
    logger.info("entry stored", key=key)
    return MessageResponse(message="Key-value pair added to cache", key=key)


@router.delete("/cache/{key}", response_model=MessageResponse)
async def remove_value(key: str, cache: CachePort = Depends(get_cache_dep)) -> MessageResponse:
    if not cache.remove(key):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Key not found")
    logger.info("entry removed", key=key)
    return MessageResponse(message="Key removed from cache", key=key)


@router.put("/cache/{key}/{new_value}", response_model=EntryResponse)
async def update_value(
    key: str, new_value: str, cache: CachePort = Depends(get_cache_dep)
) -> EntryResponse:
    # update() upserts, so there is no not-found branch here.
    entry = cache.update(key, new_value)
    logger.info("entry updated", key=key)
    return EntryResponse.from_domain(entry)


@router.get("/snapshot", response_model=SnapshotResponse)
async def get_snapshot(cache: CachePort = Depends(get_cache_dep)) -> SnapshotResponse:
    entries = [
        EntryResponse.from_domain(Entry(key, value))
        for key, value in cache.snapshot().items()
    ]
    return SnapshotResponse(entries=entries, total=len(entries))


@router.get("/entries", response_model=SnapshotResponse)
async def list_entries(cache: CachePort = Depends(get_cache_dep)) -> SnapshotResponse:
    """Walk the cache with iterate(); an empty cache yields 404."""
    entries = [EntryResponse.from_domain(entry) for entry in cache.iterate()]
    return SnapshotResponse(entries=entries, total=len(entries))
