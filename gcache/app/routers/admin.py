"""Administrative endpoints: capacity changes and bulk eviction."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from ...domain.models import CacheStats, ResizeRequest, TrimRequest
from ...port.cache import CachePort
from ..deps import get_cache_dep

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post("/resize", response_model=CacheStats)
async def resize(body: ResizeRequest, cache: CachePort = Depends(get_cache_dep)) -> CacheStats:
    cache.resize(body.max_size)
    return cache.stats()


@router.post("/trim", response_model=CacheStats)
async def trim(body: TrimRequest, cache: CachePort = Depends(get_cache_dep)) -> CacheStats:
    cache.trim_to_size(body.target_size)
    logger.info("manual trim", target_size=body.target_size)
    return cache.stats()


@router.post("/evict", response_model=CacheStats)
async def evict_all(cache: CachePort = Depends(get_cache_dep)) -> CacheStats:
    cache.evict_all()
    return cache.stats()
