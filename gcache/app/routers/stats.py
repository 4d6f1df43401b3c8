"""Statistics HTTP handler."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...domain.models import StatsResponse
from ...port.cache import CachePort
from ..deps import get_cache_dep

router = APIRouter(prefix="/api/v1", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(cache: CachePort = Depends(get_cache_dep)) -> StatsResponse:
    stats = cache.stats()
    return StatsResponse(**stats.model_dump(exclude={"hit_rate"}), summary=repr(cache))
