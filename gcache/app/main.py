"""Application factory for gcache."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .. import __version__
from ..domain.errors import (
    CacheError,
    EmptyCacheError,
    InvalidArgumentError,
    InvalidCapacityError,
)
from ..infra.cache import LRUCache
from ..infra.config import Settings, get_settings
from ..infra.logging import configure_logging
from ..port.cache import CachePort
from .routers import admin, cache, health, stats

logger = structlog.get_logger(__name__)

_ERROR_STATUS: dict[type[CacheError], int] = {
    InvalidCapacityError: status.HTTP_400_BAD_REQUEST,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    EmptyCacheError: status.HTTP_404_NOT_FOUND,
}


async def cache_error_handler(request: Request, exc: CacheError) -> JSONResponse:
    """Translate engine errors into 4xx responses."""
    status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
    logger.warning(
        "cache operation rejected",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(
    *,
    cache_override: CachePort | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create a FastAPI application instance.

    Args:
        cache_override: Optional pre-built cache, used by tests.
        settings: Optional settings; defaults to the cached environment settings.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format, settings.log_file)

    cache_engine = cache_override if cache_override is not None else LRUCache(settings.max_size)

    app = FastAPI(
        title="gcache",
        description="Bounded LRU key-value cache",
        version=__version__,
    )

    app.add_exception_handler(CacheError, cache_error_handler)

    app.include_router(health.router)
    app.include_router(cache.router)
    app.include_router(stats.router)
    app.include_router(admin.router)

    app.state.cache = cache_engine
    app.state.settings = settings

    logger.info("gcache configured", max_size=settings.max_size, log_file=settings.log_file)
    return app


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gcache.app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )
