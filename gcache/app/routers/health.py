"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ... import __version__
from ...domain.models import HealthResponse
from ...infra.logging import SERVICE_NAME

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", service=SERVICE_NAME, version=__version__)
