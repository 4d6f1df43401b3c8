"""Dependency wiring for FastAPI routes."""

from __future__ import annotations

from fastapi import Request

from ..infra.config import Settings
from ..port.cache import CachePort


def get_cache_dep(request: Request) -> CachePort:
    return request.app.state.cache


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings
