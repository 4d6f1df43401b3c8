"""Tests for the /api/v1/admin endpoints."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from gcache.infra.cache import LRUCache


def _fill(cache: LRUCache, n: int) -> None:
    for i in range(n):
        cache.put(f"k{i}", str(i))


@pytest.mark.asyncio
async def test_resize_shrinks_cache(client: AsyncClient, cache: LRUCache):
    _fill(cache, 5)
    resp = await client.post("/api/v1/admin/resize", json={"max_size": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["max_size"] == 2
    assert body["size"] == 2
    assert body["eviction_count"] == 3
    assert list(cache.snapshot()) == ["k3", "k4"]


@pytest.mark.asyncio
@pytest.mark.parametrize("max_size", [0, -1])
async def test_resize_rejects_non_positive(client: AsyncClient, cache: LRUCache, max_size: int):
    """Engine capacity errors map to 400 and leave the cache unchanged."""
    _fill(cache, 3)
    resp = await client.post("/api/v1/admin/resize", json={"max_size": max_size})
    assert resp.status_code == 400
    assert "greater than 0" in resp.json()["detail"]
    assert cache.max_size == 5
    assert cache.size == 3


@pytest.mark.asyncio
async def test_trim_keeps_capacity(client: AsyncClient, cache: LRUCache):
    _fill(cache, 4)
    resp = await client.post("/api/v1/admin/trim", json={"target_size": 1})
    assert resp.status_code == 200
    body = resp.json()
    assert body["size"] == 1
    assert body["max_size"] == 5
    assert list(cache.snapshot()) == ["k3"]


@pytest.mark.asyncio
async def test_trim_rejects_negative_target(client: AsyncClient):
    resp = await client.post("/api/v1/admin/trim", json={"target_size": -1})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_evict_all(client: AsyncClient, cache: LRUCache):
    _fill(cache, 3)
    resp = await client.post("/api/v1/admin/evict")
    assert resp.status_code == 200
    body = resp.json()
    assert body["size"] == 0
    assert body["put_count"] == 3
    assert len(cache.snapshot()) == 0
