"""Tests for the cache and health routes."""

from httpx import AsyncClient


async def test_cache_status_cold(client: AsyncClient) -> None:
    response = await client.get("/cache/status")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["warm"] is False
    assert body["data"]["source"] is None
    assert body["data"]["ttl_seconds"] == 300


async def test_cache_status_after_read(client: AsyncClient) -> None:
    await client.get("/api/blog")
    await client.get("/api/blog/tags")

    data = (await client.get("/cache/status")).json()["data"]

    assert data["warm"] is True
    assert data["source"] == "wordpress"
    assert data["total_posts"] == 4
    assert data["misses"] == 1
    assert data["hits"] == 1


async def test_cache_clear(client: AsyncClient) -> None:
    await client.get("/api/blog")

    response = await client.delete("/cache/clear")

    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": "Cache cleared successfully"}
    status = (await client.get("/cache/status")).json()["data"]
    assert status["warm"] is False


async def test_health_ok(client: AsyncClient) -> None:
    await client.get("/api/blog")

    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"
    assert body["upstream"] == "https://wp.test/wp-json/wp/v2/posts"
    assert body["cache"]["source"] == "wordpress"


async def test_health_degraded_on_fallback(offline_client: AsyncClient) -> None:
    await offline_client.get("/api/blog")

    body = (await offline_client.get("/health")).json()

    assert body["status"] == "degraded"
    assert body["cache"]["source"] == "fallback"


async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
