# tests/routes/conftest.py
"""Pytest configuration and fixtures for route tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient, Request, Response

from wpblog.main import app
from wpblog.middleware import init_services


@pytest.fixture
def wp_posts(make_wp_post) -> list[dict]:
    """Upstream payload served by the mocked WordPress API."""
    return [
        make_wp_post(49, "gp-website", "GP Website", tags=["nhs", "wordpress"]),
        make_wp_post(22, "nhs-app-uptake", "NHS App Uptake", tags=["nhs"]),
        make_wp_post(7, "care-home-proxy-access", "Care Home Proxy Access", tags=["care-homes"]),
        make_wp_post(5, "hello-world", "Hello World", cover_image=None),
    ]


@pytest.fixture
async def client(make_client, wp_posts) -> AsyncGenerator[AsyncClient]:
    """
    Create async HTTP client for testing FastAPI endpoints.

    Services are wired against a mocked WordPress API serving ``wp_posts``.
    """

    def handler(request: Request) -> Response:
        return Response(200, json=wp_posts)

    init_services(app, make_client(handler))
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def offline_client(make_client) -> AsyncGenerator[AsyncClient]:
    """Client whose WordPress upstream always fails."""
    init_services(app, make_client(lambda request: Response(503)))
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
