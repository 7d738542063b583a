# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator, Callable
from typing import Any

# Keep test runs off the filesystem; must happen before settings are imported
os.environ["LOG_TO_FILE"] = "false"

import pytest
from httpx import AsyncClient, MockTransport, Request, Response

from wpblog.clients.wordpress_client import WordPressClient

WPPostFactory = Callable[..., dict[str, Any]]
ClientFactory = Callable[[Callable[[Request], Response]], WordPressClient]


async def no_sleep(_: float) -> None:
    """Skip retry backoff in tests."""


@pytest.fixture
def make_wp_post() -> WPPostFactory:
    """Build WordPress ``/wp/v2/posts?_embed=true`` records."""

    def factory(
        post_id: int = 1,
        slug: str = "hello-world",
        title: str = "Hello World",
        tags: list[str] | None = None,
        status: str = "publish",
        author: str | None = "Jane Writer",
        cover_image: str | None = "https://example.com/cover.png",
        excerpt: str = "<p>A short excerpt&hellip;</p>\n",
    ) -> dict[str, Any]:
        embedded: dict[str, Any] = {
            "wp:term": [
                [{"id": 1, "name": "News", "slug": "news", "taxonomy": "category"}],
                [
                    {"id": 10 + i, "name": tag.title(), "slug": tag, "taxonomy": "post_tag"}
                    for i, tag in enumerate(tags or [])
                ],
            ],
        }
        if author is not None:
            embedded["author"] = [{"id": 1, "name": author, "slug": "jane"}]
        if cover_image is not None:
            embedded["wp:featuredmedia"] = [
                {"id": 5, "source_url": cover_image, "alt_text": "cover"},
            ]

        return {
            "id": post_id,
            "date": "2025-01-12T22:06:33",
            "date_gmt": "2025-01-12T22:06:33",
            "modified": "2025-02-03T20:04:28",
            "modified_gmt": "2025-02-03T20:04:28",
            "slug": slug,
            "status": status,
            "type": "post",
            "title": {"rendered": title},
            "content": {"rendered": f"<p>{title} body</p>"},
            "excerpt": {"rendered": excerpt},
            "author": 1,
            "featured_media": 5,
            "tags": [],
            "categories": [1],
            "meta": [],
            "_embedded": embedded,
        }

    return factory


@pytest.fixture
async def make_client() -> AsyncGenerator[ClientFactory]:
    """Create WordPress clients backed by an ``httpx.MockTransport`` handler."""
    clients: list[AsyncClient] = []

    def factory(handler: Callable[[Request], Response]) -> WordPressClient:
        http_client = AsyncClient(transport=MockTransport(handler))
        clients.append(http_client)
        return WordPressClient(
            http_client,
            api_url="https://wp.test/wp-json/wp/v2/posts",
            retry_delay=0,
            sleep=no_sleep,
        )

    yield factory

    for http_client in clients:
        await http_client.aclose()
