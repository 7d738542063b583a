"""Tests for the process-wide post cache."""

import asyncio

import pytest

from wpblog.managers.post_cache import PostCache
from wpblog.schemas.blog import BlogPost


def make_post(slug: str) -> BlogPost:
    return BlogPost(
        id=slug,
        title=slug.title(),
        slug=slug,
        author="Jane Writer",
        published_at="2025-01-01T00:00:00",
        updated_at="2025-01-01T00:00:00",
    )


class FakeClient:
    """Stand-in for `WordPressClient` counting fetches."""

    def __init__(self, source: str = "wordpress", delay: float = 0.0) -> None:
        self.calls = 0
        self.last_source: str | None = None
        self._source = source
        self._delay = delay

    async def fetch_posts(self) -> list[BlogPost]:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        self.last_source = self._source
        return [make_post(f"post-{self.calls}")]


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


async def test_serves_cached_posts_within_ttl(clock: FakeClock) -> None:
    client = FakeClient()
    cache = PostCache(client, ttl=300, clock=clock)

    first = await cache.get_posts()
    clock.now += 299
    second = await cache.get_posts()

    assert client.calls == 1
    assert first is second
    assert cache.hits == 1
    assert cache.misses == 1


async def test_refetches_after_ttl(clock: FakeClock) -> None:
    client = FakeClient()
    cache = PostCache(client, ttl=300, clock=clock)

    await cache.get_posts()
    clock.now += 300
    posts = await cache.get_posts()

    assert client.calls == 2
    assert posts[0].slug == "post-2"
    assert cache.refreshes == 2


async def test_concurrent_misses_fetch_once(clock: FakeClock) -> None:
    client = FakeClient(delay=0.01)
    cache = PostCache(client, ttl=300, clock=clock)

    results = await asyncio.gather(*(cache.get_posts() for _ in range(5)))

    assert client.calls == 1
    assert all(result is results[0] for result in results)


async def test_invalidate_forces_refetch(clock: FakeClock) -> None:
    client = FakeClient()
    cache = PostCache(client, ttl=300, clock=clock)

    await cache.get_posts()
    await cache.invalidate()
    await cache.get_posts()

    assert client.calls == 2


async def test_fallback_result_is_cached(clock: FakeClock) -> None:
    client = FakeClient(source="fallback")
    cache = PostCache(client, ttl=300, clock=clock)

    await cache.get_posts()
    await cache.get_posts()

    assert client.calls == 1
    assert cache.status().source == "fallback"


async def test_status(clock: FakeClock) -> None:
    cache = PostCache(FakeClient(), ttl=300, clock=clock)

    cold = cache.status()
    assert cold.warm is False
    assert cold.source is None
    assert cold.total_posts == 0
    assert cold.ttl_seconds == 300

    await cache.get_posts()
    clock.now += 100

    warm = cache.status()
    assert warm.warm is True
    assert warm.source == "wordpress"
    assert warm.total_posts == 1
    assert warm.age_seconds == 100
    assert warm.expires_in == 200

    clock.now += 250
    assert cache.status().warm is False
