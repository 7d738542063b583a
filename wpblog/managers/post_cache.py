# wpblog/managers/post_cache.py
"""Process-wide cache of the full post list."""

from asyncio import Lock
from collections.abc import Callable
from logging import DEBUG, getLogger
from time import monotonic

from wpblog.clients.wordpress_client import PostSource, WordPressClient
from wpblog.configs import file_logger, settings
from wpblog.schemas.blog import BlogPost
from wpblog.schemas.health import CacheStatus

logger = file_logger(getLogger(__name__))


class PostCache:
    """
    Time-bounded in-memory cache for the posts fetched from WordPress.

    Features:
        - Whole-list replacement on every refresh
        - Single asyncio.Lock guard, so concurrent misses trigger one fetch
        - Hit/miss/refresh statistics
    """

    def __init__(
        self,
        client: WordPressClient,
        ttl: int | None = None,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        """
        Initialize the cache.

        Args:
            client: Client used to (re)load the posts.
            ttl: Cache duration in seconds.
            clock: Monotonic time source.
        """
        self._client = client
        self._ttl = ttl if ttl is not None else settings.POSTS_CACHE_TTL
        self._clock = clock
        self._lock = Lock()

        self._posts: list[BlogPost] | None = None
        self._fetched_at: float = 0.0
        self._source: PostSource | None = None

        self.hits = 0
        self.misses = 0
        self.refreshes = 0

    def _is_fresh(self, now: float) -> bool:
        return self._posts is not None and now - self._fetched_at < self._ttl

    async def get_posts(self) -> list[BlogPost]:
        """Return the cached posts, refreshing them once the cache has expired."""
        if self._is_fresh(self._clock()) and self._posts is not None:
            self.hits += 1
            return self._posts

        async with self._lock:
            # Another request may have refreshed while we waited
            now = self._clock()
            if self._is_fresh(now) and self._posts is not None:
                self.hits += 1
                return self._posts

            self.misses += 1
            posts = await self._client.fetch_posts()
            self._posts = posts
            self._fetched_at = now
            self._source = self._client.last_source
            self.refreshes += 1

            if logger.isEnabledFor(DEBUG):
                logger.debug("Post cache refreshed with %d posts from %s", len(posts), self._source)
            return posts

    async def invalidate(self) -> None:
        """Drop the cached posts so the next read fetches again."""
        async with self._lock:
            self._posts = None
            self._fetched_at = 0.0
            self._source = None
        logger.info("Post cache invalidated")

    def status(self) -> CacheStatus:
        """Report the current cache state."""
        if self._posts is None:
            return CacheStatus(
                warm=False,
                ttl_seconds=self._ttl,
                hits=self.hits,
                misses=self.misses,
                refreshes=self.refreshes,
            )

        age = max(self._clock() - self._fetched_at, 0.0)
        return CacheStatus(
            warm=age < self._ttl,
            source=self._source,
            total_posts=len(self._posts),
            age_seconds=round(age, 3),
            ttl_seconds=self._ttl,
            expires_in=round(max(self._ttl - age, 0.0), 3),
            hits=self.hits,
            misses=self.misses,
            refreshes=self.refreshes,
        )
