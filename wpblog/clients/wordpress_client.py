# wpblog/clients/wordpress_client.py

from asyncio import sleep as asyncio_sleep
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import Any, Literal

from httpx import AsyncClient, Response, Timeout
from pydantic import ValidationError

from wpblog.configs import file_logger, settings
from wpblog.data import get_fallback_posts
from wpblog.decorators import RETRIABLE_EXCEPTIONS, with_retry
from wpblog.errors import WordPressError
from wpblog.schemas.blog import BlogPost
from wpblog.schemas.wordpress import WordPressPost
from wpblog.utils.helpers import strip_html

logger = file_logger(getLogger(__name__))

PostSource = Literal["wordpress", "fallback"]

TAG_TAXONOMY = "post_tag"


def extract_tags(wp_post: WordPressPost) -> list[str]:
    """Return the slugs of the embedded ``post_tag`` terms, in order and without duplicates."""
    if not wp_post.embedded:
        return []

    tags: list[str] = []
    for group in wp_post.embedded.terms:
        for term in group:
            if term.taxonomy == TAG_TAXONOMY and term.slug and term.slug not in tags:
                tags.append(term.slug)
    return tags


def transform_post(wp_post: WordPressPost, default_author: str = settings.DEFAULT_AUTHOR) -> BlogPost:
    """
    Reshape an upstream WordPress post into the site's `BlogPost` schema.

    Args:
        wp_post: Validated upstream record.
        default_author: Author name used when no embedded author is present.

    Returns:
        The site-specific post.
    """
    embedded = wp_post.embedded

    author = default_author
    if embedded and embedded.author and embedded.author[0].name:
        author = embedded.author[0].name

    cover_image = None
    if embedded and embedded.featured_media:
        cover_image = embedded.featured_media[0].source_url

    return BlogPost(
        id=str(wp_post.id),
        title=wp_post.title.rendered,
        slug=wp_post.slug,
        excerpt=strip_html(wp_post.excerpt.rendered),
        content=wp_post.content.rendered,
        author=author,
        published_at=wp_post.date,
        updated_at=wp_post.modified,
        tags=extract_tags(wp_post),
        featured=False,
        published=wp_post.status == "publish",
        cover_image=cover_image,
    )


class WordPressClient:
    """
    Async client for the WordPress REST posts endpoint.

    Fetches published posts with their embedded author, media and terms,
    retrying with a linear backoff and falling back to static posts when
    every attempt fails.

    Attributes:
        api_url: Posts endpoint URL.
        last_source: Origin of the posts returned by the last fetch.
    """

    def __init__(
        self,
        http_client: AsyncClient | None = None,
        *,
        api_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        default_author: str | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio_sleep,
    ) -> None:
        self.api_url = api_url or settings.WORDPRESS_API_URL
        self._timeout = timeout if timeout is not None else settings.WORDPRESS_TIMEOUT
        self._max_retries = max_retries if max_retries is not None else settings.WORDPRESS_MAX_RETRIES
        self._retry_delay = retry_delay if retry_delay is not None else settings.WORDPRESS_RETRY_DELAY
        self._default_author = default_author or settings.DEFAULT_AUTHOR
        self._sleep = sleep
        self._owns_client = http_client is None
        self._client = http_client or AsyncClient(timeout=Timeout(self._timeout))
        self.last_source: PostSource | None = None

        logger.info(f"WordPressClient initialized for: {self.api_url}")

    @property
    def params(self) -> dict[str, str | int]:
        return {
            "_embed": "true",
            "per_page": settings.WORDPRESS_PER_PAGE,
            "status": "publish",
        }

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": settings.WORDPRESS_USER_AGENT,
            "Cache-Control": "no-cache",
        }

    async def fetch_posts(self) -> list[BlogPost]:
        """
        Fetch and transform all published posts.

        Never raises for upstream failures: after the last failed attempt the
        static fallback posts are returned instead.

        Returns:
            Transformed posts from WordPress, or the fallback posts.
        """
        fetch = with_retry(
            max_retries=self._max_retries,
            delay=self._retry_delay,
            exec_retry=RETRIABLE_EXCEPTIONS,
            sleep=self._sleep,
        )(self._request_posts)

        try:
            posts = await fetch()
        except RETRIABLE_EXCEPTIONS as e:
            logger.error(f"All {self._max_retries} attempts to fetch WordPress posts failed: {e}")
            logger.warning("Returning fallback posts")
            self.last_source = "fallback"
            return get_fallback_posts()

        self.last_source = "wordpress"
        return posts

    async def _request_posts(self) -> list[BlogPost]:
        """Perform a single fetch attempt."""
        logger.info(f"Fetching WordPress posts from: {self.api_url}")

        response = await self._client.get(
            self.api_url,
            params=self.params,
            headers=self.headers,
            timeout=self._timeout,
        )
        logger.info(f"WordPress API response status: {response.status_code}")

        payload = self._parse(response)
        posts = self._transform_all(payload)
        logger.info(f"Transformed {len(posts)} posts successfully")
        return posts

    def _parse(self, response: Response) -> list[Any]:
        if response.is_error:
            mssg = f"WordPress API error: {response.status_code} {response.reason_phrase}"
            logger.error(mssg)
            raise WordPressError(mssg, status=response.status_code)

        payload = response.json()
        if not isinstance(payload, list):
            mssg = f"Unexpected WordPress payload type: {type(payload).__name__}"
            raise WordPressError(mssg, status=response.status_code)

        logger.info(f"Successfully fetched {len(payload)} posts from WordPress")
        if not payload:
            logger.warning("No posts returned from WordPress API")
            mssg = "No posts returned from API"
            raise WordPressError(mssg, status=response.status_code)

        return payload

    def _transform_all(self, payload: list[Any]) -> list[BlogPost]:
        posts: list[BlogPost] = []
        for item in payload:
            try:
                wp_post = WordPressPost.model_validate(item)
            except ValidationError as e:
                item_id = item.get("id") if isinstance(item, dict) else None
                logger.warning(f"Skipping malformed WordPress post {item_id}: {e.error_count()} errors")
                continue
            posts.append(transform_post(wp_post, self._default_author))

        if not posts:
            mssg = "No valid posts in WordPress response"
            raise WordPressError(mssg)

        return posts

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
