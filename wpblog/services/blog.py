# wpblog/services/blog.py
"""Read operations over the cached WordPress posts."""

from math import ceil

from wpblog.configs import settings
from wpblog.managers.post_cache import PostCache
from wpblog.schemas.blog import BlogPost, BlogPostMeta, PaginatedBlogPosts, Pagination


class BlogService:
    """
    Serve posts, pages of post metadata and tags from the post cache.

    Every operation reads the whole cached list; filtering, slicing and
    tag collection happen in memory.
    """

    def __init__(self, cache: PostCache, featured_count: int | None = None) -> None:
        self._cache = cache
        self._featured_count = (
            featured_count if featured_count is not None else settings.FEATURED_POSTS_COUNT
        )

    async def get_all_posts(self) -> list[BlogPost]:
        """Return every post, served from the cache while it is fresh."""
        return await self._cache.get_posts()

    async def get_paginated_posts(self, page: int = 1, limit: int = 10) -> PaginatedBlogPosts:
        """
        Return one page of post metadata.

        Args:
            page: 1-based page number.
            limit: Posts per page.

        Returns:
            The page slice with pagination details. A page past the end is
            returned empty, with the real totals.
        """
        all_posts = await self.get_all_posts()
        start = (page - 1) * limit
        page_posts = all_posts[start : start + limit]

        total_posts = len(all_posts)
        total_pages = ceil(total_posts / limit)

        return PaginatedBlogPosts(
            posts=to_metas(page_posts),
            pagination=Pagination(
                current_page=page,
                total_pages=total_pages,
                total_posts=total_posts,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    async def get_post_by_slug(self, slug: str) -> BlogPost | None:
        all_posts = await self.get_all_posts()
        return next((post for post in all_posts if post.slug == slug), None)

    async def get_featured_posts(self) -> list[BlogPost]:
        """Return the first posts, marked as featured, without touching the cached copies."""
        all_posts = await self.get_all_posts()
        return [
            post.model_copy(update={"featured": True})
            for post in all_posts[: self._featured_count]
        ]

    async def get_posts_by_tag(self, tag: str) -> list[BlogPost]:
        all_posts = await self.get_all_posts()
        return [post for post in all_posts if tag in post.tags]

    async def get_all_tags(self) -> list[str]:
        """Return the sorted set of tags used by any post."""
        all_posts = await self.get_all_posts()
        tags: set[str] = set()
        for post in all_posts:
            tags.update(post.tags)
        return sorted(tags)


def to_metas(posts: list[BlogPost]) -> list[BlogPostMeta]:
    """Convert posts to their metadata view."""
    return [post.to_meta() for post in posts]
