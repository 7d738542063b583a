"""
Blog models for the WordPress blog API.

This module defines the site-specific post schema served by the API: the
full `BlogPost`, its content-free `BlogPostMeta` view, the pagination
envelope and the uniform `APIResponse` wrapper. JSON field names are
camelCase, Python attributes are snake_case.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BlogPostMeta(BaseModel):
    """Post metadata for listings (never carries the HTML content)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Post ID", examples=["49"])
    title: str = Field(description="Post title")
    slug: str = Field(
        description="URL slug",
        examples=["gp-website-with-wordpress-nightingale-theme"],
    )
    excerpt: str = Field(default="", description="Plain-text excerpt")
    author: str = Field(description="Author display name", examples=["Faith Nte"])
    published_at: str = Field(
        alias="publishedAt",
        description="Publication timestamp as provided by WordPress",
        examples=["2025-01-12T22:06:33"],
    )
    tags: list[str] = Field(default_factory=list, description="Tag slugs")
    featured: bool = Field(default=False, description="Featured flag")
    cover_image: str | None = Field(
        default=None,
        alias="coverImage",
        description="Featured image URL",
    )


class BlogPost(BlogPostMeta):
    """Full blog post including rendered HTML content."""

    content: str = Field(default="", description="Rendered HTML content")
    updated_at: str = Field(
        alias="updatedAt",
        description="Last modification timestamp",
        examples=["2025-02-03T20:04:28"],
    )
    published: bool = Field(default=True, description="Whether the post is published")

    def to_meta(self) -> BlogPostMeta:
        """Return the metadata view of this post."""
        return BlogPostMeta.model_validate(
            self.model_dump(exclude={"content", "updated_at", "published"}),
        )


class Pagination(BaseModel):
    """Pagination details for a page of posts."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage", ge=1)
    total_pages: int = Field(alias="totalPages", ge=0)
    total_posts: int = Field(alias="totalPosts", ge=0)
    has_next: bool = Field(alias="hasNext")
    has_prev: bool = Field(alias="hasPrev")


class PaginatedBlogPosts(BaseModel):
    """A page of post metadata with its pagination details."""

    posts: list[BlogPostMeta]
    pagination: Pagination


class APIResponse(BaseModel, Generic[T]):
    """Uniform response envelope returned by every blog route."""

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None

    def to_content(self) -> dict[str, Any]:
        """Serialize with JSON aliases, dropping unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
