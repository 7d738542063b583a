from wpblog.schemas.blog import (
    APIResponse,
    BlogPost,
    BlogPostMeta,
    PaginatedBlogPosts,
    Pagination,
)
from wpblog.schemas.health import (
    CacheClearResponse,
    CacheStatus,
    CacheStatusResponse,
    HealthCheckResponse,
)
from wpblog.schemas.wordpress import WordPressPost

__all__ = [
    "APIResponse",
    "BlogPost",
    "BlogPostMeta",
    "CacheClearResponse",
    "CacheStatus",
    "CacheStatusResponse",
    "HealthCheckResponse",
    "PaginatedBlogPosts",
    "Pagination",
    "WordPressPost",
]
