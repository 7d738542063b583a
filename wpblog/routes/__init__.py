from wpblog.routes.blog import get_blog_service
from wpblog.routes.blog import router as blog_router
from wpblog.routes.cache import get_post_cache
from wpblog.routes.cache import router as cache_router

__all__ = [
    "blog_router",
    "cache_router",
    "get_blog_service",
    "get_post_cache",
]
