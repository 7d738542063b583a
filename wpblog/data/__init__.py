from wpblog.data.fallback_posts import FALLBACK_POSTS, get_fallback_posts

__all__ = ["FALLBACK_POSTS", "get_fallback_posts"]
