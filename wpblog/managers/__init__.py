from wpblog.managers.post_cache import PostCache

__all__ = ["PostCache"]
