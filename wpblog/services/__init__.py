from wpblog.services.blog import BlogService, to_metas

__all__ = ["BlogService", "to_metas"]
