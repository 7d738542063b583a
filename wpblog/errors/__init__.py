from wpblog.errors.base import (
    BaseAppError,
    create_exception_handler,
    error_response,
)
from wpblog.errors.blog import (
    BlogError,
    BlogFetchError,
    InvalidParameterError,
    PostNotFoundError,
    WordPressError,
    blog_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "BlogError",
    "BlogFetchError",
    "InvalidParameterError",
    "PostNotFoundError",
    "WordPressError",
    "blog_exception_handler",
    "create_exception_handler",
    "error_response",
    "validation_exception_handler",
]
