from collections.abc import Awaitable, Callable
from logging import getLogger

from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.requests import Request
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)

from wpblog.configs import file_logger
from wpblog.errors.base import BaseAppError, create_exception_handler, error_response
from wpblog.utils.helpers import host

logger = file_logger(getLogger(__name__))


class BlogError(BaseAppError):
    """Base exception for blog errors."""

    def __init__(self, detail: str = "Blog error") -> None:
        super().__init__(detail=detail, status_code=HTTP_500_INTERNAL_SERVER_ERROR)


class PostNotFoundError(BlogError):
    """No post matches the requested slug."""

    def __init__(self, detail: str = "Post not found") -> None:
        super().__init__(detail)
        self.status_code = HTTP_404_NOT_FOUND


class InvalidParameterError(BlogError):
    """A required route parameter is missing or blank."""

    def __init__(self, detail: str = "Invalid parameter") -> None:
        super().__init__(detail)
        self.status_code = HTTP_400_BAD_REQUEST


class BlogFetchError(BlogError):
    """Reading posts failed while serving a request."""

    def __init__(self, detail: str = "Failed to fetch blog posts", message: str | None = None) -> None:
        super().__init__(detail)
        self.message = message or "Unknown error"


class WordPressError(BlogError):
    """The WordPress API returned an unusable response."""

    def __init__(self, detail: str = "WordPress API error", status: int | None = None) -> None:
        super().__init__(detail)
        self.status_code = HTTP_502_BAD_GATEWAY
        self.upstream_status = status


blog_exception_handler: Callable[[Request, Exception], Awaitable[ORJSONResponse]] = (
    create_exception_handler(logger)
)


async def validation_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Map request validation failures to a 400 envelope."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    message = "; ".join(
        f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in errors
    )
    logger.warning(f"Invalid request parameters for ip: {host(request)} for endpoint {request.url.path}")
    return error_response(HTTP_400_BAD_REQUEST, "Invalid request parameters", message or None)
