# tests/errors/test_base.py
"""Tests for wpblog/errors/base.py and the blog error types."""

from unittest.mock import MagicMock

import orjson
from fastapi.exceptions import RequestValidationError

from wpblog.errors import (
    BaseAppError,
    BlogFetchError,
    InvalidParameterError,
    PostNotFoundError,
    WordPressError,
    create_exception_handler,
    validation_exception_handler,
)
from wpblog.errors.base import error_response


def make_request(host: str = "127.0.0.1", path: str = "/api/blog") -> MagicMock:
    request = MagicMock()
    request.client.host = host
    request.url.path = path
    return request


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500

    def test_str_representation(self) -> None:
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestBlogErrors:
    """Status codes of the blog error types."""

    def test_status_codes(self) -> None:
        assert PostNotFoundError().status_code == 404
        assert InvalidParameterError().status_code == 400
        assert BlogFetchError().status_code == 500
        assert WordPressError(status=503).status_code == 502

    def test_fetch_error_message_defaults(self) -> None:
        assert BlogFetchError().message == "Unknown error"
        assert BlogFetchError("Failed", "boom").message == "boom"


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    async def test_handler_with_app_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        response = await handler(make_request("192.168.1.1", "/api/test"), BaseAppError("Test error", 400))

        assert response.status_code == 400
        assert response.body == b'{"success":false,"error":"Test error"}'
        assert response.headers["access-control-allow-origin"] == "*"
        logger.warning.assert_called_once_with(
            "Test error for ip: 192.168.1.1 for endpoint /api/test",
        )

    async def test_handler_includes_message(self) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(make_request(), BlogFetchError("Failed to fetch blog posts", "boom"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {
            "success": False,
            "error": "Failed to fetch blog posts",
            "message": "boom",
        }

    async def test_handler_with_generic_exception(self) -> None:
        handler = create_exception_handler(MagicMock())

        response = await handler(make_request(), ValueError("Something went wrong"))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {"success": False, "error": "Internal Server Error"}


def test_error_response_without_message() -> None:
    response = error_response(404, "Post not found")

    assert response.status_code == 404
    assert orjson.loads(response.body) == {"success": False, "error": "Post not found"}


async def test_validation_exception_handler() -> None:
    exc = RequestValidationError(
        [{"loc": ("query", "page"), "msg": "Input should be greater than or equal to 1", "type": "greater_than_equal"}],
    )

    response = await validation_exception_handler(make_request(), exc)

    assert response.status_code == 400
    assert orjson.loads(response.body) == {
        "success": False,
        "error": "Invalid request parameters",
        "message": "query.page: Input should be greater than or equal to 1",
    }
