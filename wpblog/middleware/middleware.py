# wpblog/middleware/middleware.py
"""
Middleware components for the WordPress blog API.

This module contains middleware for security headers, request logging and
CORS handling, plus the lifespan event handler that wires the WordPress
client, the post cache and the blog service onto the application state.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from wpblog.clients.wordpress_client import WordPressClient
from wpblog.configs import file_logger, settings
from wpblog.managers.post_cache import PostCache
from wpblog.services.blog import BlogService
from wpblog.utils.helpers import get_summary, host

# --- Logging Configuration ---
basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()


def init_services(app: FastAPI, client: WordPressClient) -> BlogService:
    """
    Attach the WordPress client, post cache and blog service to ``app.state``.

    Args:
        app: Application to wire.
        client: WordPress client the cache loads posts with.

    Returns:
        The blog service stored on the application state.
    """
    post_cache = PostCache(client)
    blog_service = BlogService(post_cache)
    app.state.wordpress_client = client
    app.state.post_cache = post_cache
    app.state.blog_service = blog_service
    return blog_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    # Startup
    logger.info(f"Starting {app.title}...")
    logger.info(f"{app.description}")

    try:
        client = WordPressClient()
        init_services(app, client)

        logger.info("Services initialized successfully")
        logger.info(f"  - WordPress posts endpoint: {client.api_url}")
        logger.info(f"  - Post cache TTL: {settings.POSTS_CACHE_TTL}s")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")

    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")

    try:
        await client.close()
        logger.info("Services cleaned up successfully")

    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins = settings.CORS_ALLOW_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in allowed_origins,
        allow_methods=["GET", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
