# wpblog/main.py

"""WordPress Blog API - cached WordPress posts re-exposed as site JSON routes."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from wpblog.configs import settings
from wpblog.errors import BlogError, blog_exception_handler, validation_exception_handler
from wpblog.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from wpblog.routes import blog_router, cache_router
from wpblog.schemas import HealthCheckResponse
from wpblog.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog posts from WordPress, cached and reshaped for the website",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)


routes = [
    blog_router,
    cache_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (BlogError, blog_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 00:00:00",
                        "upstream": "https://blog.faithnte.com/wp-json/wp/v2/posts",
                        "cache": {
                            "warm": True,
                            "source": "wordpress",
                            "total_posts": 12,
                            "age_seconds": 42.0,
                            "ttl_seconds": 300,
                            "expires_in": 258.0,
                            "hits": 10,
                            "misses": 1,
                            "refreshes": 1,
                        },
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> ORJSONResponse:
    """
    Health check endpoint with post cache status.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Version, timestamp, upstream endpoint and cache status.
        The status is ``degraded`` while fallback posts are being served.
    """
    cache_status = request.app.state.post_cache.status()
    status = "degraded" if cache_status.source == "fallback" else "ok"

    response = HealthCheckResponse(
        version=app.version,
        status=status,
        timestamp=today_str(),
        upstream=request.app.state.wordpress_client.api_url,
        cache=cache_status,
    )
    return ORJSONResponse(response.model_dump())


@app.get("/", tags=["🩺 Health"], summary="API root", include_in_schema=False)
async def root() -> ORJSONResponse:
    """Point clients at the blog routes and the documentation."""
    return ORJSONResponse(
        {
            "message": f"{app.title} is running",
            "docs": "/docs",
            "blog": "/api/blog",
        },
    )
