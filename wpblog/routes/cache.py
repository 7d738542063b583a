# wpblog/routes/cache.py
"""Operational routes for the post cache."""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse

from wpblog.configs import file_logger
from wpblog.managers.post_cache import PostCache
from wpblog.schemas.health import CacheClearResponse, CacheStatusResponse

logger = file_logger(getLogger(__name__))

router = APIRouter(prefix="/cache", tags=["cache"])


# --- Dependency Injection ---
def get_post_cache(request: Request) -> PostCache:
    """Dependency to get the application's post cache."""
    return request.app.state.post_cache


# Type alias for cleaner signatures
CacheDep = Annotated[PostCache, Depends(get_post_cache)]


# --- Routes ---
@router.get(
    "/status",
    response_model=CacheStatusResponse,
    summary="Get post cache status",
    response_class=ORJSONResponse,
)
async def get_cache_status(cache: CacheDep) -> ORJSONResponse:
    """
    Get post cache status.

    Returns:
        Warmth, age, source and hit statistics of the cached posts.
    """
    response = CacheStatusResponse(status="success", data=cache.status())
    return ORJSONResponse(content=response.model_dump())


@router.delete(
    "/clear",
    response_model=CacheClearResponse,
    summary="Invalidate the post cache",
    response_class=ORJSONResponse,
)
async def clear_cache(request: Request, cache: CacheDep) -> ORJSONResponse:
    """
    Invalidate the post cache so the next read refetches from WordPress.

    Returns:
        Clear operation result.
    """
    await cache.invalidate()
    logger.info(f"Post cache cleared via {request.url.path}")
    response = CacheClearResponse(status="success", message="Cache cleared successfully")
    return ORJSONResponse(content=response.model_dump())
