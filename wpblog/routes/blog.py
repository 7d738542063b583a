# wpblog/routes/blog.py

"""
Blog Routes.

Read-only endpoints re-exposing the WordPress posts in the site schema,
wrapped in the uniform `APIResponse` envelope.

Summary
-------
Endpoints include:
  - List posts (paginated, or the featured selection)
  - List tags
  - List posts by tag
  - Get post by slug

Dependencies
------------
  - `BlogServiceDep`: the `BlogService` created at application startup.

Headers
-------
Every response carries `Access-Control-Allow-Origin: *` so the site's
frontend can call the API from any origin.
"""

from logging import getLogger
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import ORJSONResponse

from wpblog.configs import file_logger
from wpblog.configs.settings import (
    POST_FETCH_ERROR,
    POST_NOT_FOUND,
    POSTS_BY_TAG_FETCH_ERROR,
    POSTS_FETCH_ERROR,
    SLUG_REQUIRED,
    TAG_REQUIRED,
    TAGS_FETCH_ERROR,
)
from wpblog.errors import BlogFetchError, InvalidParameterError, PostNotFoundError
from wpblog.errors.base import CORS_HEADERS
from wpblog.schemas.blog import APIResponse, BlogPost, BlogPostMeta, PaginatedBlogPosts
from wpblog.services.blog import BlogService, to_metas

router = APIRouter(prefix="/api/blog", tags=["📝 Blog"])

logger = file_logger(getLogger(__name__))

_ERROR_RESPONSES = {
    400: {
        "description": "Bad request",
        "content": {
            "application/json": {
                "example": {"success": False, "error": "Invalid request parameters"},
            },
        },
    },
    500: {
        "description": "Upstream or internal failure",
        "content": {
            "application/json": {
                "example": {
                    "success": False,
                    "error": POSTS_FETCH_ERROR,
                    "message": "Unknown error",
                },
            },
        },
    },
}

_META_EXAMPLE = {
    "id": "49",
    "title": "How We Transformed NHS GP Website with WordPress & Nightingale Theme",
    "slug": "gp-website-with-wordpress-nightingale-theme",
    "excerpt": "In May 2023, NHSE released a GP website benchmarking and improvement tool.",
    "author": "Faith Nte",
    "publishedAt": "2025-01-12T22:06:33",
    "tags": ["nhs", "wordpress", "website"],
    "featured": False,
    "coverImage": "https://blog.faithnte.com/wp-content/uploads/2025/01/cover.png",
}


def get_blog_service(request: Request) -> BlogService:
    """
    Resolve the `BlogService` dependency.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    BlogService
        Service instance stored on the application state.
    """
    return request.app.state.blog_service


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


def respond(response: APIResponse) -> ORJSONResponse:
    """Render an `APIResponse` envelope with the CORS header."""
    return ORJSONResponse(content=response.to_content(), headers=CORS_HEADERS)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=APIResponse[PaginatedBlogPosts | list[BlogPostMeta]],
    summary="List blog posts",
    description=(
        "Return a page of post metadata, or the featured posts when `featured=true`."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "data": {
                            "posts": [_META_EXAMPLE],
                            "pagination": {
                                "currentPage": 1,
                                "totalPages": 1,
                                "totalPosts": 1,
                                "hasNext": False,
                                "hasPrev": False,
                            },
                        },
                    },
                },
            },
        },
        **_ERROR_RESPONSES,
    },
    operation_id="blog_list_posts",
)
async def list_posts(
    service: BlogServiceDep,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="Posts per page")] = 10,
    featured: Annotated[bool, Query(description="Return only featured posts")] = False,
) -> ORJSONResponse:
    """
    List blog posts.

    Parameters
    ----------
    service : BlogService
        Blog service dependency.
    page : int
        Page number, starting at 1.
    limit : int
        Maximum number of posts per page.
    featured : bool
        When true, ignore pagination and return the featured posts.

    Returns
    -------
    ORJSONResponse
        Envelope holding `PaginatedBlogPosts` or a list of `BlogPostMeta`.
    """
    try:
        if featured:
            featured_posts = to_metas(await service.get_featured_posts())
            return respond(APIResponse[list[BlogPostMeta]](success=True, data=featured_posts))
        paginated = await service.get_paginated_posts(page, limit)
        return respond(APIResponse[PaginatedBlogPosts](success=True, data=paginated))
    except Exception as e:
        logger.exception("Error fetching blog posts")
        raise BlogFetchError(POSTS_FETCH_ERROR, str(e)) from e


@router.get(
    "/tags",
    response_class=ORJSONResponse,
    response_model=APIResponse[list[str]],
    summary="List blog tags",
    description="Return every tag used by a post, sorted alphabetically.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"success": True, "data": ["care-homes", "nhs", "wordpress"]},
                },
            },
        },
        500: _ERROR_RESPONSES[500],
    },
    operation_id="blog_list_tags",
)
async def list_tags(service: BlogServiceDep) -> ORJSONResponse:
    """Return the sorted tag list."""
    try:
        tags = await service.get_all_tags()
    except Exception as e:
        logger.exception("Error fetching blog tags")
        raise BlogFetchError(TAGS_FETCH_ERROR, str(e)) from e

    return respond(APIResponse[list[str]](success=True, data=tags))


@router.get(
    "/tags/{tag}",
    response_class=ORJSONResponse,
    response_model=APIResponse[list[BlogPostMeta]],
    summary="List blog posts by tag",
    description="Return the metadata of every post carrying the tag.",
    responses={
        200: {
            "content": {
                "application/json": {"example": {"success": True, "data": [_META_EXAMPLE]}},
            },
        },
        **_ERROR_RESPONSES,
    },
    operation_id="blog_posts_by_tag",
)
async def list_posts_by_tag(tag: str, service: BlogServiceDep) -> ORJSONResponse:
    """
    List posts by tag.

    Parameters
    ----------
    tag : str
        Tag slug to match exactly.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    ORJSONResponse
        Envelope holding a (possibly empty) list of `BlogPostMeta`.

    Raises
    ------
    InvalidParameterError
        If the tag is blank.
    BlogFetchError
        If the posts cannot be read.
    """
    if not tag.strip():
        raise InvalidParameterError(TAG_REQUIRED)

    try:
        posts = await service.get_posts_by_tag(tag)
    except Exception as e:
        logger.exception(f"Error fetching blog posts for tag {tag}")
        raise BlogFetchError(POSTS_BY_TAG_FETCH_ERROR, str(e)) from e

    return respond(APIResponse[list[BlogPostMeta]](success=True, data=to_metas(posts)))


@router.get(
    "/{slug}",
    response_class=ORJSONResponse,
    response_model=APIResponse[BlogPost],
    summary="Get blog post by slug",
    description="Return the full post, including its HTML content.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "data": {
                            **_META_EXAMPLE,
                            "content": "<p>In May 2023, NHSE released ...</p>",
                            "updatedAt": "2025-02-03T20:04:28",
                            "published": True,
                        },
                    },
                },
            },
        },
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"success": False, "error": POST_NOT_FOUND}},
            },
        },
        **_ERROR_RESPONSES,
    },
    operation_id="blog_get_by_slug",
)
async def get_post(slug: str, service: BlogServiceDep) -> ORJSONResponse:
    """
    Get a post by slug.

    Raises
    ------
    InvalidParameterError
        If the slug is blank.
    PostNotFoundError
        If no post has this slug.
    BlogFetchError
        If the posts cannot be read.
    """
    if not slug.strip():
        raise InvalidParameterError(SLUG_REQUIRED)

    try:
        post = await service.get_post_by_slug(slug)
    except Exception as e:
        logger.exception(f"Error fetching blog post {slug}")
        raise BlogFetchError(POST_FETCH_ERROR, str(e)) from e

    if post is None:
        raise PostNotFoundError(POST_NOT_FOUND)

    return respond(APIResponse[BlogPost](success=True, data=post))
