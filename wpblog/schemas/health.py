from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CacheStatus(BaseModel):
    """Post cache status model."""

    model_config = ConfigDict(ser_json_timedelta="iso8601", ser_json_bytes="utf8")

    warm: bool = Field(description="Whether a post list is currently cached")
    source: Literal["wordpress", "fallback"] | None = Field(
        default=None,
        description="Where the cached posts came from",
    )
    total_posts: int = Field(default=0, description="Number of cached posts")
    age_seconds: float | None = Field(default=None, description="Age of the cached list")
    ttl_seconds: int = Field(description="Configured cache duration")
    expires_in: float | None = Field(default=None, description="Seconds until refresh")
    hits: int = 0
    misses: int = 0
    refreshes: int = 0


class CacheStatusResponse(BaseModel):
    """Cache status response model."""

    model_config = ConfigDict(ser_json_timedelta="iso8601", ser_json_bytes="utf8")

    status: str
    data: CacheStatus


class CacheClearResponse(BaseModel):
    """Cache clear response model."""

    model_config = ConfigDict(ser_json_timedelta="iso8601", ser_json_bytes="utf8")

    status: str
    message: str


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(ser_json_timedelta="iso8601", ser_json_bytes="utf8")

    version: str = Field(description="API version")
    status: str = Field(description="Overall health status")
    timestamp: str = Field(description="Current timestamp")
    upstream: str = Field(description="Configured WordPress posts endpoint")
    cache: CacheStatus = Field(description="Post cache status")
