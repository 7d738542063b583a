"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the WordPress blog API.
"""

from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
WORDPRESS_API_URL = "https://blog.faithnte.com/wp-json/wp/v2/posts"
DEFAULT_AUTHOR = "Faith Nte"

# Response constants
POSTS_FETCH_ERROR = "Failed to fetch blog posts"
POST_FETCH_ERROR = "Failed to fetch blog post"
POSTS_BY_TAG_FETCH_ERROR = "Failed to fetch blog posts by tag"
TAGS_FETCH_ERROR = "Failed to fetch blog tags"
POST_NOT_FOUND = "Post not found"
SLUG_REQUIRED = "Slug parameter is required"
TAG_REQUIRED = "Tag parameter is required"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "WordPress Blog API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"

    # WordPress upstream
    WORDPRESS_API_URL: str = WORDPRESS_API_URL
    WORDPRESS_USER_AGENT: str = "Faithnte-Website/1.0"
    WORDPRESS_PER_PAGE: int = 100
    WORDPRESS_TIMEOUT: float = 20.0  # seconds
    WORDPRESS_MAX_RETRIES: int = 3
    WORDPRESS_RETRY_DELAY: float = 2.0  # seconds, grows linearly per attempt

    # Content
    POSTS_CACHE_TTL: int = 300  # 5 minutes
    DEFAULT_AUTHOR: str = DEFAULT_AUTHOR
    FEATURED_POSTS_COUNT: int = 3

    # CORS
    CORS_ALLOW_ORIGINS: list[str] = ["*"]


settings = Settings()


def file_logger(logger: Logger) -> Logger:
    """
    Attach a rotating JSON file handler to ``logger`` when file logging is on.

    Args:
        logger: Logger to extend.

    Returns:
        The same logger, for inline use at module level.
    """
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE)
    if any(
        isinstance(h, RotatingFileHandler) and Path(h.baseFilename) == log_file.resolve()
        for h in logger.handlers
    ):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger
