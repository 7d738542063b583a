# tests/configs/test_settings.py
"""Tests for settings defaults and the JSON file logger."""

from logging import getLogger
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from pythonjsonlogger.json import JsonFormatter

from wpblog.configs import Settings, file_logger, settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WORDPRESS_API_URL", "POSTS_CACHE_TTL", "WORDPRESS_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)

    defaults = Settings(_env_file=None)

    assert defaults.WORDPRESS_API_URL == "https://blog.faithnte.com/wp-json/wp/v2/posts"
    assert defaults.WORDPRESS_TIMEOUT == 20.0
    assert defaults.WORDPRESS_MAX_RETRIES == 3
    assert defaults.WORDPRESS_RETRY_DELAY == 2.0
    assert defaults.POSTS_CACHE_TTL == 300
    assert defaults.DEFAULT_AUTHOR == "Faith Nte"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSTS_CACHE_TTL", "60")

    assert Settings(_env_file=None).POSTS_CACHE_TTL == 60


def test_file_logger_disabled() -> None:
    logger = getLogger("tests.file_logger.disabled")

    assert file_logger(logger) is logger
    assert logger.handlers == []


def test_file_logger_enabled(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "app.log"
    monkeypatch.setattr(settings, "LOG_TO_FILE", True)
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))
    logger = getLogger("tests.file_logger.enabled")

    try:
        file_logger(logger)
        file_logger(logger)

        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, JsonFormatter)
        assert log_file.parent.is_dir()
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
