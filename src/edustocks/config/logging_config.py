"""Logging setup for the API process."""

import logging
import sys
from typing import Optional

from edustocks.config.settings import Settings, get_settings

APP_LOGGER = "edustocks"
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Send logs to stdout; the edustocks package logs at the configured level."""
    settings = settings or get_settings()
    app_level = _level(settings.log_level, logging.INFO)

    logging.basicConfig(
        level=app_level,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(APP_LOGGER).setLevel(app_level)

    # Request lines from the quote and tutor clients carry API keys in query strings
    http_level = _level(settings.http_log_level, logging.WARNING)
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
