"""Logging setup and the shared sentinel/error log helpers."""

from __future__ import annotations

import logging
from typing import Any, Optional

from parsing_strings.core.config import ParserSettings, get_settings

ROOT_LOGGER_NAME = "parsing_strings"


def configure_logging(settings: Optional[ParserSettings] = None) -> logging.Logger:
    """Apply the configured level to the library logger.

    A NullHandler keeps the library silent unless the application configures
    handlers of its own.
    """
    if settings is None:
        settings = get_settings()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def log_sentinel(logger: logging.Logger, func_name: str, text: str, value: Any) -> Any:
    """Return ``value``, logging it as a sentinel answer when enabled."""
    if get_settings().log_sentinels:
        logger.debug("%s(%r) answered with sentinel %r", func_name, text, value)
    return value


def log_raise(logger: logging.Logger, func_name: str, exc: Exception) -> Exception:
    """Log ``exc`` at DEBUG and hand it back for the caller to raise."""
    logger.debug("%s raising %s: %s", func_name, type(exc).__name__, exc)
    return exc
