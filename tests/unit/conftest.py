"""Unit test fixtures."""

from __future__ import annotations

import logging

import pytest

from parsing_strings.core.config import get_settings
from parsing_strings.core.logs import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the (possibly monkeypatched) environment per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def library_logger():
    """The library root logger, restored to its original state afterwards."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers
