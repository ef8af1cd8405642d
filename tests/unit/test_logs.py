"""Tests for library logging: setup, sentinel and raise logging."""

from __future__ import annotations

import logging

import pytest

from parsing_strings.core.config import ParserSettings
from parsing_strings.core.exceptions import NumberFormatError
from parsing_strings.core.logs import configure_logging
from parsing_strings.parsers import parse_decimal, parse_int16, parse_uint8


class TestConfigureLogging:
    def test_applies_level(self, library_logger):
        logger = configure_logging(ParserSettings(log_level="debug"))
        assert logger is library_logger
        assert logger.level == logging.DEBUG

    def test_adds_single_null_handler(self, library_logger):
        configure_logging(ParserSettings())
        configure_logging(ParserSettings())
        null_handlers = [h for h in library_logger.handlers if isinstance(h, logging.NullHandler)]
        assert len(null_handlers) == 1
        assert library_logger.level == logging.WARNING


class TestSentinelLogging:
    def test_silent_by_default(self, caplog):
        caplog.set_level(logging.DEBUG, logger="parsing_strings")
        assert parse_uint8("abc") == 255
        assert caplog.records == []

    def test_logged_when_enabled(self, monkeypatch, caplog):
        monkeypatch.setenv("PARSING_STRINGS_LOG_SENTINELS", "1")
        caplog.set_level(logging.DEBUG, logger="parsing_strings")
        parse_decimal("")
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.name == "parsing_strings.parsers.reals"
        assert "parse_decimal('') answered with sentinel" in record.getMessage()

    def test_parsed_values_are_not_logged(self, monkeypatch, caplog):
        monkeypatch.setenv("PARSING_STRINGS_LOG_SENTINELS", "1")
        caplog.set_level(logging.DEBUG, logger="parsing_strings")
        parse_uint8("12")
        assert caplog.records == []


def test_raised_errors_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="parsing_strings")
    with pytest.raises(NumberFormatError):
        parse_int16("x")
    assert "parse_int16 raising NumberFormatError" in caplog.text
