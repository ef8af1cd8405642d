"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from parsing_strings.core.config import ParserSettings, get_settings


def test_default_settings():
    settings = ParserSettings()
    assert settings.log_level == "WARNING"
    assert settings.log_sentinels is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PARSING_STRINGS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PARSING_STRINGS_LOG_SENTINELS", "true")
    settings = ParserSettings()
    assert settings.log_level == "DEBUG"
    assert settings.log_sentinels is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
    first = get_settings()
    get_settings.cache_clear()
    assert get_settings() is not first
