"""Library configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class ParserSettings(BaseSettings):
    """Runtime knobs for the parsing functions."""

    model_config = {"env_prefix": "PARSING_STRINGS_"}

    log_level: str = "WARNING"
    log_sentinels: bool = False  # DEBUG-log every sentinel answer from parse_*


@lru_cache(maxsize=1)
def get_settings() -> ParserSettings:
    """Return the process-wide settings, read from the environment once."""
    return ParserSettings()
