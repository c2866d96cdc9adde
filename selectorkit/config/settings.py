"""Library settings via Pydantic BaseSettings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from selectorkit.exceptions import ConfigError


class Settings(BaseSettings):
    model_config = {"env_prefix": "SELECTORKIT_", "env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    settings = Settings()
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        msg = f"Unknown log level: {settings.log_level!r}"
        raise ConfigError(msg)
    return settings
