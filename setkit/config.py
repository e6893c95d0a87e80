"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings only drive the ambient shell (logging); core operations never read them
    - get_settings() is cached (lru_cache) — single instance per process
    - log_level is always one of the stdlib level names, upper-cased

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SETKIT_ prefix: library settings never collide with the host application's
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from SETKIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SETKIT_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case ("debug", "Debug"); reject names logging does not know."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
