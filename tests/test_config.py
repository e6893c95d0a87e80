"""Settings tests — SETKIT_* environment variables drive logging configuration."""

import pytest
from pydantic import ValidationError

from setkit.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SETKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SETKIT_LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"


def test_env_prefix_and_case_normalization(monkeypatch):
    monkeypatch.setenv("SETKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("SETKIT_LOG_FORMAT", "text")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_unknown_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
