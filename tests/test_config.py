"""Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from discovery.config import Settings, get_settings, reset_settings_cache


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("ACTIVITY_POLL_INTERVAL_SECONDS", raising=False)
    monkeypatch.delenv("ACTIVITY_REQUEST_TIMEOUT_SECONDS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.session_cookie_name == "session_token"
    assert settings.activity_poll_interval_seconds == 10.0
    assert settings.activity_request_timeout_seconds == 8.0
    assert settings.cors_allow_origins == ["http://localhost:3000"]


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ACTIVITY_POLL_INTERVAL_SECONDS", "30")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://discovery.example.com"]')

    settings = Settings(_env_file=None)

    assert settings.activity_poll_interval_seconds == 30.0
    assert settings.cors_allow_origins == ["https://discovery.example.com"]


def test_timeout_must_not_exceed_interval(monkeypatch) -> None:
    monkeypatch.setenv("ACTIVITY_POLL_INTERVAL_SECONDS", "5")
    monkeypatch.setenv("ACTIVITY_REQUEST_TIMEOUT_SECONDS", "6")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_secret_key_is_required(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_KEY")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_reset_settings_cache_reloads_environment(monkeypatch) -> None:
    original = get_settings()
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    try:
        assert get_settings() is original
        reset_settings_cache()
        assert get_settings().log_level == "DEBUG"
    finally:
        monkeypatch.delenv("LOG_LEVEL")
        reset_settings_cache()
