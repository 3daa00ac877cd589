"""
Snippr - Settings Tests
=========================
"""

import pytest
from pydantic import ValidationError

from snippr.config import Settings


def test_defaults(monkeypatch):
    """Without environment overrides the defaults should apply."""
    for name in ("BACKEND_HOST", "BACKEND_PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.backend_host == "0.0.0.0"
    assert settings.backend_port == 8000
    assert settings.log_level == "INFO"


def test_port_and_log_level_from_environment(monkeypatch):
    """Env vars should override port and log level, upper-casing the level."""
    monkeypatch.setenv("BACKEND_PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.backend_port == 9090
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_rejected(monkeypatch):
    """An unknown log level should fail validation."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_port_out_of_range_rejected(monkeypatch):
    """A privileged port should fail validation."""
    monkeypatch.setenv("BACKEND_PORT", "80")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_list(monkeypatch):
    """CORS_ORIGINS should split on commas, trimming blanks."""
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings(_env_file=None)

    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
