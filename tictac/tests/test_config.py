"""
Tests for environment configuration.
"""

import pytest

from tictac.config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("TICTAC_ENV", "TICTAC_HOST", "TICTAC_PORT", "TICTAC_LOG_LEVEL", "ALLOWED_ORIGINS", "TICTAC_SESSION_TTL"):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings()
    assert get_settings().debug is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TICTAC_ENV", "production")
    monkeypatch.setenv("TICTAC_PORT", "9001")
    monkeypatch.setenv("TICTAC_LOG_LEVEL", "debug")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test,http://b.test")
    monkeypatch.setenv("TICTAC_SESSION_TTL", "600")

    settings = get_settings()

    assert settings.port == 9001
    assert settings.log_level == "DEBUG"
    assert settings.allowed_origins == ["http://a.test", "http://b.test"]
    assert settings.session_ttl_seconds == 600
    assert settings.debug is False
