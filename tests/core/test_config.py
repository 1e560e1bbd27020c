"""Tests for Settings.from_env."""

import pytest

from core.config import Settings

_ENV_NAMES = (
    "DATABASE_URL",
    "DB_POOL_MIN_SIZE",
    "DB_POOL_MAX_SIZE",
    "DB_COMMAND_TIMEOUT",
    "DB_ACQUIRE_TIMEOUT",
    "LOG_LEVEL",
    "CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.db_pool_max_size == 5
    assert settings.db_acquire_timeout is None
    assert settings.cors_origins == ("*",)


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", " postgresql://u:p@db:5432/kb ")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "10")
    monkeypatch.setenv("DB_ACQUIRE_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")

    settings = Settings.from_env()

    assert settings.database_url == "postgresql://u:p@db:5432/kb"
    assert settings.db_pool_max_size == 10
    assert settings.db_acquire_timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://a.example", "http://b.example")


def test_malformed_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "many")
    monkeypatch.setenv("DB_COMMAND_TIMEOUT", "soon")

    settings = Settings.from_env()

    assert settings.db_pool_max_size == 5
    assert settings.db_command_timeout == 30.0


def test_settings_are_immutable() -> None:
    settings = Settings()

    with pytest.raises(AttributeError):
        settings.database_url = "postgresql://elsewhere"  # type: ignore[misc]
