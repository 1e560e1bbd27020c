"""Tests for pool construction helpers."""

from unittest.mock import AsyncMock, patch

import pytest

from core import db
from core.config import Settings


def test_database_url_requires_a_value() -> None:
    with pytest.raises(RuntimeError, match="DATABASE_URL is not set"):
        db.database_url(Settings(database_url="  "))


def test_sslmode_is_stripped() -> None:
    settings = Settings(database_url="postgresql://u:p@db/kb?sslmode=require&application_name=kb")

    assert db.database_url(settings) == "postgresql://u:p@db/kb?application_name=kb"


def test_url_without_query_is_untouched() -> None:
    assert db.database_url(Settings(database_url="postgresql://db/kb")) == "postgresql://db/kb"


async def test_create_pool_uses_settings() -> None:
    settings = Settings(
        database_url="postgresql://db/kb",
        db_pool_min_size=2,
        db_pool_max_size=7,
        db_command_timeout=12.0,
    )
    sentinel = object()

    with patch("core.db.asyncpg.create_pool", new=AsyncMock(return_value=sentinel)) as create_pool:
        pool = await db.create_pool(settings)

    assert pool is sentinel
    create_pool.assert_awaited_once_with(
        dsn="postgresql://db/kb",
        min_size=2,
        max_size=7,
        command_timeout=12.0,
    )
