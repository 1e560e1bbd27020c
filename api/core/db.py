"""
asyncpg connection pool construction.

The pool itself is owned by `core.store.Store`; `api/main.py` opens it on
startup and closes it on shutdown.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .config import Settings

logger = logging.getLogger(__name__)


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq's sslmode in the DSN query string.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url(settings: Settings) -> str:
    url = settings.database_url.strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def create_pool(settings: Settings) -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=database_url(settings),
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )
    logger.info(
        "Database pool ready (min_size=%d, max_size=%d)",
        settings.db_pool_min_size,
        settings.db_pool_max_size,
    )
    return pool
