"""FakePool: stands in for an asyncpg pool, recording every statement."""

from __future__ import annotations

from typing import Any


class FakeConnection:
    """Returns canned rows (dicts) or raises `error` on every statement."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, error: BaseException | None = None) -> None:
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, sql: str, args: tuple[Any, ...]) -> None:
        self.calls.append((" ".join(sql.split()), args))
        if self.error is not None:
            raise self.error

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._record(sql, args)
        return list(self.rows)

    async def fetchrow(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self._record(sql, args)
        return self.rows[0] if self.rows else None


class _Acquire:
    def __init__(self, pool: FakePool) -> None:
        self._pool = pool

    async def __aenter__(self) -> FakeConnection:
        if self._pool.acquire_error is not None:
            raise self._pool.acquire_error
        self._pool.in_use += 1
        return self._pool.connection

    async def __aexit__(self, *exc_info: Any) -> bool:
        self._pool.in_use -= 1
        self._pool.released += 1
        return False


class FakePool:
    def __init__(self, connection: FakeConnection, acquire_error: BaseException | None = None) -> None:
        self.connection = connection
        self.acquire_error = acquire_error
        self.acquire_timeouts: list[float | None] = []
        self.in_use = 0
        self.released = 0
        self.closed = False

    def acquire(self, *, timeout: float | None = None) -> _Acquire:
        self.acquire_timeouts.append(timeout)
        return _Acquire(self)

    async def close(self) -> None:
        self.closed = True
