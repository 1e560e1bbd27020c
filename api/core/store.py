"""
Question / answer persistence on top of an asyncpg pool (raw SQL).

Every call acquires one pooled connection, runs one auto-committed
statement and maps the returned rows to value types. Anything the driver
raises comes back out as `DatabaseQueryError`; the cause is logged here and
nowhere else.

When all pool connections are busy, callers wait in `acquire()` until one is
released (or until `acquire_timeout`, if configured).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any, Protocol

import asyncpg

from . import db
from .config import Settings
from .errors import DatabaseQueryError
from .schemas import MAX_ID, MIN_ID, Answer, NewAnswer, NewQuestion, Question, QuestionId, UpdateQuestion

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class QuestionStore(Protocol):
    async def get_questions(self, limit: int | None, offset: int) -> list[Question]: ...

    async def add_question(self, new_question: NewQuestion) -> Question: ...

    async def update_question(self, question: UpdateQuestion, question_id: int) -> Question: ...

    async def remove_question(self, question_id: int) -> bool: ...

    async def add_answer(self, new_answer: NewAnswer) -> Answer: ...

    async def close(self) -> None: ...


def _question_from_row(row: Any) -> Question:
    tags = row["tags"]
    return Question(
        id=QuestionId(int(row["id"])),
        title=str(row["title"]),
        content=str(row["content"]),
        tags=list(tags) if tags is not None else None,
    )


def _answer_from_row(row: Any) -> Answer:
    return Answer(
        id=int(row["id"]),
        content=str(row["content"]),
        question_id=int(row["question_id"]),
    )


class Store:
    """
    Handle to the questions/answers tables.

    Cheap to share: every request can use the same instance, the pool does
    the connection bookkeeping.
    """

    def __init__(self, pool: asyncpg.Pool, *, acquire_timeout: float | None = None) -> None:
        self._pool = pool
        self._acquire_timeout = acquire_timeout

    @classmethod
    async def connect(cls, settings: Settings) -> Store:
        pool = await db.create_pool(settings)
        return cls(pool, acquire_timeout=settings.db_acquire_timeout)

    async def close(self) -> None:
        await self._pool.close()

    @asynccontextmanager
    async def _connection(self, operation: str) -> AsyncIterator[asyncpg.Connection]:
        try:
            async with self._pool.acquire(timeout=self._acquire_timeout) as conn:
                yield conn
        except _DRIVER_ERRORS as exc:
            logger.error("%s failed: %s", operation, exc, exc_info=exc)
            raise DatabaseQueryError(operation) from exc

    async def _fetch(self, operation: str, sql: str, *args: Any) -> Sequence[Any]:
        async with self._connection(operation) as conn:
            return await conn.fetch(sql, *args)

    async def _fetch_one(self, operation: str, sql: str, *args: Any) -> Any | None:
        async with self._connection(operation) as conn:
            return await conn.fetchrow(sql, *args)

    async def get_questions(self, limit: int | None, offset: int) -> list[Question]:
        """
        Questions in ascending id order. LIMIT NULL means no limit in Postgres.
        """
        rows = await self._fetch(
            "get_questions",
            """
            SELECT id, title, content, tags
            FROM questions
            ORDER BY id ASC
            LIMIT $1
            OFFSET $2
            """,
            limit,
            offset,
        )
        return [_question_from_row(r) for r in rows]

    async def add_question(self, new_question: NewQuestion) -> Question:
        row = await self._fetch_one(
            "add_question",
            """
            INSERT INTO questions (title, content, tags)
            VALUES ($1, $2, $3)
            RETURNING id, title, content, tags
            """,
            new_question.title,
            new_question.content,
            new_question.tags,
        )
        if row is None:
            logger.error("add_question failed: insert returned no row")
            raise DatabaseQueryError("add_question")
        return _question_from_row(row)

    async def update_question(self, question: UpdateQuestion, question_id: int) -> Question:
        """
        Merge the non-None fields of `question` into row `question_id`.

        An id that matches no row is reported the same way as a driver
        failure (`DatabaseQueryError`).
        """
        row = await self._fetch_one(
            "update_question",
            """
            UPDATE questions
            SET title = COALESCE($1, title),
                content = COALESCE($2, content),
                tags = COALESCE($3, tags)
            WHERE id = $4
            RETURNING id, title, content, tags
            """,
            question.title,
            question.content,
            question.tags,
            question_id,
        )
        if row is None:
            logger.error("update_question failed: no question with id %d", question_id)
            raise DatabaseQueryError("update_question")
        return _question_from_row(row)

    async def remove_question(self, question_id: int) -> bool:
        # An id outside int4 cannot match a row, and asyncpg cannot encode it.
        if not MIN_ID <= question_id <= MAX_ID:
            return False
        row = await self._fetch_one(
            "remove_question",
            """
            DELETE FROM questions
            WHERE id = $1
            RETURNING id
            """,
            question_id,
        )
        return row is not None

    async def add_answer(self, new_answer: NewAnswer) -> Answer:
        # question_id is not checked here; a foreign key, if the schema has
        # one, fails the insert.
        row = await self._fetch_one(
            "add_answer",
            """
            INSERT INTO answers (content, question_id)
            VALUES ($1, $2)
            RETURNING id, content, question_id
            """,
            new_answer.content,
            new_answer.question_id,
        )
        if row is None:
            logger.error("add_answer failed: insert returned no row")
            raise DatabaseQueryError("add_answer")
        return _answer_from_row(row)
