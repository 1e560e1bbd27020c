"""
In-process store with the same contract as `core.store.Store`.

Used by the test suite and for running the API without Postgres. One
`asyncio.Lock` guards both tables and the id counters; every operation,
read or write, holds it for its whole duration, so each call behaves like
a single statement. Callers always receive copies.
"""

from __future__ import annotations

import asyncio
import logging

from .errors import DatabaseQueryError
from .schemas import Answer, AnswerId, NewAnswer, NewQuestion, Question, QuestionId, UpdateQuestion

logger = logging.getLogger(__name__)


class InMemoryStore:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._questions: dict[QuestionId, Question] = {}
        self._answers: dict[AnswerId, Answer] = {}
        # Like a sequence: ids are never handed out twice, even after deletes.
        self._last_question_id = 0
        self._last_answer_id = 0

    async def close(self) -> None:
        return None

    async def get_questions(self, limit: int | None, offset: int) -> list[Question]:
        async with self._lock:
            ordered = [self._questions[k] for k in sorted(self._questions)]
        end = None if limit is None else offset + limit
        return [q.model_copy(deep=True) for q in ordered[offset:end]]

    async def add_question(self, new_question: NewQuestion) -> Question:
        async with self._lock:
            self._last_question_id += 1
            question = Question(
                id=QuestionId(self._last_question_id),
                **new_question.model_dump(),
            )
            self._questions[question.id] = question
        return question.model_copy(deep=True)

    async def update_question(self, question: UpdateQuestion, question_id: int) -> Question:
        async with self._lock:
            current = self._questions.get(QuestionId(question_id))
            if current is None:
                logger.error("update_question failed: no question with id %d", question_id)
                raise DatabaseQueryError("update_question")
            updated = question.apply_to(current)
            self._questions[updated.id] = updated
        return updated.model_copy(deep=True)

    async def remove_question(self, question_id: int) -> bool:
        async with self._lock:
            return self._questions.pop(QuestionId(question_id), None) is not None

    async def add_answer(self, new_answer: NewAnswer) -> Answer:
        async with self._lock:
            self._last_answer_id += 1
            answer = Answer(id=AnswerId(self._last_answer_id), **new_answer.model_dump())
            self._answers[answer.id] = answer
        return answer.model_copy(deep=True)
