"""
Question / answer value types shared by the store and the routers.

Ids are assigned by the database on insert; the `New*` types are what a
caller hands in before that happens.
"""

from __future__ import annotations

from typing import NewType

from pydantic import BaseModel, ConfigDict

QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)

# Both id columns are serial (int4).
MAX_ID = 2**31 - 1
MIN_ID = -(2**31)


class NewQuestion(BaseModel):
    title: str
    content: str
    tags: list[str] | None = None


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: QuestionId
    title: str
    content: str
    tags: list[str] | None = None


class UpdateQuestion(BaseModel):
    """
    Partial patch: a field left as None keeps the stored value, it does not
    clear it.
    """

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None

    def apply_to(self, question: Question) -> Question:
        return question.model_copy(update=self.model_dump(exclude_none=True), deep=True)


class NewAnswer(BaseModel):
    content: str
    question_id: QuestionId


class Answer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: AnswerId
    content: str
    question_id: QuestionId
