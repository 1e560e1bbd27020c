"""
Answer endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, status

from core.dependencies import get_store
from core.schemas import MAX_ID, MIN_ID, Answer, NewAnswer, QuestionId
from core.store import QuestionStore

router = APIRouter()


@router.post("/answers", response_model=Answer, status_code=status.HTTP_201_CREATED)
async def add_answer(
    # An empty form value arrives as "missing"; the default keeps "" valid.
    content: str = Form(""),
    question_id: int = Form(..., alias="questionId", ge=MIN_ID, le=MAX_ID),
    store: QuestionStore = Depends(get_store),
) -> Answer:
    """
    Form-encoded: `content` and `questionId`. The question is not looked up
    first.
    """
    new_answer = NewAnswer(content=content, question_id=QuestionId(question_id))
    return await store.add_answer(new_answer)
