"""
Question endpoints.

Query parameters for the list endpoint are validated before the store is
touched; store failures propagate to the handlers in `core/errors.py`.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, Request, Response, status

from core.dependencies import get_store
from core.pagination import extract_pagination
from core.schemas import MAX_ID, MIN_ID, NewQuestion, Question, UpdateQuestion
from core.store import QuestionStore

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/questions", response_model=list[Question])
async def get_questions(
    request: Request,
    store: QuestionStore = Depends(get_store),
) -> list[Question]:
    """
    List questions in id order. `start` skips rows, `end` caps the count.
    """
    pagination = extract_pagination(request.query_params)
    logger.info("Listing questions (offset=%d, limit=%s)", pagination.offset, pagination.limit)
    return await store.get_questions(pagination.limit, pagination.offset)


@router.post("/questions", response_model=Question, status_code=status.HTTP_201_CREATED)
async def add_question(
    new_question: NewQuestion,
    store: QuestionStore = Depends(get_store),
) -> Question:
    return await store.add_question(new_question)


@router.put("/questions/{question_id}", response_model=Question)
async def update_question(
    question: UpdateQuestion,
    question_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    store: QuestionStore = Depends(get_store),
) -> Question:
    return await store.update_question(question, question_id)


@router.delete("/questions/{question_id}")
async def delete_question(
    question_id: int,
    store: QuestionStore = Depends(get_store),
) -> Response:
    if await store.remove_question(question_id):
        return Response(status_code=status.HTTP_200_OK)
    return Response(status_code=status.HTTP_404_NOT_FOUND)
