"""
FastAPI dependencies shared by the feature routers.
"""

from __future__ import annotations

from fastapi import Request

from .store import QuestionStore


def get_store(request: Request) -> QuestionStore:
    return request.app.state.store
