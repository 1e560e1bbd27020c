"""
Failure kinds produced by pagination and by the store, and their mapping to
HTTP responses.

The set is closed: routes never build error responses themselves, they let
one of these propagate and `register_error_handlers` turns it into a status
code and a short JSON body.

Database failures are logged by the store where they happen. The message a
client sees for them is deliberately generic.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

HTTP_416 = 416
HTTP_500 = 500


class KnowledgeBaseError(Exception):
    status_code: int = HTTP_500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ParseError(KnowledgeBaseError):
    """A numeric query parameter is not a base-10 non-negative integer."""

    status_code = HTTP_416

    def __init__(self, key: str, cause: ValueError) -> None:
        super().__init__(f"Can't parse parameter: {key}")
        self.key = key
        self.cause = cause


class MissingParameters(KnowledgeBaseError):
    status_code = HTTP_416

    def __init__(self, key: str) -> None:
        super().__init__("Missing parameter")
        self.key = key


class InvertedOrder(KnowledgeBaseError):
    status_code = HTTP_416

    def __init__(self, offset: int, limit: int) -> None:
        super().__init__("'start' can't be greater than 'end'")
        self.offset = offset
        self.limit = limit


class DatabaseQueryError(KnowledgeBaseError):
    """
    Any failure reported by the backing store, including an update that
    matched no row. `operation` names the store call for logs only.
    """

    status_code = HTTP_500

    def __init__(self, operation: str) -> None:
        super().__init__("Database error")
        self.operation = operation


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(KnowledgeBaseError)
    async def handle_knowledge_base_error(_request: Request, exc: KnowledgeBaseError) -> JSONResponse:
        if not isinstance(exc, DatabaseQueryError):
            logger.warning("Rejected request: %s (%s)", exc.message, type(exc).__name__)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
