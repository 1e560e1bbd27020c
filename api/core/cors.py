"""
CORS middleware that answers a disallowed cross-origin request with 403.

Starlette's middleware uses 400 for a rejected preflight and lets a simple
request from a disallowed origin through without CORS headers. Clients of
this API expect 403 Forbidden in both cases. Requests without an `Origin`
header are not cross-origin and pass untouched.
"""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware as StarletteCORSMiddleware
from starlette.responses import PlainTextResponse, Response
from starlette.types import Receive, Scope, Send

HTTP_400 = 400
HTTP_403 = 403


class CORSMiddleware(StarletteCORSMiddleware):
    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers=request_headers)
        if response.status_code == HTTP_400:
            response.status_code = HTTP_403
        return response

    async def simple_response(self, scope: Scope, receive: Receive, send: Send, request_headers: Headers) -> None:
        if not self.is_allowed_origin(origin=request_headers["origin"]):
            response = PlainTextResponse("Disallowed CORS origin", status_code=HTTP_403)
            await response(scope, receive, send)
            return
        await super().simple_response(scope, receive, send, request_headers=request_headers)
