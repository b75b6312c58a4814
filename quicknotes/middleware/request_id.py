"""
QuickNotes Backend - Request ID Middleware
===========================================

What:  Assigns a short ID to each incoming request and returns it in X-Request-ID.
How:   Takes the client's X-Request-ID if sent, otherwise generates one; stores
       it in a ContextVar (for loggers and exception handlers) and in
       request.state (for route handlers).
Who:   Applied to every request via Starlette middleware.

Every access-log line and every error envelope carries the same ID, so a
client-reported failure can be matched to server logs.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise generate 8 hex chars from a fresh UUID4
        3. Store in ContextVar and request.state
        4. Echo it back in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
