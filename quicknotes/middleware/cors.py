"""
QuickNotes Backend - CORS Allow-List Middleware
================================================

What:  Adds CORS headers for allow-listed origins and answers every OPTIONS
       request with 204.
How:   Starlette BaseHTTPMiddleware; the allow-list comes from settings
       (default: the two local Vite dev origins).

Behavior:
    - Origin in allow-list → Access-Control-Allow-Origin echoes it, plus
      Vary, Allow-Methods and Allow-Headers
    - Any other origin (or none) → no CORS headers at all; the browser blocks
      the response on its side
    - OPTIONS on any path → 204 with the headers above, router never runs

Starlette's CORSMiddleware answers preflights with 200 and rejects unknown
origins with 400, which is not the contract here.
"""

from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOW_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
ALLOW_HEADERS = "Content-Type"


class CORSAllowListMiddleware(BaseHTTPMiddleware):
    """Exact-match origin allow-list; no wildcards, no credentials."""

    def __init__(self, app: ASGIApp, allow_origins: Iterable[str] = ()):
        super().__init__(app)
        self.allow_origins = frozenset(allow_origins)

    def _cors_headers(self, request: Request) -> dict:
        origin = request.headers.get("Origin")
        if origin is None or origin not in self.allow_origins:
            return {}
        return {
            "Access-Control-Allow-Origin": origin,
            "Vary": "Origin",
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        headers = self._cors_headers(request)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=headers)

        response = await call_next(request)
        for name, value in headers.items():
            if name == "Vary" and "Vary" in response.headers:
                # GZip may already have set Vary: Accept-Encoding
                value = f"{response.headers['Vary']}, {value}"
            response.headers[name] = value
        return response
