"""
Secure HTTP headers middleware.

Stamps every API response with restrictive browser headers and marks
session-dependent responses as non-cacheable. Headers a route already
set are left alone.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
}

NO_STORE = "no-store"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds SECURE_HEADERS (plus any extras) to every response.

    Responses to requests carrying an Authorization header also get
    ``Cache-Control: no-store`` so per-user playlists never land in a
    shared cache.
    """

    def __init__(self, app: ASGIApp, extra_headers: Optional[dict[str, str]] = None) -> None:
        super().__init__(app)
        self._headers = {**SECURE_HEADERS, **(extra_headers or {})}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in self._headers.items():
            response.headers.setdefault(header_name, header_value)
        if "authorization" in request.headers:
            response.headers["Cache-Control"] = NO_STORE
        return response
