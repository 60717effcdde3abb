"""
Centralized error handlers for FastAPI.

Maps authorization gate errors to HTTP responses. Business failures
never reach these handlers: they come back from procedures as Results.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backlog.domain.catalog.errors import (
    CatalogDomainError,
    ForbiddenError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_403 = 403
HTTP_500 = 500


def error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(
        _request: Request, exc: UnauthorizedError
    ) -> JSONResponse:
        """Handle calls that need a session but have none."""
        return JSONResponse(
            status_code=HTTP_401,
            content={"error": "Unauthorized", "detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(
        _request: Request, exc: ForbiddenError
    ) -> JSONResponse:
        """Handle calls whose role or ownership is not enough."""
        return error_response(HTTP_403, "Forbidden", exc.message)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, "Internal server error")
