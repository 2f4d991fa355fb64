"""
Centralized error handlers for FastAPI.

Terminal stage of the request pipeline: every error raised by a
route, dependency or use case ends up here and is rendered as the
failure envelope ``{success, error, details?, timestamp}``.
No stack traces or internal details are exposed to clients.
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.catalog.errors import AppError, ValidationError

logger = logging.getLogger(__name__)

_ROUTE_MISS_STATUSES = (HTTPStatus.NOT_FOUND, HTTPStatus.METHOD_NOT_ALLOWED)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return (
        datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    )


def error_response(
    status_code: int,
    error: str,
    details: Optional[list[str]] = None,
    **extra: Any,
) -> JSONResponse:
    """Build the failure envelope."""
    body: dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    body.update(extra)
    body["timestamp"] = utc_timestamp()
    return JSONResponse(status_code=int(status_code), content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle field violations, listing every one of them."""
        logger.warning(
            "%s on %s %s: %s",
            exc.message,
            request.method,
            request.url.path,
            exc.errors,
        )
        return error_response(exc.status, exc.message, details=exc.errors)

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        """Handle operational errors with their declared status."""
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error("Operational error: %s", exc.message)
        else:
            logger.warning(
                "%s on %s %s", exc.message, request.method, request.url.path
            )
        return error_response(exc.status, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed parameters rejected by FastAPI itself."""
        details = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        logger.warning("Invalid request on %s: %s", request.url.path, details)
        return error_response(HTTPStatus.BAD_REQUEST, "Invalid request", details=details)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing misses and other framework HTTP errors."""
        if exc.status_code in _ROUTE_MISS_STATUSES:
            logger.warning("Route not found: %s %s", request.method, request.url.path)
            return error_response(
                HTTPStatus.NOT_FOUND,
                "Route not found",
                path=request.url.path,
                method=request.method,
            )
        logger.warning("HTTP %d on %s", exc.status_code, request.url.path)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")
