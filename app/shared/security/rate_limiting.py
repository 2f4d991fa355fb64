"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits on write routes.
Protects against denial-of-service and resource abuse.
"""

import logging
from http import HTTPStatus

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.shared.errors.handlers import error_response

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the failure envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    logger.warning("Rate limit exceeded: %s %s", request.method, request.url.path)
    return error_response(
        HTTPStatus.TOO_MANY_REQUESTS, "Rate limit exceeded", details=[str(exc.detail)]
    )
