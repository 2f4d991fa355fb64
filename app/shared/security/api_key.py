"""
Shared-secret authentication gate.

Write routes are registered with ``ApiKeyProtectedRoute``. After the
route has matched, the gate compares the ``x-api-key`` header with the
configured secret and, on failure, returns the rejection response
itself. It never raises, so rejections do not pass through the
centralized error handlers.
"""

import hmac
import logging
from typing import Callable, Coroutine, Optional

from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.core.config import settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


def check_api_key(provided: Optional[str], expected: str) -> Optional[JSONResponse]:
    """Decide whether a credential lets the request through.

    Args:
        provided: The header value, or None if the header is absent.
        expected: The configured secret.

    Returns:
        None if the request may proceed, otherwise the rejection response.
    """
    if not provided:
        return JSONResponse(
            status_code=401,
            content={
                "error": "Authentication required",
                "message": f"Please provide an API key in {API_KEY_HEADER} header",
            },
        )
    if not hmac.compare_digest(provided.encode(), expected.encode()):
        return JSONResponse(
            status_code=403,
            content={"error": "Forbidden", "message": "Invalid API key"},
        )
    return None


class ApiKeyProtectedRoute(APIRoute):
    """APIRoute that runs the API key gate before the endpoint pipeline."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[None, None, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            rejection = check_api_key(
                request.headers.get(API_KEY_HEADER), settings.api_key
            )
            if rejection is not None:
                logger.warning(
                    "Rejected %s %s: status=%d",
                    request.method,
                    request.url.path,
                    rejection.status_code,
                )
                return rejection
            return await handler(request)

        return gated_handler
