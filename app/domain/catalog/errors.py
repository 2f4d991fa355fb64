"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from http import HTTPStatus


class AppError(Exception):
    """Base error for all operational catalog errors.

    Carries the status class the interface layer renders it with.
    Defaults to an internal error when no class is given.
    """

    def __init__(
        self,
        message: str,
        status: HTTPStatus | int = HTTPStatus.INTERNAL_SERVER_ERROR,
    ) -> None:
        self.message = message
        self.status = HTTPStatus(status)
        super().__init__(self.message)


class NotFoundError(AppError):
    """Raised when an id lookup misses."""

    def __init__(self, resource: str = "Product") -> None:
        super().__init__(f"{resource} not found", HTTPStatus.NOT_FOUND)
        self.resource = resource


class ValidationError(AppError):
    """Raised when a record violates one or more field rules.

    ``errors`` keeps every violation in the order the rules were checked.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message, HTTPStatus.BAD_REQUEST)
        self.errors = list(errors or [])
