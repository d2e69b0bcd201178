"""Interface layer errors.

Every failure leaves the API as ``{"error": {"code": ..., "message": ...}}``.
"""

import logfire
from fastapi import status

from board.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class APIError(Exception):
    """Error surfaced to API clients with a status code and a stable code."""

    def __init__(self, status_code: int, code: str, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message

    def to_body(self) -> dict:
        """Render the error envelope."""
        return {"error": {"code": self.code, "message": self.message}}


def invalid_id() -> APIError:
    return APIError(status.HTTP_400_BAD_REQUEST, "INVALID_ID", "Invalid id.")


def server_error() -> APIError:
    return APIError(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "SERVER_ERROR",
        "An unexpected error occurred.",
    )


def from_domain_error(error: DomainError, code: str | None = None) -> APIError:
    """Map a domain error to its API error.

    Args:
        error: Domain error raised by a use case
        code: Replacement code for the response (keeps the message)

    Returns:
        ValidationError as 400, NotFoundError as 404, business rule
        violations as 403, anything else as 500
    """
    if isinstance(error, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, BusinessRuleViolationError):
        status_code = status.HTTP_403_FORBIDDEN
    else:
        logfire.error("Unmapped domain error", error=str(error), code=error.code)
        return server_error()

    return APIError(status_code, code or error.code, error.message)
