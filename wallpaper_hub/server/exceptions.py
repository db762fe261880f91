"""
Domain errors raised by services and routers.

Each error carries an HTTP status and a stable error code and is rendered by
the exception handlers as ``{"error": {"code", "message", ...details}}``.
"""

from typing import Any, Dict, Optional


class ApiError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_body(self) -> Dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message, **self.details}}


class BadRequestError(ApiError):
    status_code = 400
    code = "INVALID_REQUEST"


class AuthenticationError(ApiError):
    status_code = 401
    code = "AUTHENTICATION_REQUIRED"


class ForbiddenError(ApiError):
    status_code = 403
    code = "FORBIDDEN"


class NotFoundError(ApiError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(ApiError):
    status_code = 409
    code = "CONFLICT"


class GoneError(ApiError):
    status_code = 410
    code = "GONE"


class TooManyRequestsError(ApiError):
    status_code = 429
    code = "TOO_MANY_REQUESTS"
