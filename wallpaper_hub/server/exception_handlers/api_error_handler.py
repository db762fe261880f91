"""
Handlers that render expected failures in the error envelope.

Covers domain ``ApiError`` subclasses, request validation failures and the
HTTP errors Starlette raises for unknown routes or wrong methods.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wallpaper_hub.core.logging_config import get_logger

from ..exceptions import ApiError

logger = get_logger(__name__)

HTTP_ERROR_CODES = {
    400: "INVALID_REQUEST",
    401: "AUTHENTICATION_REQUIRED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ``ApiError`` with its own status and code."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} ({exc.status_code}) in {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 ``INVALID_REQUEST``."""
    message = _describe_validation_error(exc)
    logger.info(f"Invalid request to {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"error": {"code": "INVALID_REQUEST", "message": message}})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors in the error envelope."""
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": code, "message": message}},
        headers=getattr(exc, "headers", None),
    )
