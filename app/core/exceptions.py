"""
Custom exception classes and JSON error handling.

Every error leaves the API as ``{"error": "<message>"}`` with the status code
carried by the exception.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""
    error: str

    model_config = ConfigDict(frozen=True)


class AppException(Exception):
    """Base application exception."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail)


class ValidationError(AppException):
    """Missing or malformed user input. Never reaches a provider."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class ConfigurationError(AppException):
    """A credential required for the requested operation is not configured."""

    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)


class NotFoundError(AppException):
    """The catalog has no item for the requested identifier."""

    def __init__(self, detail: str = "Video not found", status_code: int = 500):
        super().__init__(status_code=status_code, detail=detail)


class ProviderError(AppException):
    """An upstream call failed (network, HTTP status, auth or payload shape)."""

    def __init__(self, detail: str, status_code: int = 500):
        super().__init__(status_code=status_code, detail=detail)


def create_error_response(status_code: int, detail: str) -> JSONResponse:
    """Create the JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=detail).model_dump(),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return its status with an error body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.detail}")
    return create_error_response(exc.status_code, exc.detail)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's body/query validation failures as 400s."""
    detail: Optional[str] = None
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        if location:
            detail = f"Invalid request: {'.'.join(location)} {error.get('msg', '').lower()}"
            break
    logger.info(f"{request.method} {request.url.path} rejected: {detail or 'invalid body'}")
    return create_error_response(400, detail or "Invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so clients always receive an error body."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return create_error_response(500, "Internal server error")
