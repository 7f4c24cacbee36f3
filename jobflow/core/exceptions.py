"""Custom exceptions and error responses for the application."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class StorageError(ApplicationError):
    """Raised when the persistent store fails to complete an operation."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Storage operation '{operation}' failed: {detail}")


class ObjectStorageError(ApplicationError):
    """Raised when an object storage request fails."""

    def __init__(self, operation: str, key: str, detail: str):
        self.operation = operation
        self.key = key
        self.detail = detail
        super().__init__(f"Object storage {operation} failed for {key}: {detail}")


def not_found_exception(detail: str = "Resource not found") -> HTTPException:
    """Return a 404 Not Found exception."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def bad_request_exception(detail: str = "Invalid data") -> HTTPException:
    """Return a 400 Bad Request exception."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def server_error_exception(detail: str = "Internal server error") -> HTTPException:
    """Return a 500 Internal Server Error exception."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


def format_validation_errors(errors: list[dict]) -> list[dict]:
    """Flatten pydantic error entries into ``{path, message, code}`` items.

    The leading location segment (``body``, ``path``, ``query``) is dropped so
    the path points at the offending field itself.
    """
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in ("body", "path", "query", "header", "cookie"):
            loc = loc[1:]
        formatted.append(
            {
                "path": loc,
                "message": error.get("msg", ""),
                "code": error.get("type", ""),
            }
        )
    return formatted


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(errors)} invalid field(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error response as ``{"message": ...}`` JSON."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
