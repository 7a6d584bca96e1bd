"""Error kinds for the Product Service and the handlers that render them as JSON."""

from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.models import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFoundError"
    VALIDATION = "ValidationError"
    UNAUTHORIZED = "Unauthorized"
    INTERNAL = "InternalServerError"

    @property
    def status_code(self) -> int:
        return _STATUS[self]

    @property
    def default_message(self) -> str:
        return _DEFAULT_MESSAGE[self]


_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INTERNAL: 500,
}

_DEFAULT_MESSAGE = {
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.VALIDATION: "Validation Error: Invalid request body",
    ErrorKind.UNAUTHORIZED: "Unauthorized: Missing or invalid API key",
    ErrorKind.INTERNAL: "Something went wrong",
}


class ProductAPIError(Exception):
    """Base error carrying a kind, an HTTP status and a client-safe message."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.kind.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class NotFoundError(ProductAPIError):
    kind = ErrorKind.NOT_FOUND


class ValidationError(ProductAPIError):
    kind = ErrorKind.VALIDATION


class UnauthorizedError(ProductAPIError):
    kind = ErrorKind.UNAUTHORIZED


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    logger.error("Error: %s (%s %s -> %d)", exc.message, request.method, request.url.path, exc.status_code)
    return error_response(exc.status_code, exc.kind.value, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error("Error: invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
    kind = ErrorKind.VALIDATION
    return error_response(kind.status_code, kind.value, kind.default_message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = ErrorKind.NOT_FOUND.value if exc.status_code == 404 else "HTTPError"
    logger.error("Error: %s (%s %s -> %d)", exc.detail, request.method, request.url.path, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=error, message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error: unhandled exception on %s %s", request.method, request.url.path)
    kind = ErrorKind.INTERNAL
    return error_response(kind.status_code, kind.value, kind.default_message)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductAPIError, product_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
