"""
Error taxonomy and JSON error responses.

Services raise one of the ``ServiceError`` subclasses below; the
handlers registered by ``register_exception_handlers`` turn them into
responses of the uniform shape ``{"error": "<reason>"}``.  Request
schema violations detected by FastAPI are reported the same way as a
``ValidationError``.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

logger = logging.getLogger(__name__)

AUTH_FAILURE_MESSAGE = "Authentication information is missing/invalid"


class ServiceError(Exception):
    """Base class for errors that are reported to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    title = "Internal Server Error"

    def __init__(self, title: str | None = None) -> None:
        if title is not None:
            self.title = title
        super().__init__(self.title)


class ValidationError(ServiceError):
    """Malformed or disallowed input, invalid calendar date, year below the floor."""

    status_code = status.HTTP_400_BAD_REQUEST
    title = "Bad Request"


class AuthError(ServiceError):
    """Missing, invalid or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    title = AUTH_FAILURE_MESSAGE


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    title = "Not Found"


class ConflictError(ServiceError):
    """A uniqueness constraint would be violated."""

    status_code = status.HTTP_409_CONFLICT
    title = "Conflict"


def error_response(status_code: int, title: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": title})


async def service_error_handler(request: Request, exc: ServiceError) -> Response:
    if isinstance(exc, AuthError):
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.title)
    return error_response(exc.status_code, exc.title)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.debug("Invalid request to %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, ValidationError.title)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Starlette raises these for unknown routes and unsupported methods.
    title = HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, title)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ServiceError.title)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
