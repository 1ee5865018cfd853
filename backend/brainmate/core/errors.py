"""
Error taxonomy and its mapping onto HTTP responses.

Absent records are never errors: services treat them as empty lists, zero
counters or freshly provisioned profiles. Only two failures reach clients:
a missing required field (400) and a failed store call (500).
"""

import logging
from contextlib import contextmanager
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from brainmate.core.logging_config import log_event

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """A required request field is missing or empty."""

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message)
        self.message = message


class StorageError(Exception):
    """The key/value store call failed or threw."""


class ServiceFailure(Exception):
    """A store failure already logged and reduced to an opaque client message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@contextmanager
def storage_failure(message: str):
    """
    Translate StorageError raised inside the block into a ServiceFailure.

    The original cause is logged server-side; the client only sees `message`.
    """
    try:
        yield
    except StorageError as e:
        logger.error(f"{message}: {e}")
        log_event(
            event_type="store.failure",
            message=message,
            level=logging.ERROR,
            event_category="storage",
            cause=str(e),
        )
        raise ServiceFailure(message) from e


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


async def validation_error_handler(request: Request, exc: ValidationError):
    return error_response(400, exc.message)


async def service_failure_handler(request: Request, exc: ServiceFailure):
    return error_response(500, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")


async def http_exception_handler(request: Request, exc: HTTPException):
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ServiceFailure, service_failure_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
