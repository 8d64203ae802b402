"""Server error handling - sanitizes errors for client responses.

Botter errors map to a fixed client message and status code; anything else
becomes a generic 500. Full details only go to the server log, tagged with a
reference code the client can quote.
"""

import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from botter.core.errors import BotterError, ConfigError, DeliveryError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An internal error occurred. Please try again later."

# Checked in order, so subclasses must come before their bases
ERROR_RESPONSES: list[tuple[type[BotterError], int, str]] = [
    (ConfigError, 500, "The bot is misconfigured. Please contact support."),
    (ValidationError, 400, "Invalid message data."),
    (DeliveryError, 502, "The reply could not be delivered. Please try again."),
    (BotterError, 500, DEFAULT_ERROR_MESSAGE),
]


def create_error_reference() -> str:
    """Generate unique error reference for client/server correlation."""
    return f"ERR-{uuid.uuid4().hex[:8].upper()}"


def describe_error(exception: Exception) -> tuple[int, str]:
    """Return the status code and client-safe message for an exception."""
    for error_type, status_code, message in ERROR_RESPONSES:
        if isinstance(exception, error_type):
            return status_code, message
    return 500, DEFAULT_ERROR_MESSAGE


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for uncaught exceptions."""
    error_ref = create_error_reference()
    status_code, message = describe_error(exc)
    logger.error(
        f"[{error_ref}] Error in {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={
            "error_reference": error_ref,
            "endpoint": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "reference": error_ref,
            "message": "If this problem persists, contact support with the reference code.",
        },
    )
