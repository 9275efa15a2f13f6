"""Global exception handlers — map engine exceptions to HTTP status codes.

The engine raises typed errors (all ``ValueError`` subclasses).  Rather than
catching them in every route, we install global handlers that pick the
right HTTP status code.  This keeps route handlers focused on the happy
path.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from fever_engine.errors import (
    InvalidStateError,
    NotFoundError,
    PredictionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# --- Engine error types and their HTTP status codes ---
# Checked in order; first isinstance match wins.
_ERROR_STATUS: list[tuple[type[Exception], int]] = [
    (ValidationError, 422),
    (InvalidStateError, 409),
    (NotFoundError, 404),
    (PredictionError, 502),
]

# --- Keyword patterns for untyped ValueError messages ---
_VALUE_ERROR_PATTERNS: list[tuple[str, int]] = [
    ("already exists", 409),
    ("not found", 404),
]

# --- Client-safe messages keyed by HTTP status code ---
# Internal details (patient ids, episode ids) stay in the server log.
# Validation messages carry no identifiers and are returned as-is so the
# caller can show them to the user.
_SAFE_MESSAGES: dict[int, str] = {
    400: "Invalid request",
    404: "Resource not found",
    409: "Conflict with current episode state",
    502: "Prediction service unavailable",
}


def _status_for(exc: ValueError) -> int:
    for exc_type, code in _ERROR_STATUS:
        if isinstance(exc, exc_type):
            return code
    msg = str(exc).lower()
    for pattern, code in _VALUE_ERROR_PATTERNS:
        if pattern in msg:
            return code
    return 400


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Map engine errors (and plain ``ValueError``) to an HTTP error response.

    The raw exception message is logged server-side; only validation
    messages are echoed to the client.
    """
    status = _status_for(exc)
    logger.warning("%s [%d] at %s: %s", type(exc).__name__, status, request.url, exc)

    if status == 422:
        detail = str(exc)
    else:
        detail = _SAFE_MESSAGES.get(status, "Invalid request")
    return JSONResponse(status_code=status, content={"detail": detail})


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions.  Logs the traceback and returns 500."""
    logger.exception("Unhandled exception at %s", request.url)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )
