"""Server error handling - sanitizes errors for client responses.

Prevents exposure of sensitive information like file paths, stack traces,
and internal configuration to HTTP clients.
"""

import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from pizzabot.core.errors import ConfigError, DialogStackError, NLUError, StateError

logger = logging.getLogger(__name__)

# Error messages safe to expose to clients
SAFE_ERROR_MESSAGES = {
    "ConfigError": "Configuration error. Please contact support.",
    "NLUError": "Unable to understand request. Please rephrase.",
    "StateError": "Session state error. Please start a new conversation.",
    "DialogStackError": "Dialog error. Please start a new conversation.",
}

DEFAULT_ERROR_MESSAGE = "An internal error occurred. Please try again later."


def create_error_reference() -> str:
    """Generate unique error reference for client/server correlation."""
    return f"ERR-{uuid.uuid4().hex[:8].upper()}"


def get_safe_error_message(exception: Exception) -> str:
    """Get client-safe error message for exception type."""
    for error_type in (ConfigError, NLUError, StateError, DialogStackError):
        if isinstance(exception, error_type):
            return SAFE_ERROR_MESSAGES[error_type.__name__]
    return DEFAULT_ERROR_MESSAGE


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for uncaught exceptions."""
    error_ref = create_error_reference()
    logger.error(
        f"[{error_ref}] Error in {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={"error_reference": error_ref, "exception_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": get_safe_error_message(exc),
            "reference": error_ref,
            "message": "If this problem persists, contact support with the reference code.",
        },
    )
