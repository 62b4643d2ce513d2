# =============================================================================
# app/exceptions.py - Errors and the Global Error Translator
# =============================================================================
# Every request-scoped failure is converted here into a JSON response of the
# form {"message": "..."}. The translator logs each failure exactly once:
# 5xx with the traceback at ERROR, 4xx at WARNING. Tracebacks never reach
# the client.
# =============================================================================

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal Server Error"


class ApiError(Exception):
    """
    Base exception for the Employee Assessment API.

    Carries an explicit, optional HTTP status. Errors without a status are
    reported as 500.
    """

    def __init__(
        self,
        message: str,
        code: str = "API_ERROR",
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


# =============================================================================
# Gateway Exceptions
# =============================================================================

class OriginNotAllowedError(ApiError):
    """Raised when a cross-origin request comes from a disallowed origin."""

    def __init__(self, origin: str):
        super().__init__(
            message="Not allowed by CORS",
            code="ORIGIN_NOT_ALLOWED",
            status_code=403,
        )
        self.origin = origin


class PayloadTooLargeError(ApiError):
    """Raised when a request body exceeds the configured ceiling."""

    def __init__(self, limit_bytes: int):
        super().__init__(
            message=f"Request body too large (max: {limit_bytes // (1024 * 1024)}MB)",
            code="PAYLOAD_TOO_LARGE",
            status_code=413,
        )
        self.limit_bytes = limit_bytes


# =============================================================================
# Collaborator Exceptions
# =============================================================================

class AuthenticationError(ApiError):
    """Raised when a request carries no valid access token."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message, code="UNAUTHORIZED", status_code=401)
        self.headers = {"WWW-Authenticate": "Bearer"}


class RecordNotFoundError(ApiError):
    """Raised when a record ID doesn't exist."""

    def __init__(self, resource: str, record_id: str):
        super().__init__(
            message=f"{resource.capitalize()} not found: {record_id}",
            code="NOT_FOUND",
            status_code=404,
        )
        self.resource = resource
        self.record_id = record_id


class DatabaseError(ApiError):
    """Raised when a database operation fails."""

    def __init__(self, message: str):
        super().__init__(message=message, code="DATABASE_ERROR")


class DatabaseConnectionError(DatabaseError):
    """Raised at startup when the database cannot be reached."""


# =============================================================================
# Translator
# =============================================================================

def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def error_status_and_message(exc: Exception) -> tuple[int, str]:
    """
    Map any exception to the (status, message) pair sent to the client.

    Total over all exceptions: unknown types fall back to 500.
    """
    if isinstance(exc, ApiError):
        return exc.status_code or 500, exc.message or DEFAULT_ERROR_MESSAGE

    if isinstance(exc, RequestValidationError):
        # Unparseable JSON is a bad request, not a validation failure
        if any(error.get("type") == "json_invalid" for error in exc.errors()):
            return 400, "Malformed JSON in request body"
        return 422, _validation_message(exc)

    if isinstance(exc, StarletteHTTPException):
        detail = exc.detail if isinstance(exc.detail, str) and exc.detail else DEFAULT_ERROR_MESSAGE
        return exc.status_code, detail

    return 500, str(exc) or DEFAULT_ERROR_MESSAGE


def error_response(exc: Exception) -> JSONResponse:
    """
    Log a failure and convert it into the client-visible JSON response.

    Call this once per failure.
    """
    status_code, message = error_status_and_message(exc)

    if status_code >= 500:
        logger.error(f"Uncaught error: {exc!r}", exc_info=exc)
    else:
        logger.warning(f"Request failed with {status_code}: {message}")

    headers = getattr(exc, "headers", None)
    return JSONResponse(
        status_code=status_code,
        content={"message": message},
        headers=headers,
    )


def log_unrendered_error(exc: Exception) -> None:
    """Log a failure raised after the response started; nothing can be sent."""
    logger.error(f"Error after response started: {exc!r}", exc_info=exc)


async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler registered for ApiError, HTTPException and validation errors."""
    return error_response(exc)
