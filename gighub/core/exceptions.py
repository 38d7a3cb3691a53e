"""
gighub/core/exceptions.py

Error taxonomy and exception handlers.

Every failure leaves the API as a JSON body of the form
`{"message": str, "details": any?}`:
- APIError subclasses map domain failures to HTTP status codes
- RequestValidationError (malformed body, out-of-range field) becomes 400
- Anything uncaught becomes a generic 500 with no internal detail
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from gighub.core.limiter import rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


# ---------------------------------------------------
# Error Taxonomy
# ---------------------------------------------------
class APIError(HTTPException):
    """Base exception carrying a human-readable message and optional details."""

    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message_default: str = "Server error"

    def __init__(
        self,
        message: str | None = None,
        details: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message or self.message_default
        self.details = details
        super().__init__(status_code=self.status_code_default, detail=self.message, headers=headers)


class UnauthorizedError(APIError):
    status_code_default = status.HTTP_401_UNAUTHORIZED
    message_default = "Unauthorized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(APIError):
    status_code_default = status.HTTP_403_FORBIDDEN
    message_default = "Forbidden: insufficient rights"


class NotFoundError(APIError):
    status_code_default = status.HTTP_404_NOT_FOUND
    message_default = "Not found"


class BadRequestError(APIError):
    status_code_default = status.HTTP_400_BAD_REQUEST
    message_default = "Bad request"


class ValidationError(BadRequestError):
    message_default = "Validation error"


class InvalidCredentialsError(BadRequestError):
    message_default = "Invalid credentials"


class ConflictError(APIError):
    status_code_default = status.HTTP_409_CONFLICT
    message_default = "Resource already exists"


class ServerError(APIError):
    pass


# ---------------------------------------------------
# Response Helpers
# ---------------------------------------------------
def error_response(
    status_code: int,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"message": message}
    if details is not None:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _validation_message(errors: list[dict[str, Any]]) -> str:
    """Returns the first validation error as a readable sentence."""
    if not errors:
        return "Validation error"
    msg = str(errors[0].get("msg", "Validation error"))
    # Pydantic prefixes messages raised from custom validators
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    loc = [str(part) for part in errors[0].get("loc", ()) if part not in ("body", "query", "path")]
    if msg == "Field required" and loc:
        return f"{'.'.join(loc)} is required"
    return msg


# ---------------------------------------------------
# Exception Handlers
# ---------------------------------------------------
async def api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, APIError)
    if exc.status_code >= 500:
        logger.error(f"[ERROR] {request.method} {request.url.path}: {exc.message}")
    return error_response(exc.status_code, exc.message, exc.details, exc.headers)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    details = None if isinstance(exc.detail, str) else exc.detail
    return error_response(exc.status_code, message, details, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    errors = list(exc.errors())
    logger.warning(f"[VALIDATION] {request.method} {request.url.path}: {errors}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        _validation_message(errors),
        details=[{"loc": e.get("loc"), "msg": e.get("msg"), "type": e.get("type")} for e in errors],
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"[ERROR] Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Installs the JSON error handlers on the application."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
