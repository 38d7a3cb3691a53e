"""
gighub/core/limiter.py

Rate Limiter Configuration

Initializes the SlowAPI rate limiter (keyed by remote address) and the
handler that renders limit violations in the API's error body format.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import Response

logger = logging.getLogger(__name__)

# ---------------------------------------------------
# Rate Limiter Initialization
# ---------------------------------------------------
limiter = Limiter(key_func=get_remote_address)

# Shared limits for the different route families
AUTH_RATE = "10/minute"
READ_RATE = "60/minute"
WRITE_RATE = "20/minute"
UPLOAD_RATE = "10/minute"


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> Response:
    """Returns 429 with a `{message}` body when a client exceeds a route limit."""
    detail = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    logger.warning(f"[RATE LIMIT] {request.method} {request.url.path} exceeded: {detail}")
    return JSONResponse(
        status_code=429,
        content={"message": f"Rate limit exceeded: {detail}"},
    )
