"""
main.py

Application entrypoint for the GigHub API.
- Initializes logging
- Sets up FastAPI application and middlewares
- Registers all API routers and the JSON error handlers
- Integrates rate limiting via SlowAPI
- Adds common security headers
- Configures CORS
- Serves uploaded images from /uploads
"""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi.middleware import SlowAPIMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from gighub.core.config import settings
from gighub.core.exceptions import register_exception_handlers
from gighub.core.limiter import limiter
from gighub.core.logging import RequestLoggingMiddleware, init_logging
from gighub.database.init_db import init_db

from gighub.auth.routes import router as auth_router
from gighub.gig.routes import router as gig_router
from gighub.gig_rating.routes import router as gig_rating_router
from gighub.order.routes import router as order_router
from gighub.profile.routes import router as profile_router
from gighub.review.routes import router as review_router
from gighub.upload.routes import router as upload_router
from gighub.webhook.routes import router as webhook_router
from gighub.wishlist.routes import router as wishlist_router

init_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    await init_db()
    yield


# -----------------------------
# FastAPI App Initialization
# -----------------------------
app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# -----------------------------
# Middleware Configuration
# -----------------------------
app.state.limiter = limiter
register_exception_handlers(app)
app.add_middleware(SlowAPIMiddleware)


# -----------------------------
# Security Headers Middleware
# -----------------------------
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add common security headers to responses.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# -----------------------------
# CORSMiddleware Configuration
# -----------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------
# API Router Registration
# -----------------------------
app.include_router(auth_router)
app.include_router(gig_router)
app.include_router(order_router)
app.include_router(gig_rating_router)
app.include_router(review_router)
app.include_router(profile_router)
app.include_router(wishlist_router)
app.include_router(upload_router)
app.include_router(webhook_router)

# -----------------------------
# Uploaded Images
# -----------------------------
app.mount("/uploads", StaticFiles(directory=settings.upload_path), name="uploads")


# -----------------------------
# Root Endpoint
# -----------------------------
@app.get("/")
async def home() -> dict[str, Any]:
    return {"name": settings.APP_NAME, "status": "ok", "docs": "/docs"}
