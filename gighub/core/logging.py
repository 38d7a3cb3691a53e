"""
gighub/core/logging.py

Centralized logging configuration for the application.
- Console handler (colored if `colorlog` is installed)
- Rotating logs/app.log (1MB max, 5 backups) and an ERROR-only logs/error.log
- Log level controlled via the LOG_LEVEL setting
- RequestLoggingMiddleware: one line per request with status and latency

Should be initialized once early in app startup (e.g., in main.py)
"""

import logging
import os
import time
from collections.abc import Awaitable, Callable
from logging.config import dictConfig
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from gighub.core.config import settings

# Check for colorlog availability
try:
    import colorlog  # noqa: F401

    COLORLOG_AVAILABLE = True
except ImportError:
    COLORLOG_AVAILABLE = False

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] in %(module)s: %(message)s"
LOG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "logs")

logger = logging.getLogger("gighub.requests")


def build_logging_config(level: str, log_dir: str) -> dict[str, Any]:
    """Builds the dictConfig payload for the given level and log directory."""
    formatters: dict[str, Any] = {"default": {"format": LOG_FORMAT}}
    if COLORLOG_AVAILABLE:
        formatters["color"] = {
            "()": "colorlog.ColoredFormatter",
            "format": f"%(log_color)s{LOG_FORMAT}",
            "log_colors": {
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "color" if COLORLOG_AVAILABLE else "default",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": os.path.join(log_dir, "app.log"),
                "maxBytes": 1 * 1024 * 1024,  # 1MB
                "backupCount": 5,
                "formatter": "default",
                "encoding": "utf-8",
            },
            "error_file": {
                "class": "logging.FileHandler",
                "filename": os.path.join(log_dir, "error.log"),
                "level": "ERROR",
                "formatter": "default",
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "uvicorn": {"level": "WARNING"},
            "sqlalchemy": {"level": "WARNING"},
            "passlib": {"level": "ERROR"},
            "stripe": {"level": "WARNING"},
        },
        "root": {
            "level": level.upper(),
            "handlers": ["console", "file", "error_file"],
        },
    }


def init_logging() -> None:
    """Creates the log directory and applies the logging configuration."""
    os.makedirs(LOG_DIR, exist_ok=True)
    dictConfig(build_logging_config(settings.LOG_LEVEL, LOG_DIR))


# ---------------------------------------------------
# Request Logging Middleware
# ---------------------------------------------------
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status code and latency for every request.
    Bodies are never logged: signup and login payloads carry passwords.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        log_fn = logger.warning if response.status_code >= 400 else logger.info
        log_fn(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response
