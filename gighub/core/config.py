"""
gighub/core/config.py

Application Configuration Loader

Loads and manages application settings from environment variables
using Pydantic's BaseSettings with `.env` support.
Every setting carries a development default so the API can boot locally
without a `.env` file; production deployments override them.
"""

import logging
import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------
# Logger Configuration
# ---------------------------------------------------
logger = logging.getLogger(__name__)

# ---------------------------------------------------
# Base Directory Calculation
# ---------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent
DEFAULT_DOTENV_PATH = BASE_DIR / ".env"


# ---------------------------------------------------
# Settings Definition
# ---------------------------------------------------
class Settings(BaseSettings):
    """
    Application-wide settings loaded from environment variables.
    """

    # --- Pydantic Settings Configuration ---
    model_config = SettingsConfigDict(
        env_file=str(DEFAULT_DOTENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- General Application Settings ---
    APP_NAME: str = "GigHub API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # --- Database Settings ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./gighub.db"

    # --- JWT Authentication Settings ---
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # --- Upload Settings ---
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_FILES: int = 5
    MAX_UPLOAD_SIZE_MB: int = 5

    # --- Redis Settings (optional, used for per-gig locks) ---
    REDIS_HOST: str = ""
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0

    # --- Stripe Settings ---
    STRIPE_SECRET_KEY: str = ""
    STRIPE_WEBHOOK_SECRET: str = ""

    # --- CORS Settings ---
    CORS_ALLOWED_ORIGINS: str = "*"

    # --- Calculated Properties ---
    @property
    def cors_origins(self) -> list[str]:
        """Parses the CORS_ALLOWED_ORIGINS string into a list."""
        if not self.CORS_ALLOWED_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def db_url(self) -> str:
        """Returns the configured async database URL."""
        url_str = str(self.DATABASE_URL)
        if self.DEBUG:
            logger.debug(f"[CONFIG] Using DATABASE URL: {url_str}")
        return url_str

    @property
    def upload_path(self) -> Path:
        """Returns the absolute path of the public upload root."""
        path = Path(self.UPLOAD_DIR)
        return path if path.is_absolute() else BASE_DIR / path

    @property
    def max_upload_size(self) -> int:
        """Per-file upload cap in bytes."""
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    @property
    def redis_url(self) -> str | None:
        """Redis URL, or None when no Redis host is configured."""
        if not self.REDIS_HOST:
            return None
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"


# ---------------------------------------------------
# Instantiate Settings Globally
# ---------------------------------------------------
settings = Settings()

# ---------------------------------------------------
# Post-Instantiation Setup
# ---------------------------------------------------
upload_root = settings.upload_path
os.makedirs(upload_root / "gigs", exist_ok=True)
logger.info(f"Upload directory ready at: {upload_root}")
