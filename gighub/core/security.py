"""
gighub/core/security.py

Handles password hashing and JWT access token logic:
- Password hashing and verification (bcrypt via passlib)
- Creating access tokens carrying the account id (`sub`) and role
- Decoding and validating access tokens
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from gighub.core.config import settings

logger = logging.getLogger(__name__)

# Password hashing configuration
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ------------------------------------------------------
# --- Password Utilities ---
# ------------------------------------------------------
def get_password_hash(password: str) -> str:
    """Hashes a plain text password with a per-hash salt."""
    return cast(str, pwd_context.hash(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifies a plain text password against a stored hash."""
    try:
        return cast(bool, pwd_context.verify(plain_password, hashed_password))
    except ValueError:
        # Malformed or unknown hash format
        logger.warning("[AUTH] Stored password hash could not be parsed.")
        return False


# ------------------------------------------------------
# --- Access Token ---
# ------------------------------------------------------
def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token with expiration and unique JTI.

    Args:
        data (dict[str, Any]): Payload data to include in the token (must contain 'sub' and 'role').
        expires_delta (timedelta | None): Optional custom expiration time. Defaults to settings.

    Returns:
        str: Encoded JWT access token.
    """
    if "sub" not in data or "role" not in data:
        logger.error("Access token creation attempt missing 'sub' or 'role' in data.")
        raise ValueError("Access token payload must include 'sub' and 'role'.")

    expire: datetime = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload: dict[str, Any] = {
        **data,
        "sub": str(data["sub"]),
        "exp": expire,
        "jti": str(uuid.uuid4()),
    }

    logger.info(f"Issuing access token for sub={payload['sub']} exp={expire}")
    token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return str(token)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decodes an access token and returns its claims.

    Raises:
        JWTError: If the signature is invalid or the token has expired.
    """
    try:
        return dict(jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]))
    except ExpiredSignatureError:
        logger.info("[AUTH] Expired access token received.")
        raise
    except JWTError as e:
        logger.warning(f"[AUTH] Invalid access token received: {e}")
        raise
