"""
gighub/core/dependencies.py

Authentication and Authorization Dependencies

Provides authentication and role-based access control (RBAC) for FastAPI routes:
- Validates the JWT from the `Authorization: Bearer <token>` header
- Retrieves the authenticated account from the database
- Restricts access based on account roles

The resolved account is handed to route handlers as an explicit argument;
nothing about the caller is stored in shared state.
"""

import logging
import uuid
from collections.abc import Callable, Coroutine
from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.exceptions import ForbiddenError, UnauthorizedError
from gighub.core.security import decode_access_token
from gighub.database.enums import UserRole
from gighub.database.models import User
from gighub.database.session import get_db

logger = logging.getLogger(__name__)

# ---------------------------------------------------
# OAuth2 Configuration
# ---------------------------------------------------
# auto_error is disabled so a missing header produces the API's own 401 body
oauth2_scheme: OAuth2PasswordBearer = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


# ---------------------------------------------------
# Authentication Functions
# ---------------------------------------------------
async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)] = None,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Authenticate the caller from the bearer token.

    Raises:
        UnauthorizedError: token missing, malformed, expired, or its subject
        no longer resolves to an existing account. The body is the same in
        every case.
    """
    if not token:
        logger.debug("[AUTH] No bearer token in Authorization header.")
        raise UnauthorizedError()

    try:
        payload = decode_access_token(token)
        user_id = uuid.UUID(str(payload.get("sub")))
    except (JWTError, ValueError):
        raise UnauthorizedError()

    result = await db.execute(select(User).filter(User.id == user_id))
    user = result.unique().scalar_one_or_none()

    if not user:
        logger.warning(f"[AUTH] JWT valid but no matching user found: user_id={user_id}")
        raise UnauthorizedError()

    logger.debug(f"[AUTH] User {user.id} authenticated.")
    return user


# ---------------------------------------------------
# Authorization Functions (Role-Based)
# ---------------------------------------------------
def get_current_user_with_role(required_role: UserRole) -> Callable[..., Coroutine[Any, Any, User]]:
    """
    Dependency to restrict access to accounts with a specific role.
    Authentication always runs first, so an anonymous request gets 401, never 403.
    """

    async def role_dependency(user: User = Depends(get_current_user)) -> User:
        if user.role != required_role:
            logger.warning(
                f"[RBAC] Access denied: User {user.id} role={user.role.value}, required={required_role.value}"
            )
            raise ForbiddenError()
        return user

    return role_dependency


require_client = get_current_user_with_role(UserRole.CLIENT)
require_freelancer = get_current_user_with_role(UserRole.FREELANCER)
