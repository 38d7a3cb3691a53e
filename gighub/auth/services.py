"""
auth/services.py

Handles authentication-related business logic:
- Signup: unique email check, password hashing, account creation
- Login: credential verification with a uniform failure message
- Token issuance embedding the account id and role
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.auth.schemas import AuthResponse, LoginRequest, SignupRequest, UserRead
from gighub.core.exceptions import ConflictError, InvalidCredentialsError, ServerError
from gighub.core.security import create_access_token, get_password_hash, verify_password
from gighub.database.models import Profile, User

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Signs a one-day access token for the account."""
    return create_access_token({"sub": str(user.id), "role": user.role.value})


class AuthService:
    """Account registration and credential checks."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).filter(User.email == email))
        return result.unique().scalar_one_or_none()

    # ------------------------------------------------
    # Signup
    # ------------------------------------------------
    async def signup(self, payload: SignupRequest) -> AuthResponse:
        """Registers a new account and returns a token for it."""
        if await self._get_by_email(payload.email):
            logger.warning("[AUTH] Signup attempt with an already registered email.")
            raise ConflictError("User already exists")

        user = User(
            name=payload.name.strip(),
            email=payload.email,
            hashed_password=get_password_hash(payload.password),
            role=payload.role,
            profile=Profile(skills=[], portfolio=[]),
            wishlist_items=[],
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            await self.db.rollback()
            logger.warning("[AUTH] Signup rejected by unique email constraint.")
            raise ConflictError("User already exists")
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[AUTH] Failed to create account: {e}", exc_info=True)
            raise ServerError()

        logger.info(f"[AUTH] New {user.role.value} account created: {user.id}")
        return AuthResponse(token=issue_token(user), user=UserRead.model_validate(user))

    # ------------------------------------------------
    # Login
    # ------------------------------------------------
    async def login(self, payload: LoginRequest) -> AuthResponse:
        """
        Verifies credentials. Unknown email and wrong password fail identically.
        """
        user = await self._get_by_email(payload.email)
        if not user or not verify_password(payload.password, user.hashed_password):
            logger.warning("[AUTH] Failed login attempt.")
            raise InvalidCredentialsError()

        logger.info(f"[AUTH] User {user.id} logged in.")
        return AuthResponse(token=issue_token(user), user=UserRead.model_validate(user))
