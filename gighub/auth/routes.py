"""
auth/routes.py

Handles authentication routes:
- Account registration and login (JSON)
- Retrieval of the authenticated account
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.auth.schemas import AuthResponse, LoginRequest, SignupRequest, UserRead
from gighub.auth.services import AuthService
from gighub.core.dependencies import get_current_user
from gighub.core.limiter import AUTH_RATE, READ_RATE, limiter
from gighub.database.models import User
from gighub.database.session import get_db

# ---------------------------------------------------
# Router Configuration
# ---------------------------------------------------
router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------
# Registration
# ---------------------------------------------------
@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register New Account",
    description="Creates a client or freelancer account and returns a bearer token.",
)
@limiter.limit(AUTH_RATE)
async def signup(
    request: Request,
    payload: SignupRequest,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    return await AuthService(db).signup(payload)


# ---------------------------------------------------
# Login
# ---------------------------------------------------
@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Login",
    description="Authenticates with email and password and returns a bearer token.",
)
@limiter.limit(AUTH_RATE)
async def login(
    request: Request,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    return await AuthService(db).login(payload)


# ---------------------------------------------------
# Current Account
# ---------------------------------------------------
@router.get(
    "/me",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
    summary="Get Current Account",
)
@limiter.limit(READ_RATE)
async def me(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> UserRead:
    """Returns the account identified by the bearer token."""
    return UserRead.model_validate(current_user)
