"""
auth/schemas.py

Defines Pydantic models for authentication flows:
- Signup & login request payloads
- The account shape returned to callers (never includes the password hash)
- Token response structure
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, EmailStr, Field

from gighub.core.schemas import CamelModel
from gighub.database.enums import UserRole


def _normalize_email(email: str) -> str:
    return email.strip().lower()


NormalizedEmail = Annotated[EmailStr, AfterValidator(_normalize_email)]


# --------------------------------------------------
# AUTH REQUEST SCHEMAS
# --------------------------------------------------
class SignupRequest(CamelModel):
    """
    Request schema for new account registration.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: NormalizedEmail = Field(..., description="Email address for new account")
    password: str = Field(..., min_length=6, max_length=128, description="Account password")
    role: UserRole = Field(..., description="Account role: client or freelancer")


class LoginRequest(CamelModel):
    """
    Request schema for login using JSON payload.
    """

    email: NormalizedEmail = Field(..., description="Account email address")
    password: str = Field(..., min_length=1, max_length=128, description="Account password")


# --------------------------------------------------
# ACCOUNT RESPONSE SCHEMAS
# --------------------------------------------------
class ProfileData(CamelModel):
    """Profile sub-record embedded in account responses."""

    skills: list[str] = Field(default_factory=list)
    portfolio: list[str] = Field(default_factory=list)
    bio: str | None = None
    location: str | None = None


class UserRead(CamelModel):
    """
    The caller's own account: identity, role, profile and wishlist gig ids.
    """

    id: UUID
    name: str
    email: EmailStr
    role: UserRole
    profile: ProfileData | None = None
    wishlist: list[UUID] = Field(default_factory=list)
    created_at: datetime


class UserBrief(CamelModel):
    """Name and contact shown on orders."""

    id: UUID
    name: str
    email: EmailStr


class AuthResponse(CamelModel):
    """
    Returned by signup and login: the bearer token and the account it belongs to.
    """

    token: str = Field(..., description="JWT bearer token, valid for one day")
    user: UserRead
