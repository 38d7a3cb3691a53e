"""
profile/schemas.py

Schemas for the profile endpoints:
- ProfileUpdate: the only fields an account may change about itself
- PublicProfileRead: what anyone may see about an account, with freelancer stats
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field

from gighub.auth.schemas import ProfileData
from gighub.core.schemas import CamelModel
from gighub.core.validators import name_validator
from gighub.database.enums import UserRole

NameStr = Annotated[str, AfterValidator(name_validator)]


class ProfileUpdate(CamelModel):
    """
    Whitelisted self-service update. Unknown keys (role, email, password, ...)
    are ignored; omitted keys are left unchanged.
    """

    name: NameStr | None = None
    bio: str | None = Field(default=None, max_length=2000)
    location: str | None = Field(default=None, max_length=100)
    skills: list[str] | None = None
    portfolio: list[str] | None = None


class ProfileStats(CamelModel):
    total_gigs: int = 0
    completed_orders: int = 0
    average_rating: float = 0.0
    total_ratings: int = 0


class PublicProfileRead(ProfileStats):
    id: UUID
    name: str
    role: UserRole
    profile: ProfileData | None = None
    created_at: datetime
