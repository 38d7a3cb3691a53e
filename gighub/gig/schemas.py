"""
gig/schemas.py

Pydantic schemas for gigs.
- GigCreate: all core fields required, bounds enforced by shared validators
- GigUpdate: partial update, any present field re-validated with the same bounds
- GigRead: the gig with its owner's public name and profile
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field

from gighub.auth.schemas import ProfileData
from gighub.core.schemas import CamelModel
from gighub.core.validators import (
    category_validator,
    delivery_time_validator,
    description_validator,
    price_validator,
    tags_validator,
    title_validator,
)

TitleStr = Annotated[str, AfterValidator(title_validator)]
DescriptionStr = Annotated[str, AfterValidator(description_validator)]
CategoryStr = Annotated[str, Field(max_length=100), AfterValidator(category_validator)]
PriceFloat = Annotated[float, AfterValidator(price_validator)]
DeliveryDays = Annotated[int, AfterValidator(delivery_time_validator)]
TagList = Annotated[list[str], AfterValidator(tags_validator)]


# ---------------------------
# Gig Input Schemas
# ---------------------------
class GigCreate(CamelModel):
    title: TitleStr = Field(..., description="10-100 characters")
    description: DescriptionStr = Field(..., description="50-2000 characters")
    category: CategoryStr
    price: PriceFloat = Field(..., description="Fixed price, greater than 0 and at most 10,000")
    delivery_time: DeliveryDays = Field(..., description="Delivery time in days, 1-365")
    tags: TagList = Field(default_factory=list)
    images: list[str] = Field(default_factory=list, description="Upload paths of gig images")


class GigUpdate(CamelModel):
    """Partial update; only keys present in the request body are applied."""

    title: TitleStr | None = None
    description: DescriptionStr | None = None
    category: CategoryStr | None = None
    price: PriceFloat | None = None
    delivery_time: DeliveryDays | None = None
    tags: TagList | None = None
    images: list[str] | None = None


# ---------------------------
# Gig Output Schemas
# ---------------------------
class FreelancerInfo(CamelModel):
    id: UUID
    name: str
    profile: ProfileData | None = None


class GigRead(CamelModel):
    id: UUID
    freelancer_id: UUID
    freelancer: FreelancerInfo | None = None
    title: str
    description: str
    category: str
    price: float
    delivery_time: int
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    is_active: bool
    views: int
    average_rating: float
    total_ratings: int
    created_at: datetime
    updated_at: datetime


class GigViewResponse(CamelModel):
    message: str
    views: int


class GigToggleResponse(CamelModel):
    message: str
    gig: GigRead
