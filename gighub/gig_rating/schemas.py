"""
gig_rating/schemas.py

Schemas for gig ratings and the aggregate returned after each write.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field

from gighub.core.schemas import CamelModel
from gighub.core.validators import rating_validator
from gighub.gig_rating.models import COMMENT_MAX_LENGTH

RatingValue = Annotated[float, AfterValidator(rating_validator)]


class RatingWrite(CamelModel):
    """Body for both creating and updating a rating."""

    rating: RatingValue = Field(..., description="Stars, any number from 1 to 5")
    comment: str | None = Field(default=None, max_length=COMMENT_MAX_LENGTH)


class RaterInfo(CamelModel):
    id: UUID
    name: str


class RatingRead(CamelModel):
    id: UUID
    gig_id: UUID
    client: RaterInfo
    freelancer_id: UUID
    rating: float
    comment: str | None = None
    created_at: datetime
    updated_at: datetime


class RatingResult(CamelModel):
    message: str
    rating: RatingRead
    average_rating: float
    total_ratings: int
