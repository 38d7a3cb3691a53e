"""
review/schemas.py

Defines schemas for order reviews:
- Creating a review for an order
- Reading reviews with the reviewing client's name
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from gighub.core.schemas import CamelModel
from gighub.gig_rating.schemas import RaterInfo, RatingValue


class ReviewCreate(CamelModel):
    """
    Schema for submitting a new review for an order.
    """

    order_id: UUID = Field(..., description="Order being reviewed")
    rating: RatingValue = Field(..., description="Stars, any number from 1 to 5")
    comment: str | None = Field(default=None, max_length=2000, description="Optional comment")


class ReviewRead(CamelModel):
    """
    Schema for reading a review.
    """

    id: UUID
    order_id: UUID
    client: RaterInfo
    freelancer_id: UUID
    rating: float
    comment: str | None = None
    created_at: datetime
