"""
gighub/gig/models.py

Gig Database Model
Defines the SQLAlchemy model for service listings ("gigs") published by freelancers.
The rating fields are derived: they are rewritten by the rating aggregation
routine whenever a rating for the gig is created or updated.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gighub.database.base import Base, utcnow

if TYPE_CHECKING:
    from gighub.database.models import User


# ---------------------------------------------------
# Gig Model
# ---------------------------------------------------


class Gig(Base):
    """Represents a service listing created by a freelancer."""

    __tablename__ = "gigs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the gig",
    )

    freelancer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_gigs_freelancer_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Freelancer (user) offering this gig",
    )

    title: Mapped[str] = mapped_column(String(100), nullable=False, comment="Title of the gig")
    description: Mapped[str] = mapped_column(
        Text, nullable=False, comment="Detailed description of the gig"
    )
    category: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True, comment="Gig category"
    )
    price: Mapped[float] = mapped_column(Float, nullable=False, comment="Fixed price")
    delivery_time: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="Delivery time in days"
    )
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, comment="Free-form tags")
    images: Mapped[list[str]] = mapped_column(JSON, default=list, comment="Image URL paths")

    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, comment="Whether the gig is publicly visible"
    )
    views: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False, comment="Monotonic view counter"
    )
    average_rating: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False, comment="Mean gig rating, rounded to 1 decimal"
    )
    total_ratings: Mapped[int] = mapped_column(
        Integer, default=0, nullable=False, comment="Number of gig ratings"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        comment="Timestamp when the gig was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        comment="Timestamp when the gig was last updated",
    )

    # ---------------------------------------------------
    # Relationships
    # ---------------------------------------------------

    freelancer: Mapped["User"] = relationship(
        "User",
        back_populates="gigs",
        lazy="joined",
        # Relationship: Many gigs can be offered by one freelancer
    )
