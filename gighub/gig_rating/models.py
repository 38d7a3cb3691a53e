"""
gig_rating/models.py

Defines the GigRating model: a client's 1-5 star rating of a gig.
- Exactly one rating per (gig, client) pair, enforced by a unique constraint
- The freelancer reference is denormalized from the gig at creation time
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.schema import CheckConstraint, UniqueConstraint

from gighub.database.base import Base, utcnow

if TYPE_CHECKING:
    from gighub.database.models import User

COMMENT_MAX_LENGTH = 500


class GigRating(Base):
    """Star rating (1-5) with an optional short comment, one per client per gig."""

    __tablename__ = "gig_ratings"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="gig_rating_range"),
        UniqueConstraint("gig_id", "client_id", name="uq_gig_ratings_gig_client"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the rating",
    )

    # Foreign Keys
    gig_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("gigs.id", name="fk_gig_ratings_gig_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Rated gig",
    )
    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_gig_ratings_client_id"),
        nullable=False,
        comment="Client who submitted the rating",
    )
    freelancer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_gig_ratings_freelancer_id"),
        nullable=False,
        comment="Owner of the gig at rating time",
    )

    # Rating content
    rating: Mapped[float] = mapped_column(Float, nullable=False, comment="Star rating from 1 to 5")
    comment: Mapped[str | None] = mapped_column(
        String(COMMENT_MAX_LENGTH), nullable=True, comment="Optional comment"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        comment="Timestamp when the rating was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        comment="Timestamp when the rating was last changed",
    )

    # -------------------------------------
    # Relationships
    # -------------------------------------
    client: Mapped["User"] = relationship(
        "User",
        back_populates="given_ratings",
        foreign_keys=[client_id],
        lazy="joined",
    )
