"""
review/models.py

Defines the Review model for order-level feedback.
- Each review is linked to exactly one order (unique order_id)
- Supports a 1-5 star rating and an optional comment
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Float, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.schema import CheckConstraint

from gighub.database.base import Base, utcnow

if TYPE_CHECKING:
    from gighub.database.models import User


class Review(Base):
    """
    Review submitted by a client about a freelancer for a specific order.
    """

    __tablename__ = "reviews"
    __table_args__ = (CheckConstraint("rating >= 1 AND rating <= 5", name="review_rating_range"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the review",
    )

    # Review content
    rating: Mapped[float] = mapped_column(Float, nullable=False, comment="Star rating from 1 to 5")
    comment: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Optional text content of the review"
    )

    # Foreign Keys
    order_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("orders.id", name="fk_reviews_order_id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        comment="Reviewed order (one review per order)",
    )
    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_reviews_client_id"),
        nullable=False,
        comment="Client who submitted the review",
    )
    freelancer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_reviews_freelancer_id"),
        nullable=False,
        index=True,
        comment="Freelancer being reviewed",
    )

    # Timestamp
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        comment="Timestamp when the review was created",
    )

    # -------------------------------------
    # Relationships
    # -------------------------------------
    client: Mapped["User"] = relationship(
        "User",
        foreign_keys=[client_id],
        lazy="joined",
    )
    freelancer: Mapped["User"] = relationship(
        "User",
        back_populates="received_reviews",
        foreign_keys=[freelancer_id],
    )
