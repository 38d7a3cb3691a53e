"""
gighub/database/models.py

Core SQLAlchemy ORM Models

Defines:
- User: Authenticated accounts with role-based access (client or freelancer)

Includes relationships with:
- Profile (skills, portfolio, bio, location)
- Gig (listings published by a freelancer)
- Order (orders placed as client / received as freelancer)
- GigRating (ratings given by a client)
- WishlistItem (the client's saved gigs)
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gighub.database.base import Base, utcnow
from gighub.database.enums import UserRole, enum_values
from gighub.gig.models import Gig
from gighub.gig_rating.models import GigRating
from gighub.order.models import Order
from gighub.profile.models import Profile
from gighub.review.models import Review
from gighub.wishlist.models import WishlistItem

# ---------------------------------------------------
# User Model: Authenticated Platform Account
# ---------------------------------------------------


class User(Base):
    __tablename__ = "users"

    # -------------------------------------
    # Fields
    # -------------------------------------
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the account",
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, comment="Display name")
    email: Mapped[str] = mapped_column(
        String(255), unique=True, index=True, nullable=False, comment="Unique contact address"
    )
    hashed_password: Mapped[str] = mapped_column(
        String, nullable=False, comment="Salted bcrypt hash of the account password"
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role", values_callable=enum_values),
        nullable=False,
        comment="Account role (client, freelancer)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        comment="Timestamp when the account was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        comment="Timestamp when the account was last updated",
    )

    # -------------------------------------
    # Relationships
    # -------------------------------------

    # One-to-One: profile sub-record, loaded with the account
    profile: Mapped[Optional["Profile"]] = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    # One-to-Many: wishlist entries (gig references), loaded with the account
    wishlist_items: Mapped[list["WishlistItem"]] = relationship(
        "WishlistItem",
        back_populates="client",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="WishlistItem.created_at",
    )

    # One-to-Many: gigs published by a freelancer
    gigs: Mapped[list["Gig"]] = relationship(
        "Gig",
        back_populates="freelancer",
        lazy="noload",
    )

    # One-to-Many: orders placed by a client
    client_orders: Mapped[list["Order"]] = relationship(
        "Order",
        back_populates="client",
        foreign_keys=[Order.client_id],
        lazy="noload",
    )

    # One-to-Many: orders received by a freelancer
    freelancer_orders: Mapped[list["Order"]] = relationship(
        "Order",
        back_populates="freelancer",
        foreign_keys=[Order.freelancer_id],
        lazy="noload",
    )

    # One-to-Many: gig ratings submitted by a client
    given_ratings: Mapped[list["GigRating"]] = relationship(
        "GigRating",
        back_populates="client",
        foreign_keys=[GigRating.client_id],
        lazy="noload",
    )

    # One-to-Many: order reviews received by a freelancer
    received_reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="freelancer",
        foreign_keys=[Review.freelancer_id],
        lazy="noload",
    )

    @property
    def wishlist(self) -> list[uuid.UUID]:
        """Gig ids currently in the account's wishlist, in insertion order."""
        return [item.gig_id for item in self.wishlist_items]
