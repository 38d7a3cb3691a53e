"""
profile/models.py

Defines the Profile model: the optional public sub-record of an account
(skills, portfolio links, bio, location).
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gighub.database.base import Base, utcnow

if TYPE_CHECKING:
    from gighub.database.models import User


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for a profile",
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_profiles_user_id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        comment="Related user account",
    )
    skills: Mapped[list[str]] = mapped_column(JSON, default=list, comment="Ordered skill list")
    portfolio: Mapped[list[str]] = mapped_column(
        JSON, default=list, comment="Ordered portfolio links"
    )
    bio: Mapped[str | None] = mapped_column(Text, nullable=True, comment="Short biography")
    location: Mapped[str | None] = mapped_column(
        String(100), nullable=True, comment="Free-form location"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        comment="Profile update timestamp",
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="profile")
