"""
wishlist/models.py

Defines the WishlistItem model: one saved gig in a client's wishlist.
The (client_id, gig_id) unique constraint keeps the wishlist a set.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.schema import UniqueConstraint

from gighub.database.base import Base, utcnow

if TYPE_CHECKING:
    from gighub.database.models import User
    from gighub.gig.models import Gig


class WishlistItem(Base):
    __tablename__ = "wishlist_items"
    __table_args__ = (
        UniqueConstraint("client_id", "gig_id", name="uq_wishlist_items_client_gig"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for a wishlist entry",
    )
    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_wishlist_items_client_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Client who saved the gig",
    )
    gig_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("gigs.id", name="fk_wishlist_items_gig_id", ondelete="CASCADE"),
        nullable=False,
        comment="Saved gig",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        comment="When the gig was added",
    )

    # Relationships
    client: Mapped["User"] = relationship("User", back_populates="wishlist_items")
    gig: Mapped["Gig"] = relationship("Gig")
