"""
order/models.py

Defines the Order model.
- An order is a client's purchase of a gig
- Price and delivery time are snapshots of the gig at creation time
- Status is toggled between pending and delivered by the owning freelancer
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, DateTime, Enum, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gighub.database.base import Base, utcnow
from gighub.database.enums import OrderStatus, enum_values

if TYPE_CHECKING:
    from gighub.database.models import User
    from gighub.gig.models import Gig


class Order(Base):
    __tablename__ = "orders"

    # Basic Identifiers & Foreign Keys
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier for the order",
    )
    gig_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("gigs.id", name="fk_orders_gig_id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Gig the order was placed against (null once the gig is deleted)",
    )
    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_orders_client_id"),
        nullable=False,
        index=True,
        comment="Client who placed the order",
    )
    freelancer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", name="fk_orders_freelancer_id"),
        nullable=False,
        index=True,
        comment="Freelancer who owns the ordered gig",
    )

    # Snapshot of the gig terms at order time
    price: Mapped[float] = mapped_column(Float, nullable=False, comment="Price at order time")
    delivery_time: Mapped[int | None] = mapped_column(
        Integer, nullable=True, comment="Delivery time (days) at order time"
    )

    # Payment & Status
    payment_reference: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True, comment="Opaque payment provider reference"
    )
    is_paid: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False, comment="Set by the payment webhook"
    )
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, name="order_status", values_callable=enum_values),
        default=OrderStatus.PENDING,
        nullable=False,
        comment="Current status of the order",
    )

    # Audit Fields
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        comment="Timestamp when the order was created",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
        comment="Timestamp when the order was last updated",
    )

    # Relationships
    gig: Mapped[Optional["Gig"]] = relationship("Gig", lazy="joined")
    client: Mapped["User"] = relationship(
        "User", back_populates="client_orders", foreign_keys=[client_id], lazy="joined"
    )
    freelancer: Mapped["User"] = relationship(
        "User", back_populates="freelancer_orders", foreign_keys=[freelancer_id], lazy="joined"
    )
