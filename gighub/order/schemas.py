"""
order/schemas.py

Schemas for order creation, listing and status changes.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from gighub.auth.schemas import UserBrief
from gighub.core.schemas import CamelModel
from gighub.database.enums import OrderStatus
from gighub.gig.schemas import GigRead


class OrderCreate(CamelModel):
    gig_id: UUID = Field(..., description="Gig being ordered")


class OrderStatusUpdate(CamelModel):
    # Checked against OrderStatus after the ownership lookup
    status: str = Field(..., description="pending or delivered")


class OrderRead(CamelModel):
    id: UUID
    gig: GigRead | None = None
    client: UserBrief
    freelancer: UserBrief
    price: float
    delivery_time: int | None = None
    status: OrderStatus
    payment_reference: str | None = None
    is_paid: bool
    created_at: datetime
    updated_at: datetime


class OrderCreatedResponse(CamelModel):
    order_id: UUID
    message: str


class OrderListResponse(CamelModel):
    orders: list[OrderRead]


class OrderStatusResponse(CamelModel):
    message: str
    order: OrderRead
