"""
order/routes.py

Order endpoints: clients place orders, both sides list theirs, and the
owning freelancer changes status.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.dependencies import get_current_user, require_client, require_freelancer
from gighub.core.limiter import READ_RATE, WRITE_RATE, limiter
from gighub.database.models import User
from gighub.database.session import get_db
from gighub.order import schemas
from gighub.order.services import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

DBDep = Annotated[AsyncSession, Depends(get_db)]


@router.post(
    "",
    response_model=schemas.OrderCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place Order",
)
@limiter.limit(WRITE_RATE)
async def create_order(
    request: Request,
    payload: schemas.OrderCreate,
    db: DBDep,
    current_user: User = Depends(require_client),
) -> schemas.OrderCreatedResponse:
    order = await OrderService(db).create_order(current_user, payload.gig_id)
    return schemas.OrderCreatedResponse(order_id=order.id, message="Order created successfully!")


@router.get(
    "",
    response_model=schemas.OrderListResponse,
    status_code=status.HTTP_200_OK,
    summary="List My Orders",
    description="Clients see orders they placed; freelancers see orders for their gigs.",
)
@limiter.limit(READ_RATE)
async def list_orders(
    request: Request,
    db: DBDep,
    current_user: User = Depends(get_current_user),
) -> schemas.OrderListResponse:
    orders = await OrderService(db).list_orders(current_user)
    return schemas.OrderListResponse(orders=orders)


@router.patch(
    "/{order_id}/status",
    response_model=schemas.OrderStatusResponse,
    status_code=status.HTTP_200_OK,
    summary="Update Order Status",
)
@limiter.limit(WRITE_RATE)
async def update_order_status(
    request: Request,
    order_id: UUID,
    payload: schemas.OrderStatusUpdate,
    db: DBDep,
    current_user: User = Depends(require_freelancer),
) -> schemas.OrderStatusResponse:
    order = await OrderService(db).update_status(current_user, order_id, payload.status)
    return schemas.OrderStatusResponse(message="Order status updated successfully", order=order)
