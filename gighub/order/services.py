"""
order/services.py

Order Service Layer
- Creates orders that snapshot the gig's price and delivery time
- Lists orders from the caller's side (placed as client, received as freelancer)
- Lets the owning freelancer move an order between pending and delivered
- Marks orders paid when the payment provider confirms them
"""

import logging
import time
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.exceptions import BadRequestError, NotFoundError, ServerError, ValidationError
from gighub.database.enums import OrderStatus, UserRole
from gighub.database.models import User
from gighub.gig.models import Gig
from gighub.order import models, schemas

logger = logging.getLogger(__name__)

INVALID_STATUS_MESSAGE = "Invalid status. Only pending and delivered are allowed."


def placeholder_payment_reference() -> str:
    """Reference stored until a payment provider intent replaces it."""
    return f"temp_{int(time.time() * 1000)}"


class OrderService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[ORDER] Failed to {action}: {e}", exc_info=True)
            raise ServerError()

    # ---------------------------------------------------
    # Create
    # ---------------------------------------------------
    async def create_order(self, client: User, gig_id: UUID) -> models.Order:
        """
        Places an order against a gig. Price and delivery time are copied from
        the gig as it is now; later gig edits do not reach the order.
        The gig's active flag is not checked.
        """
        gig = await self.db.get(Gig, gig_id)
        if not gig:
            logger.warning(f"[ORDER] Client {client.id} ordered missing gig {gig_id}")
            raise NotFoundError("Gig not found")

        order = models.Order(
            gig_id=gig.id,
            client_id=client.id,
            freelancer_id=gig.freelancer_id,
            price=gig.price,
            delivery_time=gig.delivery_time,
            status=OrderStatus.PENDING,
            payment_reference=placeholder_payment_reference(),
            is_paid=False,
        )
        self.db.add(order)
        await self._commit("create order")
        logger.info(f"[ORDER] Order {order.id} created by client {client.id} for gig {gig.id}")
        return order

    # ---------------------------------------------------
    # Read
    # ---------------------------------------------------
    async def list_orders(self, user: User) -> list[schemas.OrderRead]:
        """Orders where the caller is the client or the freelancer, newest first."""
        if user.role == UserRole.CLIENT:
            condition = models.Order.client_id == user.id
        elif user.role == UserRole.FREELANCER:
            condition = models.Order.freelancer_id == user.id
        else:
            raise BadRequestError("Invalid user role")

        result = await self.db.execute(
            select(models.Order).filter(condition).order_by(models.Order.created_at.desc())
        )
        return [schemas.OrderRead.model_validate(o) for o in result.unique().scalars().all()]

    # ---------------------------------------------------
    # Status
    # ---------------------------------------------------
    async def update_status(
        self, freelancer: User, order_id: UUID, new_status: str
    ) -> schemas.OrderRead:
        """
        Sets the order status. Both directions between pending and delivered
        are accepted.
        """
        result = await self.db.execute(
            select(models.Order).filter(
                models.Order.id == order_id, models.Order.freelancer_id == freelancer.id
            )
        )
        order = result.unique().scalar_one_or_none()
        if not order:
            logger.warning(f"[ORDER] Order {order_id} not found or not owned by {freelancer.id}")
            raise NotFoundError("Order not found or not authorized")

        try:
            status = OrderStatus(new_status)
        except ValueError:
            raise ValidationError(INVALID_STATUS_MESSAGE)

        order.status = status
        await self._commit("update order status")
        logger.info(f"[ORDER] Order {order.id} status set to {status.value}")
        return schemas.OrderRead.model_validate(order)

    # ---------------------------------------------------
    # Payment confirmation
    # ---------------------------------------------------
    async def mark_paid(self, payment_reference: str) -> models.Order | None:
        """
        Flags the order carrying this payment reference as paid and puts it
        (back) in pending. Returns None when no order matches.
        """
        result = await self.db.execute(
            select(models.Order).filter(models.Order.payment_reference == payment_reference)
        )
        order = result.unique().scalars().first()
        if not order:
            logger.warning(f"[ORDER] No order for payment reference {payment_reference}")
            return None

        order.is_paid = True
        order.status = OrderStatus.PENDING
        await self._commit("mark order paid")
        logger.info(f"[ORDER] Order {order.id} marked paid")
        return order
