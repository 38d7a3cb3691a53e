"""
review/services.py

Service layer for order reviews:
- A client may review each of their own orders once
- Reviews are listed per freelancer
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.exceptions import ConflictError, ForbiddenError, NotFoundError, ServerError
from gighub.database.models import User
from gighub.order.models import Order
from gighub.review import models, schemas

logger = logging.getLogger(__name__)

DUPLICATE_REVIEW_MESSAGE = "Review already exists for this order"


class ReviewService:
    """
    Handles review creation and retrieval.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_review(self, client: User, data: schemas.ReviewCreate) -> schemas.ReviewRead:
        """
        Submit a review for one of the caller's orders.

        Raises:
            NotFoundError: order does not exist
            ForbiddenError: the order was placed by someone else
            ConflictError: the order already has a review
        """
        order = await self.db.get(Order, data.order_id)
        if not order:
            raise NotFoundError("Order not found")
        if order.client_id != client.id:
            logger.warning(f"[REVIEW] Client {client.id} tried to review foreign order {order.id}")
            raise ForbiddenError("Unauthorized to review this order")

        existing = await self.db.execute(
            select(models.Review.id).filter(models.Review.order_id == order.id)
        )
        if existing.scalar_one_or_none():
            raise ConflictError(DUPLICATE_REVIEW_MESSAGE)

        review = models.Review(
            order_id=order.id,
            client=client,
            freelancer_id=order.freelancer_id,
            rating=data.rating,
            comment=data.comment,
        )
        self.db.add(review)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(DUPLICATE_REVIEW_MESSAGE)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[REVIEW] Failed to create review: {e}", exc_info=True)
            raise ServerError()

        logger.info(f"[REVIEW] Review {review.id} created for order {order.id}")
        return schemas.ReviewRead.model_validate(review)

    async def list_for_freelancer(self, freelancer_id: UUID) -> list[schemas.ReviewRead]:
        """
        Reviews received by a freelancer, newest first.
        """
        result = await self.db.execute(
            select(models.Review)
            .filter(models.Review.freelancer_id == freelancer_id)
            .order_by(models.Review.created_at.desc())
        )
        return [schemas.ReviewRead.model_validate(r) for r in result.unique().scalars().all()]
