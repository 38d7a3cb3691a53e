"""
gig_rating/services.py

Gig Rating Service Layer
- One rating per (gig, client); a second create is a conflict, edits go through update
- After every create or update the gig's averageRating/totalRatings are
  recomputed from all of its ratings, serialized per gig
"""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.exceptions import ConflictError, NotFoundError, ServerError
from gighub.core.locks import gig_lock
from gighub.database.models import User
from gighub.gig.models import Gig
from gighub.gig_rating import models, schemas

logger = logging.getLogger(__name__)

ALREADY_RATED_MESSAGE = "You have already rated this gig"


def round_average(ratings: Sequence[int | float]) -> float:
    """
    Mean rounded to one decimal, halves rounded up (4.25 -> 4.3).
    Returns 0.0 for no ratings.
    """
    if not ratings:
        return 0.0
    # str() keeps 4.1 as exactly 4.1 instead of its binary approximation
    mean = sum(Decimal(str(r)) for r in ratings) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class GigRatingService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_client_rating(self, client_id: UUID, gig_id: UUID) -> models.GigRating | None:
        result = await self.db.execute(
            select(models.GigRating).filter(
                models.GigRating.gig_id == gig_id, models.GigRating.client_id == client_id
            )
        )
        return result.unique().scalar_one_or_none()

    # ---------------------------------------------------
    # Aggregate recompute
    # ---------------------------------------------------
    async def recompute_aggregate(self, gig_id: UUID) -> tuple[float, int]:
        """
        Rewrites the gig's average and count from every stored rating.

        Runs in its own transaction under a per-gig lock and a row lock on the
        gig, so concurrent rating writes for one gig cannot interleave. If it
        fails, the rating that triggered it stays stored and the aggregate is
        left as it was.
        """
        async with gig_lock(gig_id):
            try:
                locked = await self.db.execute(
                    select(Gig.id).where(Gig.id == gig_id).with_for_update()
                )
                if locked.scalar_one_or_none() is None:
                    await self.db.rollback()
                    raise NotFoundError("Gig not found")

                ratings = (
                    await self.db.execute(
                        select(models.GigRating.rating).where(models.GigRating.gig_id == gig_id)
                    )
                ).scalars().all()
                average, total = round_average(ratings), len(ratings)

                await self.db.execute(
                    update(Gig)
                    .where(Gig.id == gig_id)
                    .values(average_rating=average, total_ratings=total)
                )
                await self.db.commit()
            except SQLAlchemyError as e:
                await self.db.rollback()
                logger.error(f"[RATING] Aggregate recompute failed for gig {gig_id}: {e}", exc_info=True)
                raise ServerError()

        logger.info(f"[RATING] Gig {gig_id} aggregate now {average} over {total} ratings")
        return average, total

    # ---------------------------------------------------
    # Create / Update
    # ---------------------------------------------------
    async def add_rating(
        self, client: User, gig_id: UUID, data: schemas.RatingWrite
    ) -> schemas.RatingResult:
        gig = await self.db.get(Gig, gig_id)
        if not gig:
            raise NotFoundError("Gig not found")

        if await self._get_client_rating(client.id, gig_id):
            logger.warning(f"[RATING] Client {client.id} already rated gig {gig_id}")
            raise ConflictError(ALREADY_RATED_MESSAGE)

        rating = models.GigRating(
            gig_id=gig.id,
            client=client,
            freelancer_id=gig.freelancer_id,
            rating=data.rating,
            comment=data.comment,
        )
        self.db.add(rating)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"[RATING] Duplicate rating for gig {gig_id} by {client.id} rejected by constraint")
            raise ConflictError(ALREADY_RATED_MESSAGE)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[RATING] Failed to store rating: {e}", exc_info=True)
            raise ServerError()

        logger.info(f"[RATING] Client {client.id} rated gig {gig_id}: {data.rating}")
        average, total = await self.recompute_aggregate(gig_id)
        return schemas.RatingResult(
            message="Rating added successfully",
            rating=schemas.RatingRead.model_validate(rating),
            average_rating=average,
            total_ratings=total,
        )

    async def update_rating(
        self, client: User, gig_id: UUID, data: schemas.RatingWrite
    ) -> schemas.RatingResult:
        """Overwrites rating and comment of the caller's existing rating."""
        rating = await self._get_client_rating(client.id, gig_id)
        if not rating:
            raise NotFoundError("Rating not found")

        rating.rating = data.rating
        rating.comment = data.comment
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[RATING] Failed to update rating {rating.id}: {e}", exc_info=True)
            raise ServerError()

        logger.info(f"[RATING] Client {client.id} changed rating on gig {gig_id} to {data.rating}")
        average, total = await self.recompute_aggregate(gig_id)
        return schemas.RatingResult(
            message="Rating updated successfully",
            rating=schemas.RatingRead.model_validate(rating),
            average_rating=average,
            total_ratings=total,
        )

    # ---------------------------------------------------
    # Read
    # ---------------------------------------------------
    async def list_for_gig(self, gig_id: UUID) -> list[schemas.RatingRead]:
        """All ratings of a gig, newest first, with rater names."""
        result = await self.db.execute(
            select(models.GigRating)
            .filter(models.GigRating.gig_id == gig_id)
            .order_by(models.GigRating.created_at.desc())
        )
        return [schemas.RatingRead.model_validate(r) for r in result.unique().scalars().all()]

    async def get_my_rating(self, user: User, gig_id: UUID) -> schemas.RatingRead | None:
        """The caller's rating of the gig, or None if there is none yet."""
        rating = await self._get_client_rating(user.id, gig_id)
        return schemas.RatingRead.model_validate(rating) if rating else None

    async def freelancer_rating_summary(self, freelancer_id: UUID) -> tuple[float, int]:
        """Average and count over every rating of every gig the freelancer owns."""
        ratings = (
            await self.db.execute(
                select(models.GigRating.rating)
                .join(Gig, Gig.id == models.GigRating.gig_id)
                .where(Gig.freelancer_id == freelancer_id)
            )
        ).scalars().all()
        return round_average(ratings), len(ratings)

