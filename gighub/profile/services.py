"""
profile/services.py

Profile Service Layer
- Self-service profile updates restricted to a whitelisted field set
- Public profiles, with derived statistics for freelancers
"""

import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.auth.schemas import ProfileData, UserRead
from gighub.core.exceptions import NotFoundError, ServerError
from gighub.database.enums import OrderStatus, UserRole
from gighub.database.models import Profile, User
from gighub.gig.models import Gig
from gighub.gig_rating.services import GigRatingService
from gighub.order.models import Order
from gighub.profile import schemas

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("bio", "location", "skills", "portfolio")


class ProfileService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def update_my_profile(self, user: User, data: schemas.ProfileUpdate) -> UserRead:
        """
        Applies the provided fields. `name` lives on the account, everything
        else on the profile sub-record, which is created on first write.
        """
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("name"):
            user.name = update_data["name"]

        profile_updates = {k: v for k, v in update_data.items() if k in PROFILE_FIELDS}
        if profile_updates:
            if user.profile is None:
                user.profile = Profile(skills=[], portfolio=[])
            for key, value in profile_updates.items():
                if key in ("skills", "portfolio"):
                    value = [item.strip() for item in (value or []) if item.strip()]
                setattr(user.profile, key, value)

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[PROFILE] Failed to update profile of {user.id}: {e}", exc_info=True)
            raise ServerError()

        logger.info(f"[PROFILE] User {user.id} updated: {sorted(update_data)}")
        return UserRead.model_validate(user)

    async def _freelancer_stats(self, freelancer_id: UUID) -> schemas.ProfileStats:
        # Sequential: one AsyncSession cannot run queries concurrently
        total_gigs = (
            await self.db.execute(
                select(func.count()).select_from(Gig).where(Gig.freelancer_id == freelancer_id)
            )
        ).scalar_one()
        completed_orders = (
            await self.db.execute(
                select(func.count())
                .select_from(Order)
                .where(Order.freelancer_id == freelancer_id, Order.status == OrderStatus.DELIVERED)
            )
        ).scalar_one()
        average, total = await GigRatingService(self.db).freelancer_rating_summary(freelancer_id)
        return schemas.ProfileStats(
            total_gigs=total_gigs,
            completed_orders=completed_orders,
            average_rating=average,
            total_ratings=total,
        )

    async def get_public_profile(self, user_id: UUID) -> schemas.PublicProfileRead:
        user = await self.db.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")

        if user.role == UserRole.FREELANCER:
            stats = await self._freelancer_stats(user.id)
        else:
            stats = schemas.ProfileStats()

        return schemas.PublicProfileRead(
            id=user.id,
            name=user.name,
            role=user.role,
            profile=ProfileData.model_validate(user.profile) if user.profile else None,
            created_at=user.created_at,
            **stats.model_dump(),
        )
