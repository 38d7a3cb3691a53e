"""
gig/services.py

Gig Service Layer
Manages gig creation, public browsing, view tracking and owner-only
management (update, delete, activate/deactivate).

Owner-only operations look the gig up by id AND owner in a single query, so a
foreign gig and a missing gig are indistinguishable to the caller.
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.exceptions import NotFoundError, ServerError
from gighub.database.models import User
from gighub.gig import models, schemas

logger = logging.getLogger(__name__)

NOT_FOUND_OR_UNAUTHORIZED = "Gig not found or not authorized"


# ---------------------------------------------------
# GigService
# ---------------------------------------------------
class GigService:
    """Handles gig creation, update, deletion, listing and view tracking."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[GIG] Failed to {action}: {e}", exc_info=True)
            raise ServerError()

    async def _get_owned_gig(self, freelancer: User, gig_id: UUID) -> models.Gig:
        """Returns the gig only if it exists and belongs to the freelancer."""
        result = await self.db.execute(
            select(models.Gig).filter(
                models.Gig.id == gig_id, models.Gig.freelancer_id == freelancer.id
            )
        )
        gig = result.unique().scalar_one_or_none()
        if not gig:
            logger.warning(f"[GIG] Gig {gig_id} not found or not owned by {freelancer.id}")
            raise NotFoundError(NOT_FOUND_OR_UNAUTHORIZED)
        return gig

    # ---------------------------------------------------
    # Create
    # ---------------------------------------------------
    async def create_gig(self, freelancer: User, data: schemas.GigCreate) -> schemas.GigRead:
        """Publishes a new, active gig with zeroed counters."""
        gig = models.Gig(
            freelancer=freelancer,
            **data.model_dump(),
            is_active=True,
            views=0,
            average_rating=0.0,
            total_ratings=0,
        )
        self.db.add(gig)
        await self._commit("create gig")
        logger.info(f"[GIG] Freelancer {freelancer.id} created gig {gig.id}")
        return schemas.GigRead.model_validate(gig)

    # ---------------------------------------------------
    # Public reads
    # ---------------------------------------------------
    async def list_active_gigs(
        self, category: str | None = None, search: str | None = None
    ) -> list[schemas.GigRead]:
        """All active gigs, newest first, optionally filtered by category or title text."""
        query = select(models.Gig).filter(models.Gig.is_active.is_(True))
        if category:
            query = query.filter(models.Gig.category == category)
        if search:
            pattern = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            query = query.filter(models.Gig.title.ilike(f"%{pattern}%", escape="\\"))
        query = query.order_by(models.Gig.created_at.desc())

        result = await self.db.execute(query)
        return [schemas.GigRead.model_validate(g) for g in result.unique().scalars().all()]

    async def get_public_gig(self, gig_id: UUID) -> schemas.GigRead:
        """An inactive gig is reported exactly like a missing one."""
        gig = await self.db.get(models.Gig, gig_id)
        if not gig or not gig.is_active:
            raise NotFoundError("Gig not found")
        return schemas.GigRead.model_validate(gig)

    async def record_view(self, gig_id: UUID) -> int:
        """
        Increments the view counter in a single UPDATE, active or not.
        Returns the new count.
        """
        result = await self.db.execute(
            update(models.Gig)
            .where(models.Gig.id == gig_id)
            .values(views=models.Gig.views + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError("Gig not found")

        views = (
            await self.db.execute(select(models.Gig.views).where(models.Gig.id == gig_id))
        ).scalar_one()
        await self._commit("record gig view")
        return int(views)

    # ---------------------------------------------------
    # Owner reads & writes
    # ---------------------------------------------------
    async def list_my_gigs(self, freelancer: User) -> list[schemas.GigRead]:
        """Every gig the freelancer owns, active or not, newest first."""
        result = await self.db.execute(
            select(models.Gig)
            .filter(models.Gig.freelancer_id == freelancer.id)
            .order_by(models.Gig.created_at.desc())
        )
        return [schemas.GigRead.model_validate(g) for g in result.unique().scalars().all()]

    async def update_gig(
        self, freelancer: User, gig_id: UUID, data: schemas.GigUpdate
    ) -> schemas.GigRead:
        gig = await self._get_owned_gig(freelancer, gig_id)

        update_data = data.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            # Explicit nulls cannot clear required columns
            if value is None and key not in ("tags", "images"):
                continue
            setattr(gig, key, value if value is not None else [])

        await self._commit("update gig")
        logger.info(f"[GIG] Gig {gig.id} updated fields: {sorted(update_data)}")
        return schemas.GigRead.model_validate(gig)

    async def delete_gig(self, freelancer: User, gig_id: UUID) -> None:
        gig = await self._get_owned_gig(freelancer, gig_id)
        await self.db.delete(gig)
        await self._commit("delete gig")
        logger.info(f"[GIG] Gig {gig_id} deleted by {freelancer.id}")

    async def toggle_gig_status(self, freelancer: User, gig_id: UUID) -> schemas.GigToggleResponse:
        gig = await self._get_owned_gig(freelancer, gig_id)
        gig.is_active = not gig.is_active
        await self._commit("toggle gig status")

        state = "activated" if gig.is_active else "deactivated"
        logger.info(f"[GIG] Gig {gig.id} {state}")
        return schemas.GigToggleResponse(
            message=f"Gig {state} successfully",
            gig=schemas.GigRead.model_validate(gig),
        )
