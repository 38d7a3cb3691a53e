"""
wishlist/services.py

Wishlist Service Layer
Maintains each client's set of saved gigs: listing, adding (no duplicates)
and idempotent removal.
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gighub.core.exceptions import ConflictError, NotFoundError, ServerError
from gighub.database.models import User
from gighub.gig.models import Gig
from gighub.gig.schemas import GigRead
from gighub.wishlist.models import WishlistItem

logger = logging.getLogger(__name__)

ALREADY_IN_WISHLIST = "Gig already in wishlist"


class WishlistService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _commit(self, action: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(ALREADY_IN_WISHLIST)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[WISHLIST] Failed to {action}: {e}", exc_info=True)
            raise ServerError()

    async def list_wishlist(self, client: User) -> list[GigRead]:
        """Saved gigs with their owners, in the order they were added."""
        result = await self.db.execute(
            select(WishlistItem)
            .options(selectinload(WishlistItem.gig))
            .filter(WishlistItem.client_id == client.id)
            .order_by(WishlistItem.created_at)
        )
        return [
            GigRead.model_validate(item.gig)
            for item in result.scalars().all()
            if item.gig is not None
        ]

    async def add_to_wishlist(self, client: User, gig_id: UUID) -> None:
        if any(item.gig_id == gig_id for item in client.wishlist_items):
            logger.warning(f"[WISHLIST] Gig {gig_id} already saved by {client.id}")
            raise ConflictError(ALREADY_IN_WISHLIST)

        if not await self.db.get(Gig, gig_id):
            raise NotFoundError("Gig not found")

        client.wishlist_items.append(WishlistItem(gig_id=gig_id))
        await self._commit("add wishlist entry")
        logger.info(f"[WISHLIST] Client {client.id} saved gig {gig_id}")

    async def remove_from_wishlist(self, client: User, gig_id: UUID) -> None:
        """Removing a gig that is not in the wishlist succeeds without changes."""
        entry = next((item for item in client.wishlist_items if item.gig_id == gig_id), None)
        if entry is None:
            logger.debug(f"[WISHLIST] Gig {gig_id} not in wishlist of {client.id}; nothing to remove")
            return

        client.wishlist_items.remove(entry)
        await self._commit("remove wishlist entry")
        logger.info(f"[WISHLIST] Client {client.id} removed gig {gig_id}")
