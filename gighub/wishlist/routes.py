"""
wishlist/routes.py

Client wishlist endpoints.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.dependencies import require_client
from gighub.core.limiter import READ_RATE, WRITE_RATE, limiter
from gighub.core.schemas import MessageResponse
from gighub.database.models import User
from gighub.database.session import get_db
from gighub.gig.schemas import GigRead
from gighub.wishlist.services import WishlistService

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])

DBDep = Annotated[AsyncSession, Depends(get_db)]
AuthenticatedClientDep = Annotated[User, Depends(require_client)]


@router.get("", response_model=list[GigRead], status_code=status.HTTP_200_OK, summary="List Wishlist")
@limiter.limit(READ_RATE)
async def list_wishlist(
    request: Request, db: DBDep, current_user: AuthenticatedClientDep
) -> list[GigRead]:
    return await WishlistService(db).list_wishlist(current_user)


@router.post(
    "/{gig_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Add Gig to Wishlist",
)
@limiter.limit(WRITE_RATE)
async def add_to_wishlist(
    request: Request, gig_id: UUID, db: DBDep, current_user: AuthenticatedClientDep
) -> MessageResponse:
    await WishlistService(db).add_to_wishlist(current_user, gig_id)
    return MessageResponse(message="Gig added to wishlist")


@router.delete(
    "/{gig_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Remove Gig from Wishlist",
)
@limiter.limit(WRITE_RATE)
async def remove_from_wishlist(
    request: Request, gig_id: UUID, db: DBDep, current_user: AuthenticatedClientDep
) -> MessageResponse:
    await WishlistService(db).remove_from_wishlist(current_user, gig_id)
    return MessageResponse(message="Gig removed from wishlist")
