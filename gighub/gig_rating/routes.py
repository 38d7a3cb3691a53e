"""
gig_rating/routes.py

Gig rating endpoints. Clients create and update their own rating of a gig;
anyone can list a gig's ratings.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.dependencies import get_current_user, require_client
from gighub.core.limiter import READ_RATE, WRITE_RATE, limiter
from gighub.database.models import User
from gighub.database.session import get_db
from gighub.gig_rating import schemas
from gighub.gig_rating.services import GigRatingService

router = APIRouter(prefix="/gig-ratings", tags=["Gig Ratings"])

DBDep = Annotated[AsyncSession, Depends(get_db)]
AuthenticatedClientDep = Annotated[User, Depends(require_client)]


@router.post(
    "/{gig_id}",
    response_model=schemas.RatingResult,
    status_code=status.HTTP_201_CREATED,
    summary="Rate Gig",
    description="Add the caller's rating. A client can rate a gig once; use PUT to change it.",
)
@limiter.limit(WRITE_RATE)
async def add_rating(
    request: Request,
    gig_id: UUID,
    payload: schemas.RatingWrite,
    db: DBDep,
    current_user: AuthenticatedClientDep,
) -> schemas.RatingResult:
    return await GigRatingService(db).add_rating(current_user, gig_id, payload)


@router.get(
    "/{gig_id}",
    response_model=list[schemas.RatingRead],
    status_code=status.HTTP_200_OK,
    summary="List Gig Ratings",
)
@limiter.limit(READ_RATE)
async def list_ratings(request: Request, gig_id: UUID, db: DBDep) -> list[schemas.RatingRead]:
    return await GigRatingService(db).list_for_gig(gig_id)


@router.get(
    "/{gig_id}/user-rating",
    response_model=schemas.RatingRead | None,
    status_code=status.HTTP_200_OK,
    summary="Get My Rating",
    description="The caller's rating of this gig, or null when they have not rated it.",
)
@limiter.limit(READ_RATE)
async def get_my_rating(
    request: Request,
    gig_id: UUID,
    db: DBDep,
    current_user: User = Depends(get_current_user),
) -> schemas.RatingRead | None:
    return await GigRatingService(db).get_my_rating(current_user, gig_id)


@router.put(
    "/{gig_id}",
    response_model=schemas.RatingResult,
    status_code=status.HTTP_200_OK,
    summary="Update My Rating",
)
@limiter.limit(WRITE_RATE)
async def update_rating(
    request: Request,
    gig_id: UUID,
    payload: schemas.RatingWrite,
    db: DBDep,
    current_user: AuthenticatedClientDep,
) -> schemas.RatingResult:
    return await GigRatingService(db).update_rating(current_user, gig_id, payload)
