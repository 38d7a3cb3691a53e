"""
review/routes.py

Defines API routes for order reviews:
- Clients submit reviews for their orders
- Public listing of a freelancer's reviews
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.dependencies import require_client
from gighub.core.limiter import READ_RATE, WRITE_RATE, limiter
from gighub.database.models import User
from gighub.database.session import get_db
from gighub.review import schemas
from gighub.review.services import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post(
    "",
    response_model=schemas.ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Review",
)
@limiter.limit(WRITE_RATE)
async def create_review(
    request: Request,
    payload: schemas.ReviewCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_client),
) -> schemas.ReviewRead:
    return await ReviewService(db).create_review(current_user, payload)


@router.get(
    "/freelancer/{freelancer_id}",
    response_model=list[schemas.ReviewRead],
    status_code=status.HTTP_200_OK,
    summary="List Freelancer Reviews",
)
@limiter.limit(READ_RATE)
async def list_freelancer_reviews(
    request: Request,
    freelancer_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> list[schemas.ReviewRead]:
    return await ReviewService(db).list_for_freelancer(freelancer_id)
