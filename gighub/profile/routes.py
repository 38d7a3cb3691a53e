"""
profile/routes.py

Profile endpoints: the caller's own account and profile, and public
profiles by account id.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.auth.schemas import UserRead
from gighub.core.dependencies import get_current_user
from gighub.core.limiter import READ_RATE, WRITE_RATE, limiter
from gighub.database.models import User
from gighub.database.session import get_db
from gighub.profile import schemas
from gighub.profile.services import ProfileService

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=UserRead, status_code=status.HTTP_200_OK, summary="Get My Profile")
@limiter.limit(READ_RATE)
async def get_my_profile(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> UserRead:
    return UserRead.model_validate(current_user)


@router.put(
    "",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
    summary="Update My Profile",
    description="Only name, bio, location, skills and portfolio can be changed here.",
)
@limiter.limit(WRITE_RATE)
async def update_my_profile(
    request: Request,
    payload: schemas.ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    return await ProfileService(db).update_my_profile(current_user, payload)


@router.get(
    "/{user_id}",
    response_model=schemas.PublicProfileRead,
    status_code=status.HTTP_200_OK,
    summary="Get Public Profile",
    description="Public view of an account. Freelancers include gig, order and rating stats.",
)
@limiter.limit(READ_RATE)
async def get_public_profile(
    request: Request,
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> schemas.PublicProfileRead:
    return await ProfileService(db).get_public_profile(user_id)
