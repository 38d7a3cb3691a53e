"""
gighub/gig/routes.py

Gig Routes
Defines API routes for freelancer service listings ("gigs"):
- Public browsing, detail retrieval and view tracking
- Create, update, delete and activate/deactivate (owning freelancer only)
- The authenticated freelancer's own gigs, active and inactive
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from gighub.core.dependencies import require_freelancer
from gighub.core.limiter import READ_RATE, WRITE_RATE, limiter
from gighub.core.schemas import MessageResponse
from gighub.database.models import User
from gighub.database.session import get_db
from gighub.gig import schemas
from gighub.gig.services import GigService

router = APIRouter(prefix="/gigs", tags=["Gigs"])

DBDep = Annotated[AsyncSession, Depends(get_db)]
AuthenticatedFreelancerDep = Annotated[User, Depends(require_freelancer)]


# ----------------------------------------------------
# Freelancer Gig Management
# ----------------------------------------------------
@router.post(
    "",
    response_model=schemas.GigRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Gig",
    description="Publish a new gig. The gig starts active with zero views and no ratings.",
)
@limiter.limit(WRITE_RATE)
async def create_gig(
    request: Request,
    payload: schemas.GigCreate,
    db: DBDep,
    current_user: AuthenticatedFreelancerDep,
) -> schemas.GigRead:
    return await GigService(db).create_gig(current_user, payload)


@router.get(
    "/freelancer",
    response_model=list[schemas.GigRead],
    status_code=status.HTTP_200_OK,
    summary="List My Gigs",
    description="All gigs owned by the authenticated freelancer, including inactive ones.",
)
@limiter.limit(READ_RATE)
async def list_my_gigs(
    request: Request,
    db: DBDep,
    current_user: AuthenticatedFreelancerDep,
) -> list[schemas.GigRead]:
    return await GigService(db).list_my_gigs(current_user)


# ----------------------------------------------------
# Public Gig Endpoints
# ----------------------------------------------------
@router.get(
    "",
    response_model=list[schemas.GigRead],
    status_code=status.HTTP_200_OK,
    summary="List Active Gigs",
)
@limiter.limit(READ_RATE)
async def list_gigs(
    request: Request,
    db: DBDep,
    category: str | None = Query(default=None, description="Exact category match"),
    search: str | None = Query(default=None, description="Case-insensitive title filter"),
) -> list[schemas.GigRead]:
    """Active gigs only, each with its freelancer's public name and profile."""
    return await GigService(db).list_active_gigs(category=category, search=search)


@router.get(
    "/{gig_id}",
    response_model=schemas.GigRead,
    status_code=status.HTTP_200_OK,
    summary="Get Gig",
    description="Retrieve one active gig. Inactive gigs are reported as not found.",
)
@limiter.limit(READ_RATE)
async def get_gig(request: Request, gig_id: UUID, db: DBDep) -> schemas.GigRead:
    return await GigService(db).get_public_gig(gig_id)


@router.post(
    "/{gig_id}/view",
    response_model=schemas.GigViewResponse,
    status_code=status.HTTP_200_OK,
    summary="Track Gig View",
)
@limiter.limit(READ_RATE)
async def track_view(request: Request, gig_id: UUID, db: DBDep) -> schemas.GigViewResponse:
    views = await GigService(db).record_view(gig_id)
    return schemas.GigViewResponse(message="View tracked successfully", views=views)


# ----------------------------------------------------
# Owner-only Mutations
# ----------------------------------------------------
@router.put(
    "/{gig_id}",
    response_model=schemas.GigRead,
    status_code=status.HTTP_200_OK,
    summary="Update Gig",
)
@limiter.limit(WRITE_RATE)
async def update_gig(
    request: Request,
    gig_id: UUID,
    payload: schemas.GigUpdate,
    db: DBDep,
    current_user: AuthenticatedFreelancerDep,
) -> schemas.GigRead:
    return await GigService(db).update_gig(current_user, gig_id, payload)


@router.delete(
    "/{gig_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete Gig",
)
@limiter.limit(WRITE_RATE)
async def delete_gig(
    request: Request,
    gig_id: UUID,
    db: DBDep,
    current_user: AuthenticatedFreelancerDep,
) -> MessageResponse:
    await GigService(db).delete_gig(current_user, gig_id)
    return MessageResponse(message="Gig deleted successfully")


@router.patch(
    "/{gig_id}/toggle-status",
    response_model=schemas.GigToggleResponse,
    status_code=status.HTTP_200_OK,
    summary="Activate or Deactivate Gig",
)
@limiter.limit(WRITE_RATE)
async def toggle_gig_status(
    request: Request,
    gig_id: UUID,
    db: DBDep,
    current_user: AuthenticatedFreelancerDep,
) -> schemas.GigToggleResponse:
    return await GigService(db).toggle_gig_status(current_user, gig_id)
