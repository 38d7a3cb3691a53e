"""
upload/routes.py

Image upload endpoints for gig images. Files are stored under the public
static root and returned as `/uploads/gigs/<name>` paths.
"""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status

from gighub.core.config import settings
from gighub.core.dependencies import get_current_user
from gighub.core.exceptions import BadRequestError
from gighub.core.limiter import UPLOAD_RATE, limiter
from gighub.core.upload import save_image
from gighub.database.models import User
from gighub.upload import schemas

router = APIRouter(prefix="/upload", tags=["Upload"])
logger = logging.getLogger(__name__)


@router.post(
    "/single",
    response_model=schemas.SingleUploadResponse,
    status_code=status.HTTP_200_OK,
    summary="Upload Image",
    description="Multipart field `image`. JPEG, PNG, GIF or WebP.",
)
@limiter.limit(UPLOAD_RATE)
async def upload_single(
    request: Request,
    image: UploadFile | None = File(default=None),
    current_user: User = Depends(get_current_user),
) -> schemas.SingleUploadResponse:
    if image is None:
        raise BadRequestError("No image file provided")

    image_path, filename = await save_image(image)
    logger.info(f"[UPLOAD] User {current_user.id} uploaded {filename}")
    return schemas.SingleUploadResponse(
        message="Image uploaded successfully", image_path=image_path, filename=filename
    )


@router.post(
    "/multiple",
    response_model=schemas.MultipleUploadResponse,
    status_code=status.HTTP_200_OK,
    summary="Upload Images",
    description="Multipart field `images`, repeated up to the configured maximum.",
)
@limiter.limit(UPLOAD_RATE)
async def upload_multiple(
    request: Request,
    images: list[UploadFile] | None = File(default=None),
    current_user: User = Depends(get_current_user),
) -> schemas.MultipleUploadResponse:
    if not images:
        raise BadRequestError("No image files provided")
    if len(images) > settings.MAX_UPLOAD_FILES:
        raise BadRequestError(f"At most {settings.MAX_UPLOAD_FILES} images can be uploaded at once")

    stored = [await save_image(image) for image in images]
    logger.info(f"[UPLOAD] User {current_user.id} uploaded {len(stored)} images")
    return schemas.MultipleUploadResponse(
        message="Images uploaded successfully",
        image_paths=[path for path, _ in stored],
        filenames=[name for _, name in stored],
    )
