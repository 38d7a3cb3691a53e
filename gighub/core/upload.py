"""
core/upload.py

Handles image uploads securely by:
- Validating file MIME type using content sniffing
- Enforcing the per-file size cap
- Storing files under the public static root with collision-free names
"""

import logging
import os
import uuid
from pathlib import Path

import filetype
from fastapi import UploadFile, status
from fastapi.concurrency import run_in_threadpool

from gighub.core.config import settings
from gighub.core.exceptions import APIError, BadRequestError, ServerError

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES: set[str] = {"image/jpeg", "image/png", "image/gif", "image/webp"}

# Public URL prefix under which UPLOAD_DIR is mounted
PUBLIC_PREFIX = "/uploads"
GIG_SUBFOLDER = "gigs"

CHUNK_SIZE = 8192


class UnsupportedMediaTypeError(APIError):
    status_code_default = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    message_default = "Only image files are allowed"


class PayloadTooLargeError(APIError):
    status_code_default = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    message_default = "File too large"


def _write_file(destination: Path, data: bytes) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    with open(destination, "wb") as fh:
        fh.write(data)


async def save_image(file: UploadFile, subfolder: str = GIG_SUBFOLDER) -> tuple[str, str]:
    """
    Validates and stores one uploaded image.

    Returns:
        (public_path, stored_filename), e.g. ("/uploads/gigs/ab12....png", "ab12....png")

    Raises:
        BadRequestError: empty payload.
        PayloadTooLargeError: file exceeds MAX_UPLOAD_SIZE_MB.
        UnsupportedMediaTypeError: content is not one of the allowed image types.
        ServerError: the file could not be written.
    """
    data = bytearray()
    try:
        while chunk := await file.read(CHUNK_SIZE):
            data.extend(chunk)
            if len(data) > settings.max_upload_size:
                logger.warning(
                    f"[UPLOAD] Rejected '{file.filename}': exceeds {settings.MAX_UPLOAD_SIZE_MB} MB"
                )
                raise PayloadTooLargeError(
                    f"File size exceeds the limit of {settings.MAX_UPLOAD_SIZE_MB} MB"
                )
    finally:
        await file.close()

    if not data:
        logger.warning(f"[UPLOAD] Rejected empty file '{file.filename}'")
        raise BadRequestError("Received an empty file")

    # --- MIME Type Validation ---
    kind = filetype.guess(bytes(data[:261]))
    detected_mime = kind.mime if kind else "unknown"
    if not kind or detected_mime not in ALLOWED_MIME_TYPES:
        logger.warning(
            f"[UPLOAD] Rejected '{file.filename}': detected type '{detected_mime}' is not an image"
        )
        raise UnsupportedMediaTypeError()

    original_ext = os.path.splitext(file.filename or "")[1].lower()
    ext = original_ext if original_ext.lstrip(".") == kind.extension else f".{kind.extension}"
    stored_name = f"{uuid.uuid4().hex}{ext}"
    destination = settings.upload_path / subfolder / stored_name

    try:
        await run_in_threadpool(_write_file, destination, bytes(data))
    except OSError as e:
        logger.error(f"[UPLOAD] Failed to write '{destination}': {e}", exc_info=True)
        raise ServerError("Failed to store uploaded file")

    public_path = f"{PUBLIC_PREFIX}/{subfolder}/{stored_name}"
    logger.info(f"[UPLOAD] Stored '{file.filename}' ({len(data)} bytes, {detected_mime}) as {public_path}")
    return public_path, stored_name
