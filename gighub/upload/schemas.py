"""
upload/schemas.py

Response bodies of the image upload endpoints.
"""

from gighub.core.schemas import CamelModel


class SingleUploadResponse(CamelModel):
    message: str
    image_path: str
    filename: str


class MultipleUploadResponse(CamelModel):
    message: str
    image_paths: list[str]
    filenames: list[str]
