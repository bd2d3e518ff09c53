"""Pydantic schemas for the image upload endpoint."""

from pydantic import BaseModel


class UploadedImageSchema(BaseModel):
    """Metadata of an image stored by the intake endpoint."""

    filename: str
    original_filename: str
    stored_path: str
    file_size: int
    mime_type: str
