"""Image intake endpoint (driver photos, vehicle document scans)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from dispatch_board.application.schemas import UploadedImageSchema
from dispatch_board.domain.exceptions import UploadRejectedError
from dispatch_board.infrastructure.dependencies import get_image_upload_storage
from dispatch_board.infrastructure.storage import ImageUploadStorage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["Uploads"])

_HTTP_413_CONTENT_TOO_LARGE = 413


@router.post("", response_model=UploadedImageSchema, status_code=status.HTTP_201_CREATED)
async def upload_image(
    file: UploadFile,
    storage: ImageUploadStorage = Depends(get_image_upload_storage),
) -> UploadedImageSchema:
    """Store one image. Non-images get 400, files over the size limit get 413."""
    try:
        stored = await storage.store_image(
            file.file,
            filename=file.filename or "",
            content_type=file.content_type,
            size=file.size,
        )
    except UploadRejectedError as e:
        code = _HTTP_413_CONTENT_TOO_LARGE if e.too_large else status.HTTP_400_BAD_REQUEST
        raise HTTPException(status_code=code, detail=e.message)

    return UploadedImageSchema(
        filename=stored.filename,
        original_filename=stored.original_filename,
        stored_path=stored.stored_path,
        file_size=stored.file_size,
        mime_type=stored.mime_type,
    )
