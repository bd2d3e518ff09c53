from .image_upload_storage import (
    ALLOWED_IMAGE_TYPES,
    MAX_UPLOAD_BYTES,
    ImageUploadStorage,
    StoredImage,
    UploadPolicy,
)

__all__ = [
    "ALLOWED_IMAGE_TYPES",
    "MAX_UPLOAD_BYTES",
    "ImageUploadStorage",
    "StoredImage",
    "UploadPolicy",
]
