"""FastAPI dependency injection: wires infrastructure to the endpoints."""

from pathlib import Path

from dispatch_board.config import get_settings
from dispatch_board.infrastructure.storage import ImageUploadStorage, UploadPolicy


def get_image_upload_storage() -> ImageUploadStorage:
    """Provides an ImageUploadStorage configured from settings."""
    settings = get_settings()
    policy = UploadPolicy(
        upload_dir=Path(settings.upload_dir),
        max_size_bytes=settings.max_upload_size_mb * 1024 * 1024,
    )
    return ImageUploadStorage(policy)
