"""Local disk storage for uploaded images (driver photos, document scans).

Storage layout:
    <upload_dir>/<epoch_ms>-<original filename>
"""

import logging
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from dispatch_board.domain.exceptions import UploadRejectedError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = re.compile(r"jpeg|jpg|png|gif|webp")
MAX_UPLOAD_BYTES = 5 * 1024 * 1024
ONLY_IMAGES_MESSAGE = "Only image files are allowed!"

_CHUNK_SIZE = 64 * 1024


@dataclass
class StoredImage:
    """Result of storing a single image on disk."""

    stored_path: str
    filename: str
    original_filename: str
    file_size: int
    mime_type: str


@dataclass(frozen=True)
class UploadPolicy:
    """Which files the intake endpoint accepts and how they are named."""

    upload_dir: Path = Path("uploads")
    max_size_bytes: int = MAX_UPLOAD_BYTES
    allowed_types: re.Pattern[str] = ALLOWED_IMAGE_TYPES

    def check_file_type(self, filename: str, content_type: str | None) -> None:
        """Both the declared MIME type and the extension must match the allow-list."""
        mimetype_ok = bool(self.allowed_types.search(content_type or ""))
        extension_ok = bool(self.allowed_types.search(Path(filename).suffix.lower()))
        if not (mimetype_ok and extension_ok):
            raise UploadRejectedError(filename, ONLY_IMAGES_MESSAGE)

    def check_size(self, filename: str, size: int) -> None:
        if size > self.max_size_bytes:
            raise UploadRejectedError(
                filename,
                f"File too large: limit is {self.max_size_bytes} bytes",
                too_large=True,
            )

    def stored_name(self, filename: str, timestamp_ms: int | None = None) -> str:
        """``<epoch_ms>-<filename>``; directory parts of ``filename`` are dropped."""
        if timestamp_ms is None:
            timestamp_ms = time.time_ns() // 1_000_000
        return f"{timestamp_ms}-{Path(filename).name}"


class ImageUploadStorage:
    """Infrastructure adapter that validates and writes uploaded images."""

    def __init__(self, policy: UploadPolicy | None = None):
        self._policy = policy or UploadPolicy()

    @property
    def policy(self) -> UploadPolicy:
        return self._policy

    async def store_image(
        self,
        stream: BinaryIO,
        filename: str,
        content_type: str | None,
        size: int | None = None,
    ) -> StoredImage:
        """Validate ``stream`` and copy it into the upload directory.

        The size limit is checked up front when ``size`` is known and again
        while copying; a file that grows past the limit is removed.

        Raises:
            UploadRejectedError: On a disallowed type or an oversized file.
        """
        self._policy.check_file_type(filename, content_type)
        if size is not None:
            self._policy.check_size(filename, size)

        upload_dir = self._policy.upload_dir
        upload_dir.mkdir(parents=True, exist_ok=True)
        stored_name = self._policy.stored_name(filename)
        dest_path = upload_dir / stored_name

        written = 0
        try:
            with dest_path.open("wb") as out:
                while chunk := stream.read(_CHUNK_SIZE):
                    written += len(chunk)
                    self._policy.check_size(filename, written)
                    out.write(chunk)
        except UploadRejectedError:
            dest_path.unlink(missing_ok=True)
            logger.info("Rejected oversized upload: %s", filename)
            raise

        logger.info("Stored image: %s (%d bytes)", dest_path, written)

        return StoredImage(
            stored_path=str(dest_path),
            filename=stored_name,
            original_filename=filename,
            file_size=written,
            mime_type=content_type or "application/octet-stream",
        )
