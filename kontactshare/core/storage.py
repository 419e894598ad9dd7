"""Local disk storage for uploaded profile photos."""

import os
import secrets
import time
from pathlib import Path

import structlog
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from kontactshare.core.exceptions import InvalidUploadException

logger = structlog.get_logger()

UPLOADS_URL_PREFIX = "/uploads"
READ_CHUNK_SIZE = 64 * 1024

# Accepted photo types and the suffix each is stored under; the static mount
# picks the served content type from this suffix
IMAGE_SUFFIXES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class PhotoStorage:
    """Validates image uploads and stores them under a shared directory."""

    def __init__(self, upload_dir: Path, max_size_bytes: int):
        """Initialize storage rooted at ``upload_dir``."""
        self.upload_dir = upload_dir
        self.max_size_bytes = max_size_bytes

    def ensure_directory(self) -> None:
        """Create the upload directory if it does not exist yet."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def is_writable(self) -> bool:
        """True when the upload directory exists and accepts new files."""
        return self.upload_dir.is_dir() and os.access(self.upload_dir, os.W_OK)

    @staticmethod
    def _generate_filename(field_name: str, suffix: str) -> str:
        """Unique name like ``photo-1700000000000-123456789.png``."""
        millis = int(time.time() * 1000)
        return f"{field_name}-{millis}-{secrets.randbelow(10**9)}{suffix}"

    async def _read_capped(self, upload: UploadFile) -> bytes:
        """Read the upload, refusing anything over the size cap."""
        chunks: list[bytes] = []
        total = 0
        while chunk := await upload.read(READ_CHUNK_SIZE):
            total += len(chunk)
            if total > self.max_size_bytes:
                max_mb = self.max_size_bytes // (1024 * 1024)
                raise InvalidUploadException(f"File too large. Maximum size is {max_mb}MB.")
            chunks.append(chunk)
        return b"".join(chunks)

    async def save_image(self, upload: UploadFile, field_name: str = "photo") -> str:
        """
        Store an image upload and return its public URL path.

        Args:
            upload: Incoming multipart file
            field_name: Form field the file came from, used as filename prefix

        Returns:
            URL path such as ``/uploads/photo-...png``

        Raises:
            InvalidUploadException: If the file is not an accepted image type or
                is too large
        """
        content_type = (upload.content_type or "").split(";")[0].strip().lower()
        if not content_type.startswith("image/"):
            raise InvalidUploadException("Only image files are allowed!")

        suffix = IMAGE_SUFFIXES.get(content_type)
        if suffix is None:
            raise InvalidUploadException("Unsupported image type. Use PNG, JPEG, GIF or WebP.")

        data = await self._read_capped(upload)

        filename = self._generate_filename(field_name, suffix)
        path = self.upload_dir / filename
        await run_in_threadpool(path.write_bytes, data)

        logger.info("photo_stored", filename=filename, size=len(data))
        return f"{UPLOADS_URL_PREFIX}/{filename}"

    def remove(self, url_path: str) -> None:
        """Delete a previously stored file given its URL path."""
        name = url_path.rsplit("/", 1)[-1]
        (self.upload_dir / name).unlink(missing_ok=True)
