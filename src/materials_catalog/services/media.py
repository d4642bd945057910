"""Image upload validation and storage."""

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from materials_catalog.domain.errors import InvalidType, TooLarge, UploadRejected
from materials_catalog.domain.media import (
    BATCH_IMAGE_TYPES,
    IMAGE_TYPES,
    UploadBatch,
    UploadedFile,
)

logger = logging.getLogger(__name__)

KEY_PREFIX = "products"
CACHE_MAX_AGE_SECONDS = 60 * 60 * 24 * 365

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class ObjectStore(Protocol):
    """Interface for the image object store."""

    def put_object(
        self,
        key: str,
        data: bytes,
        content_type: str,
        cache_max_age: int,
        metadata: Mapping[str, str],
    ) -> None:
        """Write bytes under a key with user metadata."""

    def create_signed_url(self, key: str, expires_in: int) -> str:
        """Return a time-limited retrieval URL for a key."""


def sanitize_filename(filename: str) -> str:
    """Reduce an uploaded filename to URL- and key-safe characters."""
    cleaned = _UNSAFE_NAME_CHARS.sub("-", filename.strip()).strip(".-")
    return cleaned or "image"


def build_storage_key(filename: str, now: datetime, suffix: str) -> str:
    """Return products/<epoch-ms>-<suffix>-<name> for an upload."""
    stamp = int(now.timestamp() * 1000)
    return f"{KEY_PREFIX}/{stamp}-{suffix}-{sanitize_filename(filename)}"


def _random_suffix() -> str:
    return uuid4().hex[:12]


@dataclass
class MediaService:
    """Validates uploads and writes them to the object store."""

    object_store: ObjectStore
    max_upload_bytes: int
    signed_url_expires_seconds: int
    suffix_factory: Callable[[], str] = field(default=_random_suffix)

    def validate(
        self, upload: UploadedFile, allowed_types: frozenset[str] = IMAGE_TYPES
    ) -> None:
        """Reject files with a disallowed type or an oversized payload."""
        if upload.content_type not in allowed_types:
            raise InvalidType("Invalid file type. Only images are allowed.")
        if upload.size > self.max_upload_bytes:
            limit_mb = self.max_upload_bytes // (1024 * 1024)
            raise TooLarge(f"File too large. Maximum size is {limit_mb}MB.")

    def store(
        self, upload: UploadedFile, allowed_types: frozenset[str] = IMAGE_TYPES
    ) -> str:
        """Validate and store a file, returning its signed URL."""
        self.validate(upload, allowed_types)
        now = datetime.now(tz=UTC)
        key = build_storage_key(upload.filename, now, self.suffix_factory())
        self.object_store.put_object(
            key,
            upload.data,
            content_type=upload.content_type,
            cache_max_age=CACHE_MAX_AGE_SECONDS,
            metadata={
                "original-filename": upload.filename,
                "upload-timestamp": now.isoformat(),
            },
        )
        logger.info(
            "Stored upload",
            extra={
                "key": key,
                "content_type": upload.content_type,
                "size": upload.size,
            },
        )
        return self.object_store.create_signed_url(
            key, expires_in=self.signed_url_expires_seconds
        )

    def store_batch(self, uploads: Iterable[UploadedFile]) -> UploadBatch:
        """Store each valid file, skipping and reporting rejected ones."""
        urls: list[str] = []
        error: str | None = None
        for upload in uploads:
            try:
                urls.append(self.store(upload, BATCH_IMAGE_TYPES))
            except UploadRejected as exc:
                logger.info("Skipped upload", extra={"reason": str(exc)})
                error = str(exc)
        return UploadBatch(urls=urls, error=error)
