"""Supabase Storage implementation of the image object store."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx
from storage3.utils import StorageException
from supabase import Client

from materials_catalog.domain.errors import StorageUnavailable
from materials_catalog.services.media import ObjectStore

logger = logging.getLogger(__name__)


@dataclass
class SupabaseObjectStore(ObjectStore):
    """Stores images in a Supabase Storage bucket."""

    client: Client
    bucket: str | None

    def put_object(
        self,
        key: str,
        data: bytes,
        content_type: str,
        cache_max_age: int,
        metadata: Mapping[str, str],
    ) -> None:
        """Upload bytes under a key with a long-lived cache directive."""
        bucket = self._bucket()
        try:
            bucket.upload(
                path=key,
                file=data,
                file_options={
                    "content-type": content_type,
                    "cache-control": str(cache_max_age),
                    "metadata": dict(metadata),
                },
            )
        except (StorageException, httpx.HTTPError) as exc:
            logger.exception("Storage upload failed", extra={"key": key})
            raise StorageUnavailable("Failed to upload image to storage") from exc

    def create_signed_url(self, key: str, expires_in: int) -> str:
        """Return a signed retrieval URL for a stored key."""
        bucket = self._bucket()
        try:
            response = bucket.create_signed_url(key, expires_in)
        except (StorageException, httpx.HTTPError) as exc:
            logger.exception("Signing storage URL failed", extra={"key": key})
            raise StorageUnavailable("Failed to sign image URL") from exc
        url = response.get("signedURL") or response.get("signedUrl")
        if not url:
            raise StorageUnavailable("Storage returned no signed URL")
        return str(url)

    def _bucket(self) -> Any:
        if not self.bucket:
            raise StorageUnavailable("Storage service not configured")
        return self.client.storage.from_(self.bucket)
