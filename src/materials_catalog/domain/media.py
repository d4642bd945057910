"""Uploaded files and product image reference lists.

A product's images are an ordered list of URLs. The legacy wire form joins
them with commas, so a single reference may never contain a comma itself.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from materials_catalog.domain.errors import ValidationError

OCTET_STREAM = "application/octet-stream"

# Content types accepted by the single-file upload route.
IMAGE_TYPES = frozenset({"image/jpeg", "image/png"})
# The admin batch upload also takes the looser browser-reported set.
BATCH_IMAGE_TYPES = IMAGE_TYPES | {"image/jpg", "image/webp", "image/gif"}

_EXTENSION_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file held in memory."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class UploadBatch:
    """Outcome of a multi-file upload."""

    urls: list[str]
    error: str | None = None


def resolve_content_type(filename: str, declared: str | None) -> str:
    """Infer an image type from the extension when the client sent none."""
    content_type = (declared or "").strip().lower() or OCTET_STREAM
    if content_type != OCTET_STREAM:
        return content_type
    _, dot, extension = filename.lower().rpartition(".")
    if dot and extension in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[extension]
    return content_type


def split_references(value: str | None) -> list[str]:
    """Split a comma-joined reference list, dropping blank segments."""
    if not value:
        return []
    return [segment.strip() for segment in value.split(",") if segment.strip()]


def normalize_references(urls: Iterable[str]) -> list[str]:
    """Trim references, drop blanks and reject embedded commas."""
    normalized = []
    for url in urls:
        cleaned = url.strip()
        if not cleaned:
            continue
        if "," in cleaned:
            raise ValidationError("Image URLs must not contain commas")
        normalized.append(cleaned)
    return normalized


def join_references(urls: Sequence[str]) -> str:
    """Join references into the comma-separated wire form."""
    return ",".join(normalize_references(urls))


def append_references(existing: str | None, new_urls: Sequence[str]) -> str:
    """Append new URLs, in upload order, to an existing reference list."""
    return join_references([*split_references(existing), *new_urls])


def remove_reference(value: str | None, url: str) -> str:
    """Drop the matching URL and keep the order of the rest."""
    return join_references(without_reference(split_references(value), url))


def without_reference(urls: Sequence[str], url: str) -> list[str]:
    target = url.strip()
    return [existing for existing in urls if existing != target]
