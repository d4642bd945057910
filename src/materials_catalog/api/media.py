"""Image upload endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from materials_catalog.api.auth import require_user
from materials_catalog.domain.errors import ValidationError
from materials_catalog.domain.media import (
    UploadedFile,
    append_references,
    resolve_content_type,
)

if TYPE_CHECKING:
    from materials_catalog.containers import AppContainer

router = APIRouter(prefix="/upload", tags=["media"])


@router.post("", dependencies=[Depends(require_user)])
def upload_image(
    request: Request, file: UploadFile | None = File(default=None)
) -> dict[str, object]:
    """Store one product image and return its signed URL."""
    container: AppContainer = request.app.state.container
    if file is None:
        raise ValidationError("No file uploaded")
    url = container.media_service.store(
        _read_upload(file, container.media_service.max_upload_bytes)
    )
    return {"success": True, "message": "Product image uploaded.", "url": url}


@router.post("/batch", dependencies=[Depends(require_user)])
def upload_images(
    request: Request,
    files: list[UploadFile] | None = File(default=None),
    image_url: str | None = Form(default=None),
) -> dict[str, object]:
    """Store several images and merge their URLs into a reference list."""
    container: AppContainer = request.app.state.container
    if not files:
        raise ValidationError("No file uploaded")
    media_service = container.media_service
    batch = media_service.store_batch(
        _read_upload(file, media_service.max_upload_bytes) for file in files
    )
    return {
        "success": batch.error is None,
        "urls": batch.urls,
        "image_url": append_references(image_url, batch.urls),
        "error": batch.error,
    }


def _read_upload(file: UploadFile, max_bytes: int) -> UploadedFile:
    """Read an upload, stopping one byte past the size limit."""
    filename = file.filename or "image"
    return UploadedFile(
        filename=filename,
        content_type=resolve_content_type(filename, file.content_type),
        data=file.file.read(max_bytes + 1),
    )
