"""Category endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from materials_catalog.api.auth import require_user
from materials_catalog.api.catalog_models import CategoryIn, CategoryUpdateIn
from materials_catalog.domain.catalog import Category

if TYPE_CHECKING:
    from materials_catalog.containers import AppContainer

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
def list_categories(request: Request) -> list[dict[str, object]]:
    """Return all categories, oldest first."""
    container: AppContainer = request.app.state.container
    return [
        serialize_category(category)
        for category in container.category_service.list_categories()
    ]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_user)],
)
def create_category(payload: CategoryIn, request: Request) -> dict[str, object]:
    """Create a category."""
    container: AppContainer = request.app.state.container
    return serialize_category(container.category_service.create(payload.name))


@router.put("", dependencies=[Depends(require_user)])
def update_category(
    payload: CategoryUpdateIn, request: Request
) -> dict[str, object]:
    """Rename a category."""
    container: AppContainer = request.app.state.container
    category = container.category_service.update(payload.id, payload.name)
    return serialize_category(category)


@router.delete("", dependencies=[Depends(require_user)])
def delete_category(
    request: Request,
    id: str | None = None,  # noqa: A002
) -> dict[str, str]:
    """Delete a category that has no products."""
    container: AppContainer = request.app.state.container
    container.category_service.delete(id)
    return {"message": "Category deleted successfully"}


def serialize_category(category: Category) -> dict[str, object]:
    return {
        "id": category.id,
        "name": category.name,
        "created_at": category.created_at.isoformat(),
    }
