"""Product endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from materials_catalog.api.auth import require_user
from materials_catalog.api.catalog_models import (
    ProductImagesIn,
    ProductIn,
    ProductUpdateIn,
)
from materials_catalog.domain.catalog import STATUS_ACTIVE, Product, format_price

if TYPE_CHECKING:
    from materials_catalog.containers import AppContainer

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
def list_products(
    request: Request,
    category_id: int | None = Query(default=None, alias="categoryId"),
    product_status: str = Query(default=STATUS_ACTIVE, alias="status"),
) -> list[dict[str, object]]:
    """Return products for the public catalog, newest first."""
    container: AppContainer = request.app.state.container
    products = container.product_service.list_products(category_id, product_status)
    return [serialize_product(product) for product in products]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_user)],
)
def create_product(payload: ProductIn, request: Request) -> dict[str, object]:
    """Create a product."""
    container: AppContainer = request.app.state.container
    product = container.product_service.create(payload.model_dump(exclude_none=True))
    return serialize_product(product)


@router.put("", dependencies=[Depends(require_user)])
def update_product(
    payload: ProductUpdateIn, request: Request
) -> dict[str, object]:
    """Overwrite a product."""
    container: AppContainer = request.app.state.container
    product = container.product_service.update(payload.model_dump(exclude_none=True))
    return serialize_product(product)


@router.delete("", dependencies=[Depends(require_user)])
def delete_product(
    request: Request,
    id: str | None = None,  # noqa: A002
) -> dict[str, str]:
    """Delete a product; stored images are kept."""
    container: AppContainer = request.app.state.container
    container.product_service.delete(id)
    return {"message": "Product deleted successfully"}


@router.post("/images", dependencies=[Depends(require_user)])
def attach_images(
    payload: ProductImagesIn, request: Request
) -> dict[str, object]:
    """Append uploaded image URLs to a product."""
    container: AppContainer = request.app.state.container
    product = container.product_service.attach_images(payload.id, payload.urls)
    return serialize_product(product)


@router.delete("/images", dependencies=[Depends(require_user)])
def detach_image(
    request: Request,
    id: str | None = None,  # noqa: A002
    url: str | None = None,
) -> dict[str, object]:
    """Remove one image URL from a product."""
    container: AppContainer = request.app.state.container
    product = container.product_service.detach_image(id, url)
    return serialize_product(product)


def serialize_product(product: Product) -> dict[str, object]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": format_price(product.price),
        "image_url": product.image_url,
        "image_urls": list(product.image_urls),
        "category_id": product.category_id,
        "category_name": product.category_name,
        "status": product.status,
        "created_at": product.created_at.isoformat(),
        "updated_at": product.updated_at.isoformat(),
    }
