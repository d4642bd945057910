"""Services for managing catalog products."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from materials_catalog.domain.catalog import (
    PRODUCT_STATUSES,
    STATUS_ACTIVE,
    Product,
    ProductDraft,
    parse_price,
)
from materials_catalog.domain.errors import NotFound, ValidationError
from materials_catalog.domain.media import (
    normalize_references,
    split_references,
    without_reference,
)
from materials_catalog.services.categories import parse_id

logger = logging.getLogger(__name__)


class ProductRepository(Protocol):
    """Persistence interface for products."""

    def list_products(self, category_id: int | None, status: str) -> list[Product]:
        """Return products with category names, newest first."""

    def get_product(self, product_id: int) -> Product | None:
        """Return a product by id, if present."""

    def create_product(self, draft: ProductDraft) -> Product:
        """Create a product and return it."""

    def update_product(
        self, product_id: int, draft: ProductDraft, updated_at: datetime
    ) -> Product | None:
        """Overwrite a product, returning None when the id has no row."""

    def update_images(
        self, product_id: int, image_urls: list[str], updated_at: datetime
    ) -> Product | None:
        """Replace a product's image references."""

    def delete_product(self, product_id: int) -> None:
        """Delete a product row."""


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def parse_draft(payload: dict[str, object]) -> ProductDraft:
    """Validate and coerce product fields from a request payload."""
    name = payload.get("name")
    price = payload.get("price")
    category_id = payload.get("category_id")
    if _is_missing(name) or _is_missing(price) or _is_missing(category_id):
        raise ValidationError("Name, price, and category are required")

    status = payload.get("status") or STATUS_ACTIVE
    if status not in PRODUCT_STATUSES:
        raise ValidationError("Status must be 'active' or 'inactive'")

    description = payload.get("description")
    if isinstance(description, str):
        description = description.strip() or None

    return ProductDraft(
        name=str(name).strip(),
        description=description or None,
        price=parse_price(price),
        image_urls=_parse_image_urls(payload),
        category_id=parse_id(category_id, "Category ID"),
        status=str(status),
    )


def _parse_image_urls(payload: dict[str, object]) -> list[str]:
    """Read references from image_urls, falling back to the comma-joined form."""
    image_urls = payload.get("image_urls")
    if image_urls is not None:
        if isinstance(image_urls, str) or not isinstance(image_urls, Sequence):
            raise ValidationError("image_urls must be a list of URLs")
        return normalize_references(str(url) for url in image_urls)
    image_url = payload.get("image_url")
    if image_url is None:
        return []
    return split_references(str(image_url))


@dataclass
class ProductService:
    """Application service for product operations."""

    repository: ProductRepository

    def list_products(
        self, category_id: int | None = None, status: str = STATUS_ACTIVE
    ) -> list[Product]:
        """Return products matching the status and optional category."""
        return self.repository.list_products(category_id, status or STATUS_ACTIVE)

    def create(self, payload: dict[str, object]) -> Product:
        """Create a product from request fields."""
        product = self.repository.create_product(parse_draft(payload))
        logger.info("Created product", extra={"product_id": product.id})
        return product

    def update(self, payload: dict[str, object]) -> Product:
        """Overwrite an existing product from request fields."""
        if _is_missing(payload.get("id")):
            raise ValidationError("ID, name, price, and category are required")
        product_id = parse_id(payload.get("id"), "Product ID")
        draft = parse_draft(payload)
        updated = self.repository.update_product(
            product_id, draft, updated_at=datetime.now(tz=UTC)
        )
        if updated is None:
            raise NotFound("Product not found")
        return updated

    def delete(self, product_id: object) -> None:
        """Delete a product; its stored images are left in place."""
        resolved_id = parse_id(product_id, "Product ID")
        self.repository.delete_product(resolved_id)
        logger.info("Deleted product", extra={"product_id": resolved_id})

    def attach_images(self, product_id: object, urls: Sequence[str]) -> Product:
        """Append image references to a product in upload order."""
        product = self._get(product_id)
        merged = normalize_references([*product.image_urls, *urls])
        return self._save_images(product, merged)

    def detach_image(self, product_id: object, url: str | None) -> Product:
        """Remove one image reference from a product."""
        if _is_missing(url):
            raise ValidationError("Image URL is required")
        product = self._get(product_id)
        return self._save_images(product, without_reference(product.image_urls, url))

    def _get(self, product_id: object) -> Product:
        product = self.repository.get_product(parse_id(product_id, "Product ID"))
        if product is None:
            raise NotFound("Product not found")
        return product

    def _save_images(self, product: Product, image_urls: list[str]) -> Product:
        updated = self.repository.update_images(
            product.id, image_urls, updated_at=datetime.now(tz=UTC)
        )
        if updated is None:
            raise NotFound("Product not found")
        logger.info(
            "Updated product images",
            extra={"product_id": product.id, "image_count": len(image_urls)},
        )
        return updated
