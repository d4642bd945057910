"""Supabase-backed product repository."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from supabase import Client

from materials_catalog.adapters.supabase_query import execute, parse_timestamp
from materials_catalog.domain.catalog import Product, ProductDraft
from materials_catalog.domain.errors import StoreError
from materials_catalog.services.products import ProductRepository

_WITH_CATEGORY = "*, categories(name)"


@dataclass
class SupabaseProductRepository(ProductRepository):
    """Supabase implementation for product persistence."""

    client: Client

    def list_products(self, category_id: int | None, status: str) -> list[Product]:
        """Return products with category names, newest first."""
        query = (
            self.client.table("products").select(_WITH_CATEGORY).eq("status", status)
        )
        if category_id is not None:
            query = query.eq("category_id", category_id)
        response = execute(query.order("created_at", desc=True), "list products")
        return [_parse_product(row) for row in response.data or []]

    def get_product(self, product_id: int) -> Product | None:
        """Return a product by id, if present."""
        response = execute(
            self.client.table("products")
            .select(_WITH_CATEGORY)
            .eq("id", product_id)
            .limit(1),
            "load product",
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def create_product(self, draft: ProductDraft) -> Product:
        """Create a product and return it."""
        response = execute(
            self.client.table("products").insert(_draft_payload(draft)),
            "create product",
        )
        if not response.data:
            raise StoreError("Failed to create product")
        return _parse_product(response.data[0])

    def update_product(
        self, product_id: int, draft: ProductDraft, updated_at: datetime
    ) -> Product | None:
        """Overwrite a product, returning None when nothing matched."""
        response = execute(
            self.client.table("products")
            .update({**_draft_payload(draft), "updated_at": updated_at.isoformat()})
            .eq("id", product_id),
            "update product",
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def update_images(
        self, product_id: int, image_urls: list[str], updated_at: datetime
    ) -> Product | None:
        """Replace the product's image references."""
        response = execute(
            self.client.table("products")
            .update({"image_urls": image_urls, "updated_at": updated_at.isoformat()})
            .eq("id", product_id),
            "update product images",
        )
        if not response.data:
            return None
        return _parse_product(response.data[0])

    def delete_product(self, product_id: int) -> None:
        """Delete a product row."""
        execute(
            self.client.table("products").delete().eq("id", product_id),
            "delete product",
        )


def _draft_payload(draft: ProductDraft) -> dict[str, object]:
    return {
        "name": draft.name,
        "description": draft.description,
        # numeric columns accept strings; Decimal is not JSON serializable
        "price": str(draft.price),
        "image_urls": list(draft.image_urls),
        "category_id": draft.category_id,
        "status": draft.status,
    }


def _parse_product(row: dict[str, object]) -> Product:
    """Parse a product row into a domain model."""
    category = row.get("categories")
    category_name = category.get("name") if isinstance(category, dict) else None
    image_urls = row.get("image_urls") or []
    return Product(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        price=Decimal(str(row.get("price", "0"))).quantize(Decimal("0.01")),
        image_urls=[str(url) for url in image_urls],
        category_id=int(row["category_id"]),
        status=str(row.get("status", "")),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
        category_name=category_name,
    )
