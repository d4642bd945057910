"""Supabase-backed category repository."""

from dataclasses import dataclass

from supabase import Client

from materials_catalog.adapters.supabase_query import execute, parse_timestamp
from materials_catalog.domain.catalog import Category
from materials_catalog.domain.errors import StoreError
from materials_catalog.services.categories import CategoryRepository


@dataclass
class SupabaseCategoryRepository(CategoryRepository):
    """Supabase implementation for category persistence."""

    client: Client

    def list_categories(self) -> list[Category]:
        """Return categories ordered by creation time, oldest first."""
        response = execute(
            self.client.table("categories")
            .select("id, name, created_at")
            .order("created_at", desc=False),
            "list categories",
        )
        return [_parse_category(row) for row in response.data or []]

    def create_category(self, name: str) -> Category:
        """Create a category and return it."""
        response = execute(
            self.client.table("categories").insert({"name": name}),
            "create category",
        )
        if not response.data:
            raise StoreError("Failed to create category")
        return _parse_category(response.data[0])

    def update_category(self, category_id: int, name: str) -> Category | None:
        """Rename a category, returning None when nothing matched."""
        response = execute(
            self.client.table("categories")
            .update({"name": name})
            .eq("id", category_id),
            "update category",
        )
        if not response.data:
            return None
        return _parse_category(response.data[0])

    def delete_category(self, category_id: int) -> None:
        """Delete a category row."""
        execute(
            self.client.table("categories").delete().eq("id", category_id),
            "delete category",
        )

    def has_products(self, category_id: int) -> bool:
        """Return true when any product references the category."""
        response = execute(
            self.client.table("products")
            .select("id")
            .eq("category_id", category_id)
            .limit(1),
            "check category products",
        )
        return bool(response.data)


def _parse_category(row: dict[str, object]) -> Category:
    return Category(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        created_at=parse_timestamp(row.get("created_at")),
    )
