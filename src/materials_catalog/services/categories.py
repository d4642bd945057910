"""Services for managing catalog categories."""

import logging
from dataclasses import dataclass
from typing import Protocol

from materials_catalog.domain.catalog import Category
from materials_catalog.domain.errors import CategoryInUse, NotFound, ValidationError

logger = logging.getLogger(__name__)


class CategoryRepository(Protocol):
    """Persistence interface for categories."""

    def list_categories(self) -> list[Category]:
        """Return categories ordered by creation time, oldest first."""

    def create_category(self, name: str) -> Category:
        """Create a category and return it."""

    def update_category(self, category_id: int, name: str) -> Category | None:
        """Rename a category, returning None when the id has no row."""

    def delete_category(self, category_id: int) -> None:
        """Delete a category row."""

    def has_products(self, category_id: int) -> bool:
        """Return true when any product references the category."""


def parse_id(value: object, label: str) -> int:
    """Coerce a user-supplied id to an integer."""
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{label} is required")
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"{label} must be an integer") from exc


def _clean_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Category name is required")
    return cleaned


@dataclass
class CategoryService:
    """Application service for category operations."""

    repository: CategoryRepository

    def list_categories(self) -> list[Category]:
        """Return all categories, oldest first."""
        return self.repository.list_categories()

    def create(self, name: str | None) -> Category:
        """Create a category with a trimmed, non-empty name."""
        category = self.repository.create_category(_clean_name(name))
        logger.info("Created category", extra={"category_id": category.id})
        return category

    def update(self, category_id: object, name: str | None) -> Category:
        """Rename an existing category."""
        resolved_id = parse_id(category_id, "Category ID")
        updated = self.repository.update_category(resolved_id, _clean_name(name))
        if updated is None:
            raise NotFound("Category not found")
        return updated

    def delete(self, category_id: object) -> None:
        """Delete a category that no product references."""
        resolved_id = parse_id(category_id, "Category ID")
        if self.repository.has_products(resolved_id):
            raise CategoryInUse("Category still has products")
        self.repository.delete_category(resolved_id)
        logger.info("Deleted category", extra={"category_id": resolved_id})
