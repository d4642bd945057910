"""Tests for category service."""

import pytest

from materials_catalog.domain.errors import CategoryInUse, NotFound, ValidationError
from materials_catalog.services.categories import CategoryService
from materials_catalog.services.products import ProductService
from tests.conftest import InMemoryCategoryRepository, InMemoryProductRepository


def test_create_trims_name_and_lists_in_creation_order() -> None:
    service = CategoryService(InMemoryCategoryRepository())

    first = service.create("  Cement ")
    second = service.create("Roofing")

    assert first.name == "Cement"
    assert [c.id for c in service.list_categories()] == [first.id, second.id]


def test_duplicate_names_create_independent_rows() -> None:
    service = CategoryService(InMemoryCategoryRepository())

    first = service.create("Cement")
    second = service.create("Cement")

    names = [c.name for c in service.list_categories()]
    assert names == ["Cement", "Cement"]
    assert first.id != second.id


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_rejects_blank_name(name: str | None) -> None:
    repository = InMemoryCategoryRepository()
    service = CategoryService(repository)

    with pytest.raises(ValidationError):
        service.create(name)

    assert repository.writes == []


@pytest.mark.parametrize("name", ["", "   "])
def test_update_rejects_blank_name_and_keeps_row(name: str) -> None:
    repository = InMemoryCategoryRepository()
    service = CategoryService(repository)
    category = service.create("Cement")

    with pytest.raises(ValidationError):
        service.update(category.id, name)

    assert service.list_categories()[0].name == "Cement"


def test_update_renames_category() -> None:
    service = CategoryService(InMemoryCategoryRepository())
    category = service.create("Cement")

    updated = service.update(str(category.id), " Blocks ")

    assert updated.name == "Blocks"
    assert updated.created_at == category.created_at


def test_update_unknown_category_raises_not_found() -> None:
    service = CategoryService(InMemoryCategoryRepository())

    with pytest.raises(NotFound):
        service.update(99, "Tiles")


def test_update_requires_id() -> None:
    service = CategoryService(InMemoryCategoryRepository())

    with pytest.raises(ValidationError):
        service.update(None, "Tiles")


def test_delete_removes_empty_category() -> None:
    service = CategoryService(InMemoryCategoryRepository())
    category = service.create("Cement")

    service.delete(category.id)

    assert service.list_categories() == []


def test_delete_category_with_products_is_restricted() -> None:
    repository = InMemoryCategoryRepository()
    service = CategoryService(repository)
    products = ProductService(InMemoryProductRepository(repository))
    category = service.create("Cement")
    product = products.create(
        {"name": "Bag", "price": "10.00", "category_id": category.id}
    )

    with pytest.raises(CategoryInUse):
        service.delete(category.id)

    assert [c.id for c in service.list_categories()] == [category.id]
    remaining = products.list_products(category_id=category.id)
    assert [p.id for p in remaining] == [product.id]


def test_delete_requires_id() -> None:
    repository = InMemoryCategoryRepository()
    service = CategoryService(repository)

    with pytest.raises(ValidationError):
        service.delete("")

    assert repository.writes == []
