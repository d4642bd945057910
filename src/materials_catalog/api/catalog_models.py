"""Pydantic models for catalog request payloads.

Required fields and coercion are checked in the services.
"""

from pydantic import BaseModel


class CredentialsIn(BaseModel):
    """Email and password payload."""

    email: str | None = None
    password: str | None = None


class CategoryIn(BaseModel):
    """Category create payload."""

    name: str | None = None


class CategoryUpdateIn(BaseModel):
    """Category update payload."""

    id: int | str | None = None
    name: str | None = None


class ProductIn(BaseModel):
    """Product create payload."""

    name: str | None = None
    description: str | None = None
    price: str | int | float | None = None
    image_url: str | None = None
    image_urls: list[str] | None = None
    category_id: int | str | None = None
    status: str | None = None


class ProductUpdateIn(ProductIn):
    """Product update payload."""

    id: int | str | None = None


class ProductImagesIn(BaseModel):
    """Image references to attach to a product."""

    id: int | str | None = None
    urls: list[str] = []
