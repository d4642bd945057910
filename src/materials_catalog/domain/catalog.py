"""Domain models for categories and products."""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from materials_catalog.domain.errors import ValidationError
from materials_catalog.domain.media import join_references

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"
PRODUCT_STATUSES = frozenset({STATUS_ACTIVE, STATUS_INACTIVE})

_CENTS = Decimal("0.01")
# products.price is numeric(12, 2).
_PRICE_CEILING = Decimal("1e10")


@dataclass(frozen=True)
class Category:
    """Represents a product category."""

    id: int
    name: str
    created_at: datetime


@dataclass(frozen=True)
class ProductDraft:
    """Validated product fields ready to be written."""

    name: str
    description: str | None
    price: Decimal
    image_urls: list[str]
    category_id: int
    status: str


@dataclass(frozen=True)
class Product:
    """Represents a product in the catalog."""

    id: int
    name: str
    description: str | None
    price: Decimal
    image_urls: list[str]
    category_id: int
    status: str
    created_at: datetime
    updated_at: datetime
    category_name: str | None = None

    @property
    def image_url(self) -> str | None:
        """Comma-joined reference list, or None when there are no images."""
        return join_references(self.image_urls) or None


def parse_price(value: object) -> Decimal:
    """Parse a user-supplied price into a two-digit decimal."""
    if value is None or isinstance(value, bool):
        raise ValidationError("Price must be a number")
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValidationError("Price must be a number") from exc
    if not price.is_finite():
        raise ValidationError("Price must be a number")
    if price < 0:
        raise ValidationError("Price must not be negative")
    try:
        price = price.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValidationError("Price is too large") from exc
    if price >= _PRICE_CEILING:
        raise ValidationError("Price is too large")
    return price


def format_price(price: Decimal) -> str:
    """Render a price with exactly two fraction digits."""
    return f"{price.quantize(_CENTS, rounding=ROUND_HALF_UP):.2f}"
