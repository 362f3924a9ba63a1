from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

ALL_CATEGORY_SLUG = "all"


@dataclass(frozen=True, slots=True)
class Product:
    """Immutable catalog entry as returned by the remote product service."""

    id: int
    title: str
    description: str
    price: Decimal
    discount_percentage: Decimal
    rating: Decimal
    stock: int
    brand: str
    category: str
    thumbnail: str
    images: tuple[str, ...]

    @property
    def discounted_price(self) -> Decimal:
        """Price after discount, rounded to cents. Display only; carts use `price`."""
        factor = (Decimal("100") - self.discount_percentage) / Decimal("100")
        return (self.price * factor).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True)
class Category:
    slug: str
    display_name: str


ALL_CATEGORY = Category(slug=ALL_CATEGORY_SLUG, display_name="All")


def with_all_category(categories: tuple[Category, ...]) -> tuple[Category, ...]:
    """Prepend the synthetic "All" entry shown in category pickers.

    The "all" slug is never sent to the gateway.
    """
    return (ALL_CATEGORY, *(c for c in categories if c.slug != ALL_CATEGORY_SLUG))
