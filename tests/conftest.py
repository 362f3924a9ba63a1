from __future__ import annotations

from decimal import Decimal
from typing import Callable

import pytest

from storefront.domain.product import Product

ProductFactory = Callable[..., Product]


@pytest.fixture()
def make_product() -> ProductFactory:
    """Factory for catalog products with sensible defaults."""

    def factory(
        id: int = 1,
        price: str = "10.00",
        category: str = "smartphones",
        title: str | None = None,
        **overrides: object,
    ) -> Product:
        fields: dict[str, object] = {
            "id": id,
            "title": title or f"Product {id}",
            "description": f"Description of product {id}",
            "price": Decimal(price),
            "discount_percentage": Decimal("0"),
            "rating": Decimal("4.5"),
            "stock": 10,
            "brand": "Acme",
            "category": category,
            "thumbnail": f"https://cdn.example.com/{id}/thumbnail.png",
            "images": (f"https://cdn.example.com/{id}/1.png",),
        }
        fields.update(overrides)
        return Product(**fields)  # type: ignore[arg-type]

    return factory
