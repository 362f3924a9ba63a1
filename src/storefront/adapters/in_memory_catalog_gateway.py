from __future__ import annotations

from storefront.domain.errors import NotFoundError
from storefront.domain.product import Category, Product
from storefront.ports.catalog_gateway import CatalogGateway


class InMemoryCatalogGateway(CatalogGateway):
    """
    Canonical contract implementation for tests and offline demos.

    - Stores products in insertion order
    - Category match is exact on the slug
    - Search is a case-insensitive substring match on title, description,
      brand and category
    - `fetch_all` returns the first `limit` products
    """

    def __init__(self, products: list[Product], categories: list[Category] | None = None) -> None:
        self._products = products
        self._categories = categories if categories is not None else self._derive_categories(products)

    async def fetch_all(self, limit: int) -> list[Product]:
        return self._products[:limit]

    async def fetch_by_category(self, slug: str) -> list[Product]:
        return [product for product in self._products if product.category == slug]

    async def search(self, term: str) -> list[Product]:
        needle = term.lower()
        return [product for product in self._products if self._matches(product, needle)]

    async def fetch_categories(self) -> list[Category]:
        return list(self._categories)

    async def fetch_product(self, product_id: int) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        raise NotFoundError(resource="Product", identifier=str(product_id))

    def _matches(self, product: Product, needle: str) -> bool:
        haystacks = (product.title, product.description, product.brand, product.category)
        return any(needle in haystack.lower() for haystack in haystacks)

    @staticmethod
    def _derive_categories(products: list[Product]) -> list[Category]:
        seen: dict[str, Category] = {}
        for product in products:
            if product.category not in seen:
                seen[product.category] = Category(
                    slug=product.category,
                    display_name=product.category.replace("-", " ").title(),
                )
        return list(seen.values())
