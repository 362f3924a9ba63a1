from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.product import Category, Product


class CatalogGateway(ABC):
    """
    Port for the remote product catalog.

    Contract:
        - One bounded-timeout request per call; no retries, no caching
        - Failures are raised as NetworkError (transport, timeout, bad status)
          or DecodeError (malformed body); callers interpret them
        - Implementations hold no query state
    """

    @abstractmethod
    async def fetch_all(self, limit: int) -> list[Product]:
        """Fetch the first `limit` products of the unfiltered catalog."""
        ...

    @abstractmethod
    async def fetch_by_category(self, slug: str) -> list[Product]:
        """Fetch products in the category identified by `slug`."""
        ...

    @abstractmethod
    async def search(self, term: str) -> list[Product]:
        """Free-text product search."""
        ...

    @abstractmethod
    async def fetch_categories(self) -> list[Category]:
        """Fetch the category list (without the synthetic "all" entry)."""
        ...

    @abstractmethod
    async def fetch_product(self, product_id: int) -> Product:
        """
        Fetch a single product.

        Raises:
            NotFoundError: If the catalog has no such product
        """
        ...

    async def aclose(self) -> None:
        """Release transport resources. Default: nothing to release."""
        return None
