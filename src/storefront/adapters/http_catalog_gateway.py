"""HTTP implementation of CatalogGateway.

Talks to a DummyJSON-compatible product service with an async httpx client.
Every call is a single request bounded by the client timeout; there is no
retry and no caching.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
import pydantic

from storefront.adapters.catalog_records import (
    CategoryListAdapter,
    ProductRecord,
    ProductsPage,
    categories_to_domain,
)
from storefront.domain.errors import DecodeError, NetworkError, NotFoundError
from storefront.domain.product import Category, Product
from storefront.infra import config
from storefront.ports.catalog_gateway import CatalogGateway

logger = logging.getLogger(__name__)


class HttpCatalogGateway(CatalogGateway):
    """
    Remote catalog over HTTP.

    Error mapping:
    - Timeout → NetworkError ("timeout of <ms>ms exceeded")
    - Connection/transport failure → NetworkError
    - Non-2xx status → NetworkError ("Request failed with status code <n>")
    - 404 from the single-product endpoint → NotFoundError
    - Body that is not JSON or does not match the expected shape → DecodeError
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """
        Initialize gateway with an HTTP client.

        Args:
            client: Async client configured with base_url and timeout
        """
        self._client = client

    @classmethod
    def from_config(cls) -> HttpCatalogGateway:
        """Build a gateway from environment configuration."""
        client = httpx.AsyncClient(
            base_url=config.api_base_url(),
            timeout=config.request_timeout_seconds(),
        )
        return cls(client)

    async def fetch_all(self, limit: int) -> list[Product]:
        payload = await self._get_json("/products", params={"limit": limit})
        return self._decode_products(payload)

    async def fetch_by_category(self, slug: str) -> list[Product]:
        path = "/products/category/" + quote(slug, safe="")
        payload = await self._get_json(path)
        return self._decode_products(payload)

    async def search(self, term: str) -> list[Product]:
        payload = await self._get_json("/products/search", params={"q": term})
        return self._decode_products(payload)

    async def fetch_categories(self) -> list[Category]:
        payload = await self._get_json("/products/categories")
        try:
            records = CategoryListAdapter.validate_python(payload)
        except pydantic.ValidationError as exc:
            raise DecodeError("Malformed category list", details=exc.errors(include_url=False)) from exc
        return categories_to_domain(records)

    async def fetch_product(self, product_id: int) -> Product:
        try:
            payload = await self._get_json(f"/products/{product_id}")
        except NetworkError as exc:
            if exc.context.get("status_code") == httpx.codes.NOT_FOUND:
                raise NotFoundError(resource="Product", identifier=str(product_id)) from exc
            raise

        try:
            return ProductRecord.model_validate(payload).to_domain()
        except pydantic.ValidationError as exc:
            raise DecodeError("Malformed product", details=exc.errors(include_url=False)) from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Perform one GET and return the decoded JSON body.

        Raises:
            NetworkError: On timeout, transport failure, redirect loop or non-2xx status
            DecodeError: If the body cannot be content-decoded or is not valid JSON
        """
        logger.debug("Catalog request", extra={"path": path, "params": params})

        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise NetworkError(f"timeout of {self._timeout_ms()}ms exceeded", path=path) from exc
        except httpx.DecodingError as exc:
            raise DecodeError("Response body could not be decoded", path=path) from exc
        except httpx.RequestError as exc:
            # Transport failures, redirect loops and anything else raised while sending
            raise NetworkError(str(exc) or "Network Error", path=path) from exc

        if response.is_error:
            raise NetworkError(
                f"Request failed with status code {response.status_code}",
                path=path,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError("Response body is not valid JSON", path=path) from exc

    def _decode_products(self, payload: Any) -> list[Product]:
        try:
            page = ProductsPage.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise DecodeError("Malformed product list", details=exc.errors(include_url=False)) from exc
        return [record.to_domain() for record in page.products]

    def _timeout_ms(self) -> int:
        timeout = self._client.timeout.read
        return int((timeout or 0) * 1000)
