"""
Test suite for HttpCatalogGateway.

Uses httpx.MockTransport so requests never leave the process. Verifies:
- Endpoint paths and query parameters
- Decoding of products and both category list shapes
- Error mapping to NetworkError / DecodeError / NotFoundError
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import httpx
import pytest

from storefront.adapters.http_catalog_gateway import HttpCatalogGateway
from storefront.domain.errors import DecodeError, NetworkError, NotFoundError
from storefront.domain.product import Category

Handler = Callable[[httpx.Request], httpx.Response]

PRODUCT_JSON = {
    "id": 1,
    "title": "Essence Mascara Lash Princess",
    "description": "Popular mascara",
    "price": 9.99,
    "discountPercentage": 7.17,
    "rating": 4.94,
    "stock": 5,
    "brand": "Essence",
    "category": "beauty",
    "thumbnail": "https://cdn.dummyjson.com/products/1/thumbnail.png",
    "images": ["https://cdn.dummyjson.com/products/1/1.png"],
}


def make_gateway(handler: Handler, timeout: float = 10.0) -> HttpCatalogGateway:
    client = httpx.AsyncClient(
        base_url="https://catalog.test",
        transport=httpx.MockTransport(handler),
        timeout=timeout,
    )
    return HttpCatalogGateway(client)


def products_page(*products: dict) -> dict:
    return {"products": list(products), "total": len(products), "skip": 0, "limit": len(products)}


# ==============================================================================
# Requests and decoding
# ==============================================================================


@pytest.mark.asyncio
async def test_fetch_all_sends_limit_and_decodes_products() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=products_page(PRODUCT_JSON))

    gateway = make_gateway(handler)

    products = await gateway.fetch_all(limit=100)

    assert seen[0].url.path == "/products"
    assert seen[0].url.params["limit"] == "100"
    assert len(products) == 1
    product = products[0]
    assert product.id == 1
    assert product.price == Decimal("9.99")
    assert product.discount_percentage == Decimal("7.17")
    assert product.images == ("https://cdn.dummyjson.com/products/1/1.png",)


@pytest.mark.asyncio
async def test_fetch_by_category_uses_slug_path() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=products_page())

    assert await make_gateway(handler).fetch_by_category("mens-shoes") == []
    assert seen == ["/products/category/mens-shoes"]


@pytest.mark.asyncio
async def test_search_encodes_term_as_query_param() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=products_page(PRODUCT_JSON))

    await make_gateway(handler).search("red lipstick & more")

    assert seen[0].url.path == "/products/search"
    assert seen[0].url.params["q"] == "red lipstick & more"


@pytest.mark.asyncio
async def test_missing_brand_and_images_fall_back() -> None:
    grocery = {k: v for k, v in PRODUCT_JSON.items() if k not in ("brand", "images")}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=products_page(grocery))

    product = (await make_gateway(handler).fetch_all(limit=1))[0]

    assert product.brand == ""
    assert product.images == (PRODUCT_JSON["thumbnail"],)


@pytest.mark.asyncio
async def test_fetch_categories_accepts_objects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[{"slug": "beauty", "name": "Beauty", "url": "https://catalog.test/products/category/beauty"}],
        )

    assert await make_gateway(handler).fetch_categories() == [Category("beauty", "Beauty")]


@pytest.mark.asyncio
async def test_fetch_categories_accepts_bare_slugs() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["home-decoration", "laptops"])

    assert await make_gateway(handler).fetch_categories() == [
        Category("home-decoration", "Home Decoration"),
        Category("laptops", "Laptops"),
    ]


@pytest.mark.asyncio
async def test_fetch_product() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/products/1"
        return httpx.Response(200, json=PRODUCT_JSON)

    product = await make_gateway(handler).fetch_product(1)

    assert product.title == "Essence Mascara Lash Princess"


# ==============================================================================
# Error mapping
# ==============================================================================


@pytest.mark.asyncio
async def test_error_status_becomes_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"message": "down"})

    with pytest.raises(NetworkError) as exc_info:
        await make_gateway(handler).fetch_all(limit=10)

    assert exc_info.value.message == "Request failed with status code 503"
    assert exc_info.value.context["status_code"] == 503


@pytest.mark.asyncio
async def test_timeout_becomes_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(NetworkError) as exc_info:
        await make_gateway(handler, timeout=10.0).search("x")

    assert exc_info.value.message == "timeout of 10000ms exceeded"


@pytest.mark.asyncio
async def test_connection_failure_becomes_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(NetworkError, match="Connection refused"):
        await make_gateway(handler).fetch_categories()


@pytest.mark.asyncio
async def test_invalid_json_becomes_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(DecodeError):
        await make_gateway(handler).fetch_all(limit=10)


@pytest.mark.asyncio
async def test_wrong_shape_becomes_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": []})

    with pytest.raises(DecodeError, match="Malformed product list"):
        await make_gateway(handler).fetch_by_category("beauty")


@pytest.mark.asyncio
async def test_negative_price_is_rejected_as_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=products_page({**PRODUCT_JSON, "price": -1}))

    with pytest.raises(DecodeError):
        await make_gateway(handler).fetch_all(limit=10)


@pytest.mark.asyncio
async def test_missing_product_becomes_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Product with id '999' not found"})

    with pytest.raises(NotFoundError) as exc_info:
        await make_gateway(handler).fetch_product(999)

    assert exc_info.value.context["identifier"] == "999"


@pytest.mark.asyncio
async def test_aclose_closes_client() -> None:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    gateway = HttpCatalogGateway(client)

    await gateway.aclose()

    assert client.is_closed


@pytest.mark.asyncio
async def test_redirect_loop_becomes_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": str(request.url)})

    client = httpx.AsyncClient(
        base_url="https://catalog.test",
        transport=httpx.MockTransport(handler),
        follow_redirects=True,
    )

    with pytest.raises(NetworkError):
        await HttpCatalogGateway(client).fetch_all(limit=10)


@pytest.mark.asyncio
async def test_undecodable_content_encoding_becomes_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not gzip", headers={"Content-Encoding": "gzip"})

    with pytest.raises(DecodeError):
        await make_gateway(handler).fetch_all(limit=10)


@pytest.mark.asyncio
async def test_product_without_any_image_is_rejected_as_decode_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json=products_page({"id": 1, "title": "t", "price": 1, "category": "c"})
        )

    with pytest.raises(DecodeError, match="Malformed product list"):
        await make_gateway(handler).fetch_all(limit=10)


@pytest.mark.asyncio
async def test_category_slug_is_escaped_in_path() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=products_page())

    await make_gateway(handler).fetch_by_category("a/b?c")

    assert seen[0].url.raw_path == b"/products/category/a%2Fb%3Fc"
    assert seen[0].url.query == b""
