"""
Unit tests for FastAPI application setup and configuration.

This test suite verifies the application structure and wiring:
- build_app() creates properly configured FastAPI instance
- Application metadata (title, version, docs URLs)
- Router registration (health unprefixed, storefront routes under /v1)
- Lifespan wiring through an injected storefront factory

The default factory talks to the network and a database, so lifespan tests
inject one built from in-memory adapters.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront.adapters.in_memory_catalog_gateway import InMemoryCatalogGateway
from storefront.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage
from storefront.entrypoints.http.app import build_app
from storefront.entrypoints.http.dependencies import Storefront, start_storefront


# ==============================================================================
# Application Creation
# ==============================================================================


def test_build_app_returns_fastapi_instance() -> None:
    """build_app() returns a FastAPI application instance."""
    app = build_app()
    assert isinstance(app, FastAPI)


def test_build_app_creates_new_instance_each_call() -> None:
    """build_app() creates a new app instance for each call (not cached)."""
    assert build_app() is not build_app()


# ==============================================================================
# Application Metadata
# ==============================================================================


def test_app_has_correct_title() -> None:
    app = build_app()
    assert app.title == "Storefront Core API"


def test_app_has_correct_version() -> None:
    app = build_app()
    assert app.version == "0.1.0"


def test_app_has_description() -> None:
    app = build_app()
    assert "durable shopping cart" in app.description


def test_app_documentation_urls() -> None:
    app = build_app()
    assert app.docs_url == "/docs"
    assert app.redoc_url == "/redoc"
    assert app.openapi_url == "/openapi.json"


# ==============================================================================
# Router Registration
# ==============================================================================


def test_app_includes_health_router() -> None:
    """Health works without entering the lifespan."""
    client = TestClient(build_app())

    response = client.get("/health")
    assert response.status_code == 200


def test_app_registers_storefront_routes_under_v1() -> None:
    paths = build_app().openapi()["paths"]

    assert "/health" in paths
    for path in (
        "/v1/catalog",
        "/v1/catalog/activate",
        "/v1/catalog/category",
        "/v1/catalog/search-text",
        "/v1/catalog/search",
        "/v1/catalog/refresh",
        "/v1/catalog/dismiss-error",
        "/v1/categories",
        "/v1/products/{product_id}",
        "/v1/cart",
        "/v1/cart/lines",
        "/v1/cart/lines/{product_id}",
        "/v1/checkout",
    ):
        assert path in paths

    assert "/cart" not in paths


# ==============================================================================
# Lifespan
# ==============================================================================


def test_lifespan_restores_cart_before_serving(make_product) -> None:
    """A cart persisted by a previous run is visible on the first request."""
    stored = {
        "cart": (
            '{"lines": [{"product": {"id": 7, "title": "Lamp", "description": "Desk lamp",'
            ' "price": "12.50", "discountPercentage": "0", "rating": "4", "stock": 3,'
            ' "brand": "Glow", "category": "lighting", "thumbnail": "https://cdn.example.com/7.png",'
            ' "images": []}, "quantity": 2}], "totalItemCount": 2, "totalAmount": "25.00"}'
        )
    }

    async def factory() -> Storefront:
        return await start_storefront(
            gateway=InMemoryCatalogGateway([make_product(id=7)]),
            storage=InMemoryKeyValueStorage(stored),
        )

    with TestClient(build_app(storefront_factory=factory)) as client:
        data = client.get("/v1/cart").json()

    assert data["total_item_count"] == 2
    assert data["total_amount"] == "25.00"
    assert data["lines"][0]["title"] == "Lamp"
