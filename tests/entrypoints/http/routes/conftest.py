"""
Shared fixtures for route tests.

Routes run against a real storefront core wired to in-memory adapters, so
the cart store, the catalog state machine and persistence behave exactly as
in production. The client is entered as a context manager so that the whole
test shares one event loop with the background tasks the core starts.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Iterator

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from storefront.adapters.in_memory_catalog_gateway import InMemoryCatalogGateway
from storefront.adapters.in_memory_key_value_storage import InMemoryKeyValueStorage
from storefront.domain.product import Product
from storefront.entrypoints.http.dependencies import start_storefront, stop_storefront
from storefront.entrypoints.http.exception_handlers import register_exception_handlers
from storefront.ports.catalog_gateway import CatalogGateway

ClientFactory = Callable[..., TestClient]


@pytest.fixture
def catalog_products(make_product) -> list[Product]:
    return [
        make_product(id=1, title="iPhone 9", price="549", category="smartphones", brand="Apple"),
        make_product(id=2, title="Essence Mascara", price="9.99", category="beauty", brand="Essence"),
        make_product(id=3, title="Galaxy Book", price="1499", category="laptops", brand="Samsung"),
    ]


@pytest.fixture
def stored_values() -> dict[str, str]:
    """Backing dict of the key-value storage; survives across clients in one test."""
    return {}


@pytest.fixture
def build_client(
    catalog_products: list[Product], stored_values: dict[str, str]
) -> Iterator[ClientFactory]:
    clients: list[TestClient] = []

    def factory(*routers: APIRouter, gateway: CatalogGateway | None = None) -> TestClient:
        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            app.state.storefront = await start_storefront(
                gateway=gateway or InMemoryCatalogGateway(catalog_products),
                storage=InMemoryKeyValueStorage(stored_values),
            )
            yield
            await stop_storefront(app.state.storefront)

        test_app = FastAPI(lifespan=lifespan)
        register_exception_handlers(test_app)
        for router in routers:
            test_app.include_router(router, prefix="/v1")

        client = TestClient(test_app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)
