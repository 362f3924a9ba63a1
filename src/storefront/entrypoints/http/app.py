from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI

from storefront.adapters.http_catalog_gateway import HttpCatalogGateway
from storefront.adapters.sql_key_value_storage import SqlKeyValueStorage
from storefront.entrypoints.http.dependencies import Storefront, start_storefront, stop_storefront
from storefront.entrypoints.http.exception_handlers import register_exception_handlers
from storefront.entrypoints.http.routes.cart import router as cart_router
from storefront.entrypoints.http.routes.catalog import router as catalog_router
from storefront.entrypoints.http.routes.checkout import router as checkout_router
from storefront.entrypoints.http.routes.health import router as health_router
from storefront.entrypoints.http.routes.products import router as products_router
from storefront.infra import config
from storefront.infra.logging import configure_logging

StorefrontFactory = Callable[[], Awaitable[Storefront]]


async def default_storefront() -> Storefront:
    """Wire the core against the remote catalog and the on-device database."""
    return await start_storefront(
        gateway=HttpCatalogGateway.from_config(),
        storage=SqlKeyValueStorage(),
        storage_key=config.cart_storage_key(),
        product_limit=config.product_limit(),
    )


def build_app(storefront_factory: StorefrontFactory = default_storefront) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(config.log_level())

        # The persisted cart is restored here, before the first request is served
        app.state.storefront = await storefront_factory()
        yield
        await stop_storefront(app.state.storefront)

    app = FastAPI(
        title="Storefront Core API",
        description="""
        Client state core for a mobile storefront: catalog browsing and a
        durable shopping cart.

        ## Features
        - Browse, filter by category, and search the product catalog
        - Pull-to-refresh with stale results kept on screen
        - Cart with derived totals, persisted across restarts
        - Checkout form validation

        ## Concurrency
        Only the most recently submitted catalog query may update the list;
        responses to superseded queries are discarded.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(products_router, prefix="/v1")
    app.include_router(cart_router, prefix="/v1")
    app.include_router(checkout_router, prefix="/v1")

    return app


app = build_app()
