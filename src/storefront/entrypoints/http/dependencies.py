"""
Dependency injection for FastAPI routes.

Key principle: the cart store and the catalog state machine are process-wide
singletons built once at startup and kept on `app.state`; use cases that only
wrap them are cheap and built per request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import Depends, Request

from storefront.adapters.cart_persistence import CartPersistenceAdapter
from storefront.infra.config import DEFAULT_PRODUCT_LIMIT
from storefront.ports.catalog_gateway import CatalogGateway
from storefront.ports.key_value_storage import KeyValueStorage
from storefront.use_cases.add_product_to_cart import AddProductToCart
from storefront.use_cases.cart_store import CartStore
from storefront.use_cases.catalog_state_machine import CatalogStateMachine
from storefront.use_cases.get_product_by_id import GetProductById
from storefront.use_cases.place_order import PlaceOrder

logger = logging.getLogger(__name__)


@dataclass
class Storefront:
    """The wired client core: one cart, one catalog, their collaborators."""

    gateway: CatalogGateway
    cart_store: CartStore
    catalog: CatalogStateMachine
    persistence: CartPersistenceAdapter


async def start_storefront(
    gateway: CatalogGateway,
    storage: KeyValueStorage,
    *,
    storage_key: str = "cart",
    product_limit: int = DEFAULT_PRODUCT_LIMIT,
) -> Storefront:
    """
    Build the core and restore the persisted cart.

    The single load happens before the persistence adapter starts listening,
    so restoring never triggers a save, and before any request can read the
    cart, so nothing ever sees a transiently empty cart.
    """
    cart_store = CartStore()
    persistence = CartPersistenceAdapter(storage, key=storage_key)

    await persistence.restore_into(cart_store)
    persistence.attach(cart_store)

    catalog = CatalogStateMachine(gateway, product_limit=product_limit)

    logger.info("Storefront started", extra={"cart_items": cart_store.snapshot().total_item_count})
    return Storefront(
        gateway=gateway,
        cart_store=cart_store,
        catalog=catalog,
        persistence=persistence,
    )


async def stop_storefront(storefront: Storefront) -> None:
    """Let in-flight work settle, then release the gateway's transport."""
    await storefront.catalog.drain()
    await storefront.persistence.flush()
    storefront.persistence.detach()
    await storefront.gateway.aclose()
    logger.info("Storefront stopped")


def get_storefront(request: Request) -> Storefront:
    return request.app.state.storefront


def get_cart_store(storefront: Storefront = Depends(get_storefront)) -> CartStore:
    return storefront.cart_store


def get_catalog_state_machine(storefront: Storefront = Depends(get_storefront)) -> CatalogStateMachine:
    return storefront.catalog


def get_get_product_by_id_use_case(storefront: Storefront = Depends(get_storefront)) -> GetProductById:
    return GetProductById(catalog_gateway=storefront.gateway)


def get_add_product_to_cart_use_case(
    storefront: Storefront = Depends(get_storefront),
) -> AddProductToCart:
    return AddProductToCart(
        cart_store=storefront.cart_store,
        catalog=storefront.catalog,
        get_product_by_id=GetProductById(catalog_gateway=storefront.gateway),
    )


def get_place_order_use_case(storefront: Storefront = Depends(get_storefront)) -> PlaceOrder:
    return PlaceOrder(cart_store=storefront.cart_store)
