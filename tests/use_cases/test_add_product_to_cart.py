from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from storefront.adapters.in_memory_catalog_gateway import InMemoryCatalogGateway
from storefront.domain.errors import NotFoundError
from storefront.use_cases.add_product_to_cart import AddProductToCart, AddProductToCartRequest
from storefront.use_cases.cart_store import CartStore
from storefront.use_cases.catalog_state_machine import CatalogStateMachine
from storefront.use_cases.get_product_by_id import GetProductById


@pytest.mark.asyncio
async def test_uses_displayed_product_without_fetching(make_product) -> None:
    product = make_product(id=1)
    gateway = InMemoryCatalogGateway([product])
    catalog = CatalogStateMachine(gateway)
    await catalog.refresh()
    get_product_by_id = Mock(spec=GetProductById)
    get_product_by_id.execute = AsyncMock()
    cart = CartStore()

    snapshot = await AddProductToCart(cart, catalog, get_product_by_id).execute(
        AddProductToCartRequest(product_id=1)
    )

    get_product_by_id.execute.assert_not_called()
    assert snapshot.lines[0].product == product
    assert snapshot.total_item_count == 1


@pytest.mark.asyncio
async def test_fetches_product_not_on_screen(make_product) -> None:
    product = make_product(id=7, category="laptops")
    gateway = InMemoryCatalogGateway([product])
    catalog = CatalogStateMachine(gateway)
    cart = CartStore()

    snapshot = await AddProductToCart(cart, catalog, GetProductById(gateway)).execute(
        AddProductToCartRequest(product_id=7)
    )

    assert snapshot.line_for(7) is not None


@pytest.mark.asyncio
async def test_adding_twice_increments_quantity(make_product) -> None:
    gateway = InMemoryCatalogGateway([make_product(id=7)])
    use_case = AddProductToCart(CartStore(), CatalogStateMachine(gateway), GetProductById(gateway))

    await use_case.execute(AddProductToCartRequest(product_id=7))
    snapshot = await use_case.execute(AddProductToCartRequest(product_id=7))

    assert len(snapshot.lines) == 1
    assert snapshot.lines[0].quantity == 2


@pytest.mark.asyncio
async def test_unknown_product_leaves_cart_untouched() -> None:
    gateway = InMemoryCatalogGateway([])
    cart = CartStore()
    use_case = AddProductToCart(cart, CatalogStateMachine(gateway), GetProductById(gateway))

    with pytest.raises(NotFoundError):
        await use_case.execute(AddProductToCartRequest(product_id=404))

    assert cart.snapshot().is_empty
