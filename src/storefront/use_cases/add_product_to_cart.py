from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.cart import CartSnapshot
from storefront.use_cases.cart_store import CartStore
from storefront.use_cases.catalog_state_machine import CatalogStateMachine
from storefront.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest


@dataclass(frozen=True, slots=True)
class AddProductToCartRequest:
    product_id: int


class AddProductToCart:
    """
    Add one unit of a product to the cart, by product id.

    The product is taken from the catalog list currently on screen when
    possible; otherwise it is fetched from the remote catalog.
    """

    def __init__(
        self,
        cart_store: CartStore,
        catalog: CatalogStateMachine,
        get_product_by_id: GetProductById,
    ) -> None:
        self._cart_store = cart_store
        self._catalog = catalog
        self._get_product_by_id = get_product_by_id

    async def execute(self, request: AddProductToCartRequest) -> CartSnapshot:
        product = self._catalog.find_displayed(request.product_id)
        if product is None:
            response = await self._get_product_by_id.execute(
                GetProductByIdRequest(product_id=request.product_id)
            )
            product = response.product

        self._cart_store.add_line(product)
        return self._cart_store.snapshot()
