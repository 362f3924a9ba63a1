from fastapi import APIRouter, Depends

from storefront.entrypoints.http.dependencies import (
    get_add_product_to_cart_use_case,
    get_cart_store,
)
from storefront.entrypoints.http.dtos.cart import (
    AddCartLineRequestDTO,
    CartResponseDTO,
    SetQuantityRequestDTO,
)
from storefront.entrypoints.http.mappers.cart_mapper import CartMapper
from storefront.use_cases.add_product_to_cart import AddProductToCart, AddProductToCartRequest
from storefront.use_cases.cart_store import CartStore


router = APIRouter(tags=["Cart"])

# Cart handlers are `async def` so every mutation runs on the event loop thread:
# one writer, applied in arrival order.


@router.get("/cart", response_model=CartResponseDTO, summary="Current cart")
async def get_cart(cart_store: CartStore = Depends(get_cart_store)) -> CartResponseDTO:
    return CartMapper.to_response(cart_store.snapshot())


@router.post(
    "/cart/lines",
    response_model=CartResponseDTO,
    summary="Add one unit of a product",
    description="Adding a product already in the cart increments its quantity by one.",
)
async def add_line(
    body: AddCartLineRequestDTO,
    use_case: AddProductToCart = Depends(get_add_product_to_cart_use_case),
) -> CartResponseDTO:
    snapshot = await use_case.execute(AddProductToCartRequest(product_id=body.product_id))
    return CartMapper.to_response(snapshot)


@router.put(
    "/cart/lines/{product_id}",
    response_model=CartResponseDTO,
    summary="Set a line's quantity",
    description="A quantity of zero or less removes the line. Stock is not enforced.",
)
async def set_quantity(
    product_id: int,
    body: SetQuantityRequestDTO,
    cart_store: CartStore = Depends(get_cart_store),
) -> CartResponseDTO:
    cart_store.set_quantity(product_id, body.quantity)
    return CartMapper.to_response(cart_store.snapshot())


@router.delete("/cart/lines/{product_id}", response_model=CartResponseDTO, summary="Remove a line")
async def remove_line(
    product_id: int,
    cart_store: CartStore = Depends(get_cart_store),
) -> CartResponseDTO:
    cart_store.remove_line(product_id)
    return CartMapper.to_response(cart_store.snapshot())


@router.delete("/cart", response_model=CartResponseDTO, summary="Empty the cart")
async def clear_cart(cart_store: CartStore = Depends(get_cart_store)) -> CartResponseDTO:
    cart_store.clear()
    return CartMapper.to_response(cart_store.snapshot())
