from fastapi import APIRouter, Depends

from storefront.entrypoints.http.dependencies import get_place_order_use_case
from storefront.entrypoints.http.dtos.checkout import (
    CheckoutRequestDTO,
    OrderConfirmationResponseDTO,
)
from storefront.entrypoints.http.mappers.checkout_mapper import CheckoutMapper
from storefront.use_cases.place_order import PlaceOrder


router = APIRouter(tags=["Checkout"])


@router.post(
    "/checkout",
    response_model=OrderConfirmationResponseDTO,
    summary="Place an order",
    description="""
    Validate delivery details and confirm the order for the current cart.
    On success the cart is emptied.

    ## Validation
    - All fields are required
    - `email` must look like an address
    - `phone` must contain at least 10 digits

    Failures return 422 with one entry per failing field in `errors`.
    """,
    responses={
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Please fill in all required fields correctly.",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {"field": "email", "message": "Email is invalid", "code": "INVALID_EMAIL"}
                        ],
                    }
                }
            },
        },
    },
)
async def place_order(
    body: CheckoutRequestDTO,
    use_case: PlaceOrder = Depends(get_place_order_use_case),
) -> OrderConfirmationResponseDTO:
    form = CheckoutMapper.to_domain_form(body)
    confirmation = use_case.execute(form)
    return CheckoutMapper.to_response(confirmation)
