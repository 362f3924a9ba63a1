from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.checkout import CheckoutForm, OrderConfirmation
from storefront.domain.errors import ValidationError
from storefront.use_cases.cart_store import CartStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlaceOrder:
    """
    Confirm an order for the current cart and empty it.

    No payment or server-side cart validation happens here; the order is
    confirmed once the delivery form passes and the cart has lines.
    """

    cart_store: CartStore

    def execute(self, form: CheckoutForm) -> OrderConfirmation:
        """
        Raises:
            ValidationError: If the form has field errors or the cart is empty
        """
        form.validate()

        snapshot = self.cart_store.snapshot()
        if snapshot.is_empty:
            raise ValidationError("Cart is empty", reason="EMPTY_CART")

        confirmation = OrderConfirmation(
            full_name=form.full_name.strip(),
            delivery_address=f"{form.address.strip()}, {form.city.strip()} {form.zip_code.strip()}",
            total_item_count=snapshot.total_item_count,
            total_amount=snapshot.total_amount,
        )

        self.cart_store.clear()
        logger.info(
            "Order placed",
            extra={
                "total_item_count": confirmation.total_item_count,
                "total_amount": str(confirmation.total_amount),
            },
        )

        return confirmation
