from __future__ import annotations

from storefront.domain.checkout import CheckoutForm, OrderConfirmation
from storefront.entrypoints.http.dtos.checkout import (
    CheckoutRequestDTO,
    OrderConfirmationResponseDTO,
)


class CheckoutMapper:
    @staticmethod
    def to_domain_form(dto: CheckoutRequestDTO) -> CheckoutForm:
        return CheckoutForm(
            full_name=dto.full_name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
            city=dto.city,
            zip_code=dto.zip_code,
        )

    @staticmethod
    def to_response(confirmation: OrderConfirmation) -> OrderConfirmationResponseDTO:
        return OrderConfirmationResponseDTO(
            full_name=confirmation.full_name,
            delivery_address=confirmation.delivery_address,
            total_item_count=confirmation.total_item_count,
            total_amount=str(confirmation.total_amount),
        )
