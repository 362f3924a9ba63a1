from __future__ import annotations

from storefront.domain.cart import CartLine, CartSnapshot
from storefront.entrypoints.http.dtos.cart import CartLineResponseDTO, CartResponseDTO


class CartMapper:
    """Maps cart snapshots to REST DTOs. Amounts are exact Decimal strings; formatting is the client's job."""

    @staticmethod
    def to_line_response(line: CartLine) -> CartLineResponseDTO:
        return CartLineResponseDTO(
            product_id=line.product_id,
            title=line.product.title,
            thumbnail=line.product.thumbnail,
            unit_price=str(line.product.price),
            quantity=line.quantity,
            subtotal=str(line.subtotal),
        )

    @staticmethod
    def to_response(snapshot: CartSnapshot) -> CartResponseDTO:
        return CartResponseDTO(
            lines=[CartMapper.to_line_response(line) for line in snapshot.lines],
            total_item_count=snapshot.total_item_count,
            total_amount=str(snapshot.total_amount),
        )
