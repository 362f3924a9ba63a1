"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.errors import ValidationError
from storefront.domain.product import Product
from storefront.ports.catalog_gateway import CatalogGateway


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: int


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product from the remote catalog.

    Responsibilities:
    - Validate product_id (must be a positive integer)
    - Delegate to the gateway, which raises NotFoundError for unknown ids
    """

    def __init__(self, catalog_gateway: CatalogGateway) -> None:
        self._gateway = catalog_gateway

    async def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Execute the get product by ID use case.

        Raises:
            ValidationError: If product_id is not positive
            NotFoundError: If the catalog has no such product
            NetworkError / DecodeError: If the catalog call fails
        """
        if request.product_id <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "product_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        product = await self._gateway.fetch_product(request.product_id)

        return GetProductByIdResponse(product=product)
