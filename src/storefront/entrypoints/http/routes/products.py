from fastapi import APIRouter, Depends

from storefront.domain.product import with_all_category
from storefront.entrypoints.http.dependencies import (
    get_catalog_state_machine,
    get_get_product_by_id_use_case,
)
from storefront.entrypoints.http.dtos.product import CategoryResponseDTO, ProductResponseDTO
from storefront.entrypoints.http.mappers.product_mapper import ProductMapper
from storefront.use_cases.catalog_state_machine import CatalogStateMachine
from storefront.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest


router = APIRouter(tags=["Products"])


@router.get(
    "/categories",
    response_model=list[CategoryResponseDTO],
    summary="List categories",
    description="Categories for the picker, with the synthetic `all` entry first. Loaded once.",
)
async def list_categories(
    catalog: CatalogStateMachine = Depends(get_catalog_state_machine),
) -> list[CategoryResponseDTO]:
    categories = await catalog.load_categories()
    return [ProductMapper.to_category_response(category) for category in with_all_category(categories)]


@router.get(
    "/products/{product_id}",
    response_model=ProductResponseDTO,
    summary="Get product details",
    responses={
        404: {
            "description": "Product not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Product with identifier '999' not found",
                        "code": "NOT_FOUND",
                    }
                }
            },
        },
    },
)
async def get_product(
    product_id: int,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ProductResponseDTO:
    result = await use_case.execute(GetProductByIdRequest(product_id=product_id))
    return ProductMapper.to_product_response(result.product)
