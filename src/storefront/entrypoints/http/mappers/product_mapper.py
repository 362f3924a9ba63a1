from __future__ import annotations

from storefront.domain.product import Category, Product
from storefront.entrypoints.http.dtos.product import CategoryResponseDTO, ProductResponseDTO


class ProductMapper:
    """Maps domain catalog values to REST DTOs. Decimals become strings at the boundary."""

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        return ProductResponseDTO(
            id=product.id,
            title=product.title,
            description=product.description,
            price=str(product.price),
            discounted_price=str(product.discounted_price),
            discount_percentage=str(product.discount_percentage),
            rating=str(product.rating),
            stock=product.stock,
            brand=product.brand,
            category=product.category,
            thumbnail=product.thumbnail,
            images=list(product.images),
        )

    @staticmethod
    def to_category_response(category: Category) -> CategoryResponseDTO:
        return CategoryResponseDTO(slug=category.slug, name=category.display_name)
