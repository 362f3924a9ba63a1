"""Wire records for the remote catalog's JSON.

Pydantic models that decode (and, for persistence, re-encode) the camelCase
shapes used by the product service, then convert to immutable domain values.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic.alias_generators import to_camel

from storefront.domain.product import Category, Product


class ProductRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str = ""
    price: Decimal = Field(ge=0)
    discount_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    rating: Decimal = Field(default=Decimal("0"), ge=0, le=5)
    stock: int = Field(default=0, ge=0)
    # Some catalog sections (e.g. groceries) ship without a brand
    brand: str = ""
    category: str
    thumbnail: str = ""
    images: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def require_an_image(self) -> ProductRecord:
        # The thumbnail stands in when the images list is missing
        if not self.images and not self.thumbnail:
            raise ValueError("Product has neither images nor a thumbnail")
        return self

    def to_domain(self) -> Product:
        images = tuple(self.images) or (self.thumbnail,)
        return Product(
            id=self.id,
            title=self.title,
            description=self.description,
            price=self.price,
            discount_percentage=self.discount_percentage,
            rating=self.rating,
            stock=self.stock,
            brand=self.brand,
            category=self.category,
            thumbnail=self.thumbnail,
            images=images,
        )

    @classmethod
    def from_domain(cls, product: Product) -> ProductRecord:
        return cls(
            id=product.id,
            title=product.title,
            description=product.description,
            price=product.price,
            discount_percentage=product.discount_percentage,
            rating=product.rating,
            stock=product.stock,
            brand=product.brand,
            category=product.category,
            thumbnail=product.thumbnail,
            images=list(product.images),
        )


class ProductsPage(BaseModel):
    products: list[ProductRecord]
    total: int | None = None
    skip: int | None = None
    limit: int | None = None


class CategoryRecord(BaseModel):
    slug: str
    name: str | None = None
    url: str | None = None

    def to_domain(self) -> Category:
        return Category(slug=self.slug, display_name=self.name or _title_from_slug(self.slug))


# Older catalog versions answer with bare slugs instead of objects
CategoryListAdapter: TypeAdapter[list[CategoryRecord | str]] = TypeAdapter(list[CategoryRecord | str])


def categories_to_domain(records: list[CategoryRecord | str]) -> list[Category]:
    categories = []
    for record in records:
        if isinstance(record, str):
            categories.append(Category(slug=record, display_name=_title_from_slug(record)))
        else:
            categories.append(record.to_domain())
    return categories


def _title_from_slug(slug: str) -> str:
    return slug.replace("-", " ").title()
