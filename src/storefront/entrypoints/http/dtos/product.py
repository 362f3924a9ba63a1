from pydantic import BaseModel


class ProductResponseDTO(BaseModel):
    id: int
    title: str
    description: str
    price: str
    discounted_price: str
    discount_percentage: str
    rating: str
    stock: int
    brand: str
    category: str
    thumbnail: str
    images: list[str]


class CategoryResponseDTO(BaseModel):
    slug: str
    name: str
