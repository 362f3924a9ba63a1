from pydantic import BaseModel, Field


class AddCartLineRequestDTO(BaseModel):
    product_id: int = Field(ge=1, description="Catalog product identifier", examples=[1])


class SetQuantityRequestDTO(BaseModel):
    """Quantity is not range-checked: zero or negative removes the line."""

    quantity: int = Field(description="New quantity; <= 0 removes the line", examples=[2])


class CartLineResponseDTO(BaseModel):
    product_id: int
    title: str
    thumbnail: str
    unit_price: str
    quantity: int
    subtotal: str


class CartResponseDTO(BaseModel):
    lines: list[CartLineResponseDTO]
    total_item_count: int
    total_amount: str
