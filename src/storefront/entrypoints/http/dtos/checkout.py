from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CheckoutRequestDTO(BaseModel):
    """Delivery details. Field rules are enforced by the domain, not here."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "fullName": "John Doe",
                "email": "john@gmail.com",
                "phone": "03456789012",
                "address": "House No. 1, Jinnah Street",
                "city": "Lahore",
                "zipCode": "54000",
            }
        },
    )

    full_name: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=200)
    phone: str = Field(default="", max_length=50)
    address: str = Field(default="", max_length=500)
    city: str = Field(default="", max_length=100)
    zip_code: str = Field(default="", max_length=20)


class OrderConfirmationResponseDTO(BaseModel):
    full_name: str
    delivery_address: str
    total_item_count: int
    total_amount: str
