from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
MIN_PHONE_DIGITS = 10


@dataclass(frozen=True, slots=True)
class CheckoutForm:
    full_name: str
    email: str
    phone: str
    address: str
    city: str
    zip_code: str

    def validate(self) -> None:
        """
        Validate delivery details.

        Raises:
            ValidationError: With one entry per failing field
        """
        errors: list[dict[str, str]] = []

        def fail(field: str, message: str, code: str) -> None:
            errors.append({"field": field, "message": message, "code": code})

        if not self.full_name.strip():
            fail("fullName", "Full name is required", "REQUIRED")

        if not self.email.strip():
            fail("email", "Email is required", "REQUIRED")
        elif not EMAIL_PATTERN.search(self.email):
            fail("email", "Email is invalid", "INVALID_EMAIL")

        if not self.phone.strip():
            fail("phone", "Phone number is required", "REQUIRED")
        elif len(re.sub(r"\D", "", self.phone)) < MIN_PHONE_DIGITS:
            fail("phone", f"Phone number must be at least {MIN_PHONE_DIGITS} digits", "INVALID_PHONE")

        if not self.address.strip():
            fail("address", "Address is required", "REQUIRED")

        if not self.city.strip():
            fail("city", "City is required", "REQUIRED")

        if not self.zip_code.strip():
            fail("zipCode", "ZIP code is required", "REQUIRED")

        if errors:
            raise ValidationError("Please fill in all required fields correctly.", errors=errors)


@dataclass(frozen=True, slots=True)
class OrderConfirmation:
    full_name: str
    delivery_address: str
    total_item_count: int
    total_amount: Decimal
