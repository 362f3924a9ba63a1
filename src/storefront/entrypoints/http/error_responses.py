"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "phone",
                "message": "Phone number must be at least 10 digits",
                "code": "INVALID_PHONE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Request failed with status code 503",
                "code": "NETWORK_ERROR"
            }

        Validation error with multiple fields:
            {
                "detail": "Please fill in all required fields correctly.",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "fullName", "message": "Full name is required", "code": "REQUIRED"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Product with identifier '999' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Please fill in all required fields correctly.",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "email",
                            "message": "Email is invalid",
                            "code": "INVALID_EMAIL",
                        },
                    ],
                },
            ]
        }
    )
