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
                "field": "minPrice",
                "message": "minPrice must be a valid positive number",
                "code": "INVALID_PRICE_BOUND",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)

    Examples:
        Simple error:
            {
                "detail": "Product with identifier '...' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Name is required, Price must be greater than 0",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "name", "message": "Name is required", "code": "REQUIRED"},
                    {"field": "price", "message": "Price must be greater than 0", "code": "NOT_POSITIVE"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Product with identifier '550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Name is required, Price must be greater than 0",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "name", "message": "Name is required", "code": "REQUIRED"},
                        {
                            "field": "price",
                            "message": "Price must be greater than 0",
                            "code": "NOT_POSITIVE",
                        },
                    ],
                },
            ]
        }
    )
