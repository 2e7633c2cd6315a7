"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "message": "Must be a valid decimal: abc",
                "code": "INVALID_DECIMAL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (detail and code)
    - Multi-field validation errors (detail + errors array)
    - Store failures (detail + reason carrying the underlying failure text)

    Examples:
        Seller not found:
            {
                "detail": "Seller with identifier '...' not found",
                "code": "NOT_FOUND"
            }

        Store failure:
            {
                "detail": "Failed to save car listing",
                "code": "PERSISTENCE_ERROR",
                "reason": "connection refused"
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    reason: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Seller with identifier '550e8400-e29b-41d4-a716-446655440000' not found",
                    "code": "NOT_FOUND",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price",
                            "message": "Must be a valid decimal: abc",
                            "code": "INVALID_DECIMAL",
                        }
                    ],
                },
                {
                    "detail": "Failed to save car listing",
                    "code": "PERSISTENCE_ERROR",
                    "reason": "connection refused",
                },
            ]
        }
    )
