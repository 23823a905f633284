"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["PAYMENT_METHOD_IN_USE"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Cannot delete payment method credit: referenced by 2 transaction(s)"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "TRANSACTION_NOT_FOUND",
                    "message": "Transaction not found: 3f0c2a4e-8d1b-4f57-9a8e-2b6d0c7e1f90",
                    "request_id": "abc123",
                }
            ]
        }
    }
