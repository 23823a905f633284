"""Payment method Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from spendwise.domain.entities import PaymentMethod, PaymentMethodKind


class PaymentMethodRequestSchema(BaseModel):
    """Schema for POST /v1/payment-methods request body."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name",
        examples=["Travel Card"],
    )
    kind: PaymentMethodKind = Field(
        ...,
        description="credit, debit, cash or other",
        examples=["credit"],
    )
    color: Optional[str] = Field(
        None,
        max_length=20,
        description="Display color",
        examples=["#ef4444"],
    )
    closing_day: Optional[int] = Field(
        None,
        description="Billing cycle closing day (credit cards only, 1-31)",
        examples=[25],
    )
    due_day: Optional[int] = Field(
        None,
        description="Statement due day (credit cards only, 1-31)",
        examples=[5],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is not just whitespace."""
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v.strip()


class PaymentMethodResponseSchema(BaseModel):
    """Schema for a stored payment method."""

    id: str
    name: str
    kind: PaymentMethodKind
    color: Optional[str] = None
    closing_day: Optional[int] = None
    due_day: Optional[int] = None

    @classmethod
    def from_entity(cls, method: PaymentMethod) -> "PaymentMethodResponseSchema":
        return cls(
            id=method.id,
            name=method.name,
            kind=method.kind,
            color=method.color,
            closing_day=method.closing_day,
            due_day=method.due_day,
        )
