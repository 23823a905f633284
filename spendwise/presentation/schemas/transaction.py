"""Transaction-related Pydantic schemas."""

import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spendwise.domain.entities import Category, Transaction


class TransactionRequestSchema(BaseModel):
    """Schema for POST /v1/transactions and PUT /v1/transactions/{id} bodies."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "description": "Laptop",
                    "amount": "100.00",
                    "date": "2024-01-15",
                    "category": "shopping",
                    "payment_method_id": "credit",
                    "installment_count": 3,
                }
            ]
        }
    )

    description: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="What the money was spent on",
        examples=["Grocery shopping"],
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        decimal_places=2,
        description="Total amount, at most two decimal places",
        examples=["100.00"],
    )
    date: datetime.date = Field(
        ...,
        description="Purchase date (YYYY-MM-DD)",
        examples=["2024-01-15"],
    )
    category: Category = Field(
        Category.OTHER,
        description="Spending category",
    )
    payment_method_id: Optional[str] = Field(
        None,
        description="Id of the payment method used",
        examples=["credit"],
    )
    installment_count: Optional[int] = Field(
        None,
        description="Number of installments; only credit purchases are split",
        examples=[3],
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Ensure description is not just whitespace."""
        if not v.strip():
            raise ValueError("description cannot be empty or whitespace")
        return v.strip()


class InstallmentSchema(BaseModel):
    """Schema for one installment of a split purchase."""

    installment_number: int = Field(..., ge=1, description="1-based position in the series")
    amount: Optional[Decimal] = Field(..., description="Installment amount")
    due_date: Optional[datetime.date] = Field(..., description="Statement due date")


class TransactionResponseSchema(BaseModel):
    """Schema for a stored transaction."""

    id: str
    description: str
    display_description: str = Field(
        ...,
        description="Description with the installment count appended, e.g. 'Laptop (3x)'",
    )
    amount: Decimal
    date: datetime.date
    category: Category
    payment_method_id: Optional[str] = None
    due_month: Optional[str] = Field(
        None,
        description="YYYY-MM of the first installment's due date",
        examples=["2024-02"],
    )
    installments: Optional[list[InstallmentSchema]] = None
    installment_amount: Optional[Decimal] = None
    total_amount: Optional[Decimal] = None
    installment_count: Optional[int] = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponseSchema":
        return cls(
            id=transaction.id,
            description=transaction.description,
            display_description=transaction.display_description,
            amount=transaction.amount,
            date=transaction.date,
            category=transaction.category,
            payment_method_id=transaction.payment_method_id,
            due_month=transaction.due_month,
            installments=(
                [
                    InstallmentSchema(
                        installment_number=inst.installment_number,
                        amount=inst.amount,
                        due_date=inst.due_date,
                    )
                    for inst in transaction.installments
                ]
                if transaction.installments
                else None
            ),
            installment_amount=transaction.installment_amount,
            total_amount=transaction.total_amount,
            installment_count=transaction.installment_count,
        )
