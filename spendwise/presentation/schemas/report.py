"""Report Pydantic schemas."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from spendwise.application.dto import (
    CategoryShare,
    Dashboard,
    MonthlyTotal,
    SpendingSummary,
)
from spendwise.application.dto.report import ReportRange
from spendwise.domain.entities import Category

from .transaction import TransactionResponseSchema


class MonthlyTotalSchema(BaseModel):
    """Amount attributed to one month."""

    month: str = Field(..., description="YYYY-MM", examples=["2024-02"])
    total: Decimal = Field(..., description="Attributed total", examples=["33.34"])

    @classmethod
    def from_dto(cls, dto: MonthlyTotal) -> "MonthlyTotalSchema":
        return cls(month=dto.month, total=dto.total)


class MonthlySeriesSchema(BaseModel):
    """Schema for GET /v1/reports/monthly response."""

    start: str
    end: str
    months: list[MonthlyTotalSchema]


class CategoryShareSchema(BaseModel):
    """A category's total and percentage share."""

    category: Category
    amount: Decimal
    percentage: int = Field(..., ge=0, le=100)

    @classmethod
    def from_dto(cls, dto: CategoryShare) -> "CategoryShareSchema":
        return cls(category=dto.category, amount=dto.amount, percentage=dto.percentage)


class SpendingSummarySchema(BaseModel):
    """Schema for GET /v1/reports/summary response."""

    range: ReportRange
    start: date
    end: date
    total: Decimal
    average: Decimal = Field(..., description="Average per month with activity")
    highest: Optional[MonthlyTotalSchema] = None
    lowest: Optional[MonthlyTotalSchema] = None
    months: list[MonthlyTotalSchema]
    categories: list[CategoryShareSchema]

    @classmethod
    def from_dto(cls, dto: SpendingSummary) -> "SpendingSummarySchema":
        return cls(
            range=dto.range,
            start=dto.start,
            end=dto.end,
            total=dto.total,
            average=dto.average,
            highest=MonthlyTotalSchema.from_dto(dto.highest) if dto.highest else None,
            lowest=MonthlyTotalSchema.from_dto(dto.lowest) if dto.lowest else None,
            months=[MonthlyTotalSchema.from_dto(m) for m in dto.months],
            categories=[CategoryShareSchema.from_dto(c) for c in dto.categories],
        )


class DashboardSchema(BaseModel):
    """Schema for GET /v1/reports/dashboard response."""

    month: str
    total: Decimal
    spending_limit: Decimal
    limit_exceeded: bool
    limit_progress: Decimal = Field(..., description="Month total as a percentage of the limit")
    categories: list[CategoryShareSchema]
    largest_expense: Optional[TransactionResponseSchema] = None

    @classmethod
    def from_dto(cls, dto: Dashboard) -> "DashboardSchema":
        return cls(
            month=dto.month,
            total=dto.total,
            spending_limit=dto.spending_limit,
            limit_exceeded=dto.limit_exceeded,
            limit_progress=dto.limit_progress,
            categories=[CategoryShareSchema.from_dto(c) for c in dto.categories],
            largest_expense=(
                TransactionResponseSchema.from_entity(dto.largest_expense)
                if dto.largest_expense
                else None
            ),
        )
