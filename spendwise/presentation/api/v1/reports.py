"""Report API endpoints."""

from datetime import date
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from spendwise.application.dto import ReportRange
from spendwise.application.services import ReportService
from spendwise.core.config import Settings
from spendwise.core.dependencies import get_app_settings, get_report_service
from spendwise.presentation.schemas import (
    DashboardSchema,
    ErrorResponseSchema,
    MonthlySeriesSchema,
    MonthlyTotalSchema,
    SpendingSummarySchema,
)

report_router = APIRouter(
    prefix="/reports",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid year-month"},
    },
)

Reports = Annotated[ReportService, Depends(get_report_service)]
YearMonth = Query(description="Month in YYYY-MM format", examples=["2024-02"])


@report_router.get(
    "/monthly-total",
    response_model=MonthlyTotalSchema,
    summary="Monthly Total",
    description="""
    Total attributed to one month. Plain transactions count on their
    date; installment purchases count one installment per due month.
    """,
)
async def monthly_total(
    month: Annotated[str, YearMonth],
    reports: Reports,
) -> MonthlyTotalSchema:
    return MonthlyTotalSchema.from_dto(reports.monthly_total(month))


@report_router.get(
    "/monthly",
    response_model=MonthlySeriesSchema,
    summary="Monthly Series",
    description="One total per month between start and end, inclusive.",
)
async def monthly_series(
    start: Annotated[str, YearMonth],
    end: Annotated[str, YearMonth],
    reports: Reports,
) -> MonthlySeriesSchema:
    return MonthlySeriesSchema(
        start=start,
        end=end,
        months=[MonthlyTotalSchema.from_dto(m) for m in reports.monthly_series(start, end)],
    )


@report_router.get(
    "/summary",
    response_model=SpendingSummarySchema,
    summary="Spending Summary",
)
async def spending_summary(
    reports: Reports,
    range: Annotated[
        ReportRange,
        Query(description="Look-back window"),
    ] = ReportRange.ONE_MONTH,
    as_of: Annotated[
        Optional[date],
        Query(description="Last day of the window, defaults to today"),
    ] = None,
) -> SpendingSummarySchema:
    summary = reports.spending_summary(range, as_of or date.today())
    return SpendingSummarySchema.from_dto(summary)


@report_router.get(
    "/dashboard",
    response_model=DashboardSchema,
    summary="Monthly Dashboard",
    description="Month total against the configured spending limit, by category.",
)
async def dashboard(
    reports: Reports,
    settings: Annotated[Settings, Depends(get_app_settings)],
    month: Annotated[
        Optional[str],
        Query(description="Month in YYYY-MM format, defaults to the current month"),
    ] = None,
) -> DashboardSchema:
    month = month or date.today().strftime("%Y-%m")
    return DashboardSchema.from_dto(reports.dashboard(month, settings.spending_limit))
