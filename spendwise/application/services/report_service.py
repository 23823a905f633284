"""Report service - chart-ready aggregates over the store's transactions."""

from collections import defaultdict
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

import structlog

from spendwise.application.dto import (
    CategoryShare,
    Dashboard,
    MonthlyTotal,
    ReportRange,
    SpendingSummary,
)
from spendwise.domain.entities import ZERO, Category, quantize_money
from spendwise.service.installments import (
    add_months,
    attribute_amounts,
    clamp_day,
    month_bounds,
    monthly_totals,
    totals_by_category,
    year_month,
)

from .transaction_store import TransactionStore

logger = structlog.get_logger(__name__)


def range_start(report_range: ReportRange, as_of: date) -> date:
    """
    First day covered by a look-back window ending on ``as_of``.

    - 1month: the same day one month earlier (clamped to month end)
    - 3months / 6months: the first day of the month 3 or 6 months earlier
    - 1year: the first day of the same month one year earlier
    """
    if report_range == ReportRange.ONE_MONTH:
        year, month = add_months(as_of.year, as_of.month, -1)
        return date(year, month, clamp_day(year, month, as_of.day))

    months_back = {
        ReportRange.THREE_MONTHS: 3,
        ReportRange.SIX_MONTHS: 6,
        ReportRange.ONE_YEAR: 12,
    }[report_range]
    year, month = add_months(as_of.year, as_of.month, -months_back)
    return date(year, month, 1)


def category_shares(totals: Dict[Category, Decimal]) -> List[CategoryShare]:
    """Turn per-category totals into shares of the whole, largest first."""
    grand_total = sum(totals.values(), ZERO)
    if grand_total <= 0:
        return []

    shares = [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=int(
                (amount / grand_total * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
            ),
        )
        for category, amount in totals.items()
    ]
    return sorted(shares, key=lambda s: (-s.amount, s.category.value))


class ReportService:
    """
    Application service for dashboard and report use cases.

    All figures use the same attribution as the monthly aggregator, so
    installment purchases are counted on their due dates.
    """

    def __init__(self, store: TransactionStore):
        self._store = store

    def monthly_total(self, month: str) -> MonthlyTotal:
        """
        Raises:
            InvalidYearMonthException: If month is not YYYY-MM
        """
        return MonthlyTotal(month=month, total=self._store.aggregate_for_month(month))

    def monthly_series(self, start_month: str, end_month: str) -> List[MonthlyTotal]:
        """One total per month from start_month to end_month inclusive."""
        return [
            MonthlyTotal(month=month, total=total)
            for month, total in monthly_totals(
                self._store.list_transactions(), start_month, end_month
            )
        ]

    def category_breakdown(self, start: date, end: date) -> List[CategoryShare]:
        """Category shares of the amounts attributed between start and end, inclusive."""
        return category_shares(totals_by_category(self._store.list_transactions(), start, end))

    def spending_summary(self, report_range: ReportRange, as_of: date) -> SpendingSummary:
        """
        Summarize spending over a look-back window ending on ``as_of``.

        Only months with activity count towards the average, highest and
        lowest month.
        """
        start = range_start(report_range, as_of)
        transactions = self._store.list_transactions()

        by_month: Dict[str, Decimal] = defaultdict(lambda: ZERO)
        for transaction in transactions:
            for when, amount in attribute_amounts(transaction):
                if start <= when <= as_of:
                    by_month[year_month(when)] += amount

        months = [MonthlyTotal(month=m, total=by_month[m]) for m in sorted(by_month)]
        total = sum((m.total for m in months), ZERO)

        if months:
            average = quantize_money(total / len(months))
            highest = max(months, key=lambda m: m.total)
            lowest = min(months, key=lambda m: m.total)
        else:
            average, highest, lowest = ZERO, None, None

        logger.info(
            "spending_summary_built",
            range=report_range.value,
            start=start.isoformat(),
            end=as_of.isoformat(),
            months=len(months),
        )

        return SpendingSummary(
            range=report_range,
            start=start,
            end=as_of,
            total=total,
            average=average,
            highest=highest,
            lowest=lowest,
            months=months,
            categories=self.category_breakdown(start, as_of),
        )

    def dashboard(self, month: str, spending_limit: Decimal) -> Dashboard:
        """
        Build the overview for one month.

        The largest expense is the biggest purchase with any amount
        attributed to the month.

        Raises:
            InvalidYearMonthException: If month is not YYYY-MM
        """
        start, end = month_bounds(month)
        transactions = self._store.list_transactions()

        total = ZERO
        contributing = []
        for transaction in transactions:
            in_month = [a for when, a in attribute_amounts(transaction) if start <= when <= end]
            if in_month:
                total += sum(in_month, ZERO)
                contributing.append(transaction)

        largest = max(contributing, key=lambda t: t.amount, default=None)

        if spending_limit > 0:
            progress = quantize_money(total / spending_limit * 100)
        else:
            progress = ZERO

        return Dashboard(
            month=month,
            total=total,
            spending_limit=spending_limit,
            limit_exceeded=total > spending_limit,
            limit_progress=progress,
            categories=self.category_breakdown(start, end),
            largest_expense=largest,
        )
