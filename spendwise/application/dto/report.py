"""Data transfer objects for reporting operations."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from spendwise.domain.entities import Category, Transaction


class ReportRange(str, Enum):
    """Look-back windows offered by the spending summary."""

    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"
    ONE_YEAR = "1year"


@dataclass(frozen=True)
class MonthlyTotal:
    """Amount attributed to one YYYY-MM month."""

    month: str
    total: Decimal


@dataclass(frozen=True)
class CategoryShare:
    """A category's total and its rounded percentage of the whole."""

    category: Category
    amount: Decimal
    percentage: int


@dataclass(frozen=True)
class SpendingSummary:
    """Totals over a look-back window, grouped by month and category."""

    range: ReportRange
    start: date
    end: date
    total: Decimal
    average: Decimal
    highest: Optional[MonthlyTotal]
    lowest: Optional[MonthlyTotal]
    months: List[MonthlyTotal] = field(default_factory=list)
    categories: List[CategoryShare] = field(default_factory=list)


@dataclass(frozen=True)
class Dashboard:
    """Figures for a single month's overview."""

    month: str
    total: Decimal
    spending_limit: Decimal
    limit_exceeded: bool
    limit_progress: Decimal
    categories: List[CategoryShare] = field(default_factory=list)
    largest_expense: Optional[Transaction] = None
