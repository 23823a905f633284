"""
Billing Cycle Resolution for the Spendwise installment engine.

Maps a purchase date to the statement it is billed on and the date that
statement is due, plus the year-month helpers reporting relies on.
"""

import calendar
import re
from datetime import date
from typing import Iterator, Optional, Tuple

from spendwise.domain.exceptions import (
    InvalidBillingCycleException,
    InvalidYearMonthException,
)

_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def _validate_day(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 31:
        raise InvalidBillingCycleException(
            f"{name} must be an integer between 1 and 31, got {value!r}"
        )


def validate_cycle_days(
    closing_day: Optional[int] = None,
    due_day: Optional[int] = None,
) -> None:
    """
    Check the days of a card's own billing cycle. None means "use the default".

    Raises:
        InvalidBillingCycleException: If a given day is not an integer in 1-31
    """
    if closing_day is not None:
        _validate_day("closing_day", closing_day)
    if due_day is not None:
        _validate_day("due_day", due_day)


def add_months(year: int, month: int, months: int) -> Tuple[int, int]:
    """Shift a (year, month) pair by a whole number of months."""
    index = year * 12 + (month - 1) + months
    return index // 12, index % 12 + 1


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp a day of month to the last valid day of that month."""
    return min(day, calendar.monthrange(year, month)[1])


def resolve_statement_month(purchase_date: date, closing_day: int) -> Tuple[int, int]:
    """
    Find the statement a purchase is billed on.

    A purchase on the closing day still belongs to the current cycle;
    from the day after, the cycle has closed and the purchase moves to
    next month's statement.

    Returns:
        (year, month) of the statement
    """
    _validate_day("closing_day", closing_day)

    if purchase_date.day > closing_day:
        return add_months(purchase_date.year, purchase_date.month, 1)
    return purchase_date.year, purchase_date.month


def resolve_statement_due_date(
    purchase_date: date,
    closing_day: int,
    due_day: int,
    installment_offset: int = 0,
) -> date:
    """
    Compute the due date of one installment of a purchase.

    Algorithm:
        1. Resolve the statement month of the purchase (closing-day rule)
        2. Move forward ``installment_offset`` whole months
        3. Pin the day to ``due_day``, clamped to the month's length
           (due day 31 in February lands on the 28th or 29th)

    Args:
        purchase_date: Date of the purchase
        closing_day: Billing cycle closing day (1-31)
        due_day: Statement due day (1-31)
        installment_offset: 0-based index of the installment in its series

    Returns:
        The installment's due date

    Raises:
        InvalidBillingCycleException: If a day or the offset is out of range
    """
    _validate_day("due_day", due_day)
    if isinstance(installment_offset, bool) or not isinstance(installment_offset, int) \
            or installment_offset < 0:
        raise InvalidBillingCycleException(
            f"installment_offset must be a non-negative integer, got {installment_offset!r}"
        )

    year, month = resolve_statement_month(purchase_date, closing_day)
    year, month = add_months(year, month, installment_offset)

    return date(year, month, clamp_day(year, month, due_day))


def year_month(value: date) -> str:
    """Format a date's year and month as YYYY-MM."""
    return f"{value.year:04d}-{value.month:02d}"


def parse_year_month(value: str) -> Tuple[int, int]:
    """
    Parse a YYYY-MM string.

    Raises:
        InvalidYearMonthException: If the value is not a valid year-month
    """
    match = _YEAR_MONTH_RE.match(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidYearMonthException(value)

    year, month = int(match.group(1)), int(match.group(2))
    if year < 1 or not 1 <= month <= 12:
        raise InvalidYearMonthException(value)

    return year, month


def month_bounds(value: str) -> Tuple[date, date]:
    """First and last calendar day of a YYYY-MM month."""
    year, month = parse_year_month(value)
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def iter_year_months(start: str, end: str) -> Iterator[str]:
    """Yield every YYYY-MM from start to end inclusive (nothing if end < start)."""
    year, month = parse_year_month(start)
    end_year, end_month = parse_year_month(end)

    while (year, month) <= (end_year, end_month):
        yield f"{year:04d}-{month:02d}"
        year, month = add_months(year, month, 1)
