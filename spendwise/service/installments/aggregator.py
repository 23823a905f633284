"""
Monthly Aggregation for the Spendwise installment engine.

Reports attribute money to the month it is actually paid:
- a plain transaction counts in full on its own date
- a split credit purchase counts one installment per due date

So a 3-installment purchase shows up in three monthly totals, and those
three totals add back up to the purchase amount.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

import structlog

from spendwise.domain.entities import ZERO, Category, Installment, Transaction
from spendwise.domain.exceptions import MalformedInstallmentRecordException

from .billing_cycle import iter_year_months, month_bounds, year_month

logger = structlog.get_logger(__name__)


def _installment_amount(transaction: Transaction, installment: Installment) -> Decimal:
    if not installment.is_well_formed:
        raise MalformedInstallmentRecordException(
            transaction.id, installment.installment_number
        )
    return installment.amount


def attribute_amounts(transaction: Transaction) -> List[Tuple[date, Decimal]]:
    """
    List the (date, amount) pairs a transaction contributes to reports.

    Malformed installments are logged and skipped, which is the same as
    counting them as zero.
    """
    if not transaction.has_installments:
        if transaction.amount is None or transaction.date is None:
            logger.warning("malformed_transaction_skipped", transaction_id=transaction.id)
            return []
        return [(transaction.date, transaction.amount)]

    attributed = []
    for installment in transaction.installments:
        try:
            amount = _installment_amount(transaction, installment)
        except MalformedInstallmentRecordException as exc:
            logger.warning(
                "malformed_installment_skipped",
                transaction_id=exc.transaction_id,
                installment_number=exc.installment_number,
            )
            continue
        attributed.append((installment.due_date, amount))

    return attributed


def aggregate_for_range(
    transactions: Iterable[Transaction],
    start: date,
    end: date,
) -> Decimal:
    """Total amount attributed to dates between start and end, inclusive."""
    total = ZERO
    for transaction in transactions:
        for when, amount in attribute_amounts(transaction):
            if start <= when <= end:
                total += amount
    return total


def aggregate_for_month(transactions: Iterable[Transaction], month: str) -> Decimal:
    """
    Total amount attributed to a YYYY-MM month.

    Raises:
        InvalidYearMonthException: If month is not a valid YYYY-MM value
    """
    start, end = month_bounds(month)
    return aggregate_for_range(transactions, start, end)


def monthly_totals(
    transactions: Iterable[Transaction],
    start_month: str,
    end_month: str,
) -> List[Tuple[str, Decimal]]:
    """
    Chart-ready series of (YYYY-MM, total), one entry per month in range.

    Months without any activity are included with a zero total.
    """
    months = list(iter_year_months(start_month, end_month))
    totals: Dict[str, Decimal] = {month: ZERO for month in months}

    for transaction in transactions:
        for when, amount in attribute_amounts(transaction):
            key = year_month(when)
            if key in totals:
                totals[key] += amount

    return [(month, totals[month]) for month in months]


def totals_by_category(
    transactions: Iterable[Transaction],
    start: date,
    end: date,
) -> Dict[Category, Decimal]:
    """Attributed totals per category between start and end, inclusive."""
    totals: Dict[Category, Decimal] = defaultdict(lambda: ZERO)
    for transaction in transactions:
        for when, amount in attribute_amounts(transaction):
            if start <= when <= end:
                totals[transaction.category] += amount
    return dict(totals)
