"""
Installment Engine for Spendwise
"""

from .settings import BillingCycleSettings, billing_settings
from .billing_cycle import (
    add_months,
    clamp_day,
    iter_year_months,
    month_bounds,
    parse_year_month,
    resolve_statement_due_date,
    resolve_statement_month,
    validate_cycle_days,
    year_month,
)
from .splitter import split_amount, split_installments, validate_installment_count
from .materializer import materialize_transaction
from .aggregator import (
    aggregate_for_month,
    aggregate_for_range,
    attribute_amounts,
    monthly_totals,
    totals_by_category,
)

__all__ = [
    # Settings
    "BillingCycleSettings",
    "billing_settings",
    # Billing Cycle
    "add_months",
    "clamp_day",
    "iter_year_months",
    "month_bounds",
    "parse_year_month",
    "resolve_statement_due_date",
    "resolve_statement_month",
    "validate_cycle_days",
    "year_month",
    # Splitting
    "split_amount",
    "split_installments",
    "validate_installment_count",
    # Materialization
    "materialize_transaction",
    # Aggregation
    "aggregate_for_month",
    "aggregate_for_range",
    "attribute_amounts",
    "monthly_totals",
    "totals_by_category",
]
