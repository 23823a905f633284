"""Installment engine domain exceptions."""

from typing import Any

from .base import DomainException


class InvalidInstallmentCountException(DomainException):
    """Raised when an installment count is not an integer >= 1."""

    def __init__(self, count: Any):
        super().__init__(
            message=f"Installment count must be an integer >= 1, got {count!r}",
            code="INVALID_INSTALLMENT_COUNT",
        )
        self.count = count


class InvalidBillingCycleException(DomainException):
    """Raised when closing/due days or an installment offset are out of range."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_BILLING_CYCLE",
        )


class InvalidYearMonthException(DomainException):
    """Raised when a YYYY-MM value cannot be parsed."""

    def __init__(self, value: Any):
        super().__init__(
            message=f"Expected a year-month in YYYY-MM format, got {value!r}",
            code="INVALID_YEAR_MONTH",
        )
        self.value = value


class MalformedInstallmentRecordException(DomainException):
    """
    Raised for an installment entry with a missing or non-numeric amount
    or a missing due date.

    Aggregation recovers from this locally by counting the entry as zero.
    """

    def __init__(self, transaction_id: str, installment_number: int):
        super().__init__(
            message=(
                f"Malformed installment #{installment_number} "
                f"on transaction {transaction_id}"
            ),
            code="MALFORMED_INSTALLMENT",
        )
        self.transaction_id = transaction_id
        self.installment_number = installment_number
