"""Transaction and installment entities."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from .money import parse_money


class Category(str, Enum):
    """Spending category of a transaction."""

    FOOD = "food"
    SHOPPING = "shopping"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    HOUSING = "housing"
    UTILITIES = "utilities"
    HEALTH = "health"
    OTHER = "other"


def _parse_category(value) -> Category:
    try:
        return Category(value)
    except ValueError:
        return Category.OTHER


def _parse_number(value, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def _parse_date(value) -> Optional[date]:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


@dataclass(frozen=True)
class Installment:
    """
    One dated sub-payment of a credit-card purchase.

    Installments built by the engine always carry an amount and a due
    date. Records read back from storage may not, in which case the
    missing part is None and aggregation treats the entry as malformed.
    """

    installment_number: int
    amount: Optional[Decimal]
    due_date: Optional[date]

    @property
    def is_well_formed(self) -> bool:
        return self.amount is not None and self.due_date is not None

    def to_dict(self) -> dict:
        return {
            "installment_number": self.installment_number,
            "amount": str(self.amount) if self.amount is not None else None,
            "due_date": self.due_date.isoformat() if self.due_date else None,
        }

    @classmethod
    def from_dict(cls, data: dict, position: int = 1) -> "Installment":
        """Rebuild an installment; a missing or invalid number falls back to its position."""
        return cls(
            installment_number=_parse_number(data.get("installment_number"), position),
            amount=parse_money(data.get("amount")),
            due_date=_parse_date(data.get("due_date")),
        )


@dataclass(frozen=True)
class Transaction:
    """
    A logged expense.

    Plain transactions only carry the core fields. Credit-card purchases
    split into more than one installment also carry the installment
    schedule and its summary fields; those are always derived together
    from amount, date and installment count.

    Attributes:
        description: Free text as entered by the user
        amount: Total amount, two decimal places
        date: Purchase date
        category: Spending category
        payment_method_id: Referenced payment method, if any
        due_month: YYYY-MM of the first installment's due date
        installments: Installment schedule, ordered by number
        installment_amount: Amount of installment #1
        total_amount: Purchase total (equals amount)
        installment_count: Number of installments
    """

    description: str
    amount: Decimal
    date: date
    category: Category
    id: str = field(default_factory=lambda: str(uuid4()))
    payment_method_id: Optional[str] = None
    due_month: Optional[str] = None
    installments: Optional[List[Installment]] = None
    installment_amount: Optional[Decimal] = None
    total_amount: Optional[Decimal] = None
    installment_count: Optional[int] = None

    @property
    def has_installments(self) -> bool:
        return bool(self.installments)

    @property
    def display_description(self) -> str:
        """Description with the installment count appended, e.g. "TV (3x)"."""
        if self.has_installments and self.installment_count:
            return f"{self.description} ({self.installment_count}x)"
        return self.description

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            "id": self.id,
            "description": self.description,
            "amount": str(self.amount),
            "date": self.date.isoformat(),
            "category": self.category.value,
            "payment_method_id": self.payment_method_id,
        }

        if self.has_installments:
            data.update(
                {
                    "due_month": self.due_month,
                    "installments": [inst.to_dict() for inst in self.installments],
                    "installment_amount": (
                        str(self.installment_amount)
                        if self.installment_amount is not None
                        else None
                    ),
                    "total_amount": (
                        str(self.total_amount) if self.total_amount is not None else None
                    ),
                    "installment_count": self.installment_count,
                }
            )

        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Rebuild a transaction from its stored form."""
        raw_installments = data.get("installments")
        installments = None
        if isinstance(raw_installments, list) and raw_installments:
            installments = [
                Installment.from_dict(item if isinstance(item, dict) else {}, position)
                for position, item in enumerate(raw_installments, start=1)
            ]

        return cls(
            id=str(data["id"]),
            description=str(data.get("description") or ""),
            amount=parse_money(data.get("amount")),
            date=_parse_date(data.get("date")),
            category=_parse_category(data.get("category")),
            payment_method_id=data.get("payment_method_id"),
            due_month=data.get("due_month") if installments else None,
            installments=installments,
            installment_amount=(
                parse_money(data.get("installment_amount")) if installments else None
            ),
            total_amount=parse_money(data.get("total_amount")) if installments else None,
            installment_count=(
                _parse_number(data.get("installment_count"), len(installments))
                if installments
                else None
            ),
        )
