"""Payment method entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import uuid4


class PaymentMethodKind(str, Enum):
    """Kind of payment instrument. Only credit cards are split into installments."""

    CREDIT = "credit"
    DEBIT = "debit"
    CASH = "cash"
    OTHER = "other"


def _parse_kind(value) -> PaymentMethodKind:
    try:
        return PaymentMethodKind(value)
    except ValueError:
        return PaymentMethodKind.OTHER


@dataclass(frozen=True)
class PaymentMethod:
    """
    A payment instrument a transaction can be charged to.

    Credit cards may carry their own billing cycle; when ``closing_day``
    or ``due_day`` is None the configured default cycle applies.
    """

    name: str
    kind: PaymentMethodKind
    id: str = field(default_factory=lambda: str(uuid4()))
    color: Optional[str] = None
    closing_day: Optional[int] = None
    due_day: Optional[int] = None

    @property
    def is_credit(self) -> bool:
        return self.kind == PaymentMethodKind.CREDIT

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "color": self.color,
            "closing_day": self.closing_day,
            "due_day": self.due_day,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PaymentMethod":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            kind=_parse_kind(data.get("kind")),
            color=data.get("color"),
            closing_day=data.get("closing_day"),
            due_day=data.get("due_day"),
        )


DEFAULT_PAYMENT_METHODS = (
    PaymentMethod(id="cash", name="Cash", kind=PaymentMethodKind.CASH, color="#22c55e"),
    PaymentMethod(id="debit", name="Debit Card", kind=PaymentMethodKind.DEBIT, color="#3b82f6"),
    PaymentMethod(id="credit", name="Credit Card", kind=PaymentMethodKind.CREDIT, color="#ef4444"),
)
