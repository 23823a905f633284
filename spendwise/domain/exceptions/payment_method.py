"""Payment method domain exceptions."""

from .base import DomainException


class PaymentMethodNotFoundException(DomainException):
    """Raised when a payment method cannot be found."""

    def __init__(self, payment_method_id: str):
        super().__init__(
            message=f"Payment method not found: {payment_method_id}",
            code="PAYMENT_METHOD_NOT_FOUND",
        )
        self.payment_method_id = payment_method_id


class PaymentMethodInUseException(DomainException):
    """Raised when deleting a payment method still referenced by transactions."""

    def __init__(self, payment_method_id: str, transaction_count: int):
        super().__init__(
            message=(
                f"Cannot delete payment method {payment_method_id}: "
                f"referenced by {transaction_count} transaction(s)"
            ),
            code="PAYMENT_METHOD_IN_USE",
        )
        self.payment_method_id = payment_method_id
        self.transaction_count = transaction_count
