"""Transaction store - owns the session's transactions and payment methods."""

from decimal import Decimal
from typing import Callable, List, Optional
from uuid import uuid4

import structlog

from spendwise.application.dto import PaymentMethodRequest, TransactionRequest
from spendwise.core.metrics import (
    record_payment_method_delete_rejected,
    record_persist_failure,
    record_transaction,
)
from spendwise.domain.entities import (
    DEFAULT_PAYMENT_METHODS,
    PaymentMethod,
    Transaction,
)
from spendwise.domain.exceptions import (
    PaymentMethodInUseException,
    PaymentMethodNotFoundException,
    PersistenceException,
    TransactionNotFoundException,
)
from spendwise.domain.interfaces import StateRepository
from spendwise.service.installments import (
    BillingCycleSettings,
    aggregate_for_month,
    billing_settings,
    materialize_transaction,
    validate_cycle_days,
)

logger = structlog.get_logger(__name__)


def _restore_transactions(records: List[dict]) -> List[Transaction]:
    """
    Rebuild stored transactions, dropping records that cannot be used.

    A record without an id, a readable amount or a readable date is logged
    and left out; it is gone from storage after the next write.
    """
    transactions = []
    for record in records:
        if not isinstance(record, dict) or not record.get("id"):
            logger.warning("malformed_transaction_skipped", transaction_id=None)
            continue

        transaction = Transaction.from_dict(record)
        if transaction.amount is None or transaction.date is None:
            logger.warning("malformed_transaction_skipped", transaction_id=transaction.id)
            continue

        transactions.append(transaction)
    return transactions


class TransactionStore:
    """
    Application service holding one user session's state.

    Transactions and payment methods live in memory; after every mutation
    the changed collection is written through the injected repository.
    Writes are fire-and-forget: a failed write is logged and counted but
    the in-memory state stays authoritative and the next write wins.
    """

    TRANSACTIONS = "transactions"
    PAYMENT_METHODS = "payment_methods"

    def __init__(
        self,
        repository: StateRepository,
        transactions: Optional[List[Transaction]] = None,
        payment_methods: Optional[List[PaymentMethod]] = None,
        settings: BillingCycleSettings = billing_settings,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ):
        self._repository = repository
        self._transactions = list(transactions or [])
        self._payment_methods = list(
            DEFAULT_PAYMENT_METHODS if payment_methods is None else payment_methods
        )
        self._settings = settings
        self._new_id = id_factory

    @classmethod
    async def load(
        cls,
        repository: StateRepository,
        settings: BillingCycleSettings = billing_settings,
    ) -> "TransactionStore":
        """
        Build a store from the persisted collections.

        Default payment methods are seeded (and written) when the
        payment method collection has never been saved.

        Raises:
            PersistenceException: If the repository cannot be read
        """
        transaction_records = await repository.load(cls.TRANSACTIONS) or []
        method_records = await repository.load(cls.PAYMENT_METHODS)

        store = cls(
            repository=repository,
            transactions=_restore_transactions(transaction_records),
            payment_methods=(
                None
                if method_records is None
                else [
                    PaymentMethod.from_dict(r)
                    for r in method_records
                    if isinstance(r, dict) and r.get("id")
                ]
            ),
            settings=settings,
        )

        if method_records is None:
            await store._persist(cls.PAYMENT_METHODS)

        logger.info(
            "store_loaded",
            transactions=len(store._transactions),
            payment_methods=len(store._payment_methods),
        )
        return store

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def list_transactions(self) -> List[Transaction]:
        """All transactions, newest first."""
        return list(self._transactions)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """
        Raises:
            TransactionNotFoundException: If no transaction has this id
        """
        return self._transactions[self._transaction_index(transaction_id)]

    async def add_transaction(self, request: TransactionRequest) -> Transaction:
        """
        Create a transaction, splitting credit purchases into installments.

        Raises:
            PaymentMethodNotFoundException: If the request names an unknown method
            InvalidInstallmentCountException: If the count is not an integer >= 1
        """
        transaction = self._materialize(self._new_id(), request)
        self._transactions.insert(0, transaction)

        record_transaction("created", transaction.installment_count)
        logger.info(
            "transaction_created",
            transaction_id=transaction.id,
            amount=str(transaction.amount),
            installment_count=transaction.installment_count,
            due_month=transaction.due_month,
        )

        await self._persist(self.TRANSACTIONS)
        return transaction

    async def update_transaction(
        self,
        transaction_id: str,
        request: TransactionRequest,
    ) -> Transaction:
        """
        Replace a transaction with a freshly materialized one.

        The installment schedule is rebuilt from the new inputs; the id
        and the list position are kept.

        Raises:
            TransactionNotFoundException: If no transaction has this id
            PaymentMethodNotFoundException: If the request names an unknown method
            InvalidInstallmentCountException: If the count is not an integer >= 1
        """
        index = self._transaction_index(transaction_id)
        previous = self._transactions[index]
        transaction = self._materialize(transaction_id, request)
        self._transactions[index] = transaction

        # only a plan that did not exist before counts as a new plan
        record_transaction(
            "updated",
            None if previous.has_installments else transaction.installment_count,
        )
        logger.info(
            "transaction_updated",
            transaction_id=transaction_id,
            amount=str(transaction.amount),
            installment_count=transaction.installment_count,
        )

        await self._persist(self.TRANSACTIONS)
        return transaction

    async def delete_transaction(self, transaction_id: str) -> None:
        """
        Raises:
            TransactionNotFoundException: If no transaction has this id
        """
        index = self._transaction_index(transaction_id)
        del self._transactions[index]

        record_transaction("deleted")
        logger.info("transaction_deleted", transaction_id=transaction_id)

        await self._persist(self.TRANSACTIONS)

    def aggregate_for_month(self, month: str) -> Decimal:
        """Total attributed to a YYYY-MM month across all transactions."""
        return aggregate_for_month(self._transactions, month)

    # ------------------------------------------------------------------
    # Payment methods
    # ------------------------------------------------------------------

    def list_payment_methods(self) -> List[PaymentMethod]:
        return list(self._payment_methods)

    def get_payment_method(self, payment_method_id: str) -> PaymentMethod:
        """
        Raises:
            PaymentMethodNotFoundException: If no payment method has this id
        """
        for method in self._payment_methods:
            if method.id == payment_method_id:
                return method
        raise PaymentMethodNotFoundException(payment_method_id)

    async def add_payment_method(self, request: PaymentMethodRequest) -> PaymentMethod:
        """
        Raises:
            InvalidBillingCycleException: If the card's cycle days are out of range
        """
        validate_cycle_days(request.closing_day, request.due_day)

        method = PaymentMethod(
            id=self._new_id(),
            name=request.name,
            kind=request.kind,
            color=request.color,
            closing_day=request.closing_day,
            due_day=request.due_day,
        )
        self._payment_methods.append(method)

        logger.info(
            "payment_method_created",
            payment_method_id=method.id,
            kind=method.kind.value,
        )

        await self._persist(self.PAYMENT_METHODS)
        return method

    async def delete_payment_method(self, payment_method_id: str) -> None:
        """
        Delete a payment method no transaction references.

        Raises:
            PaymentMethodNotFoundException: If no payment method has this id
            PaymentMethodInUseException: If any transaction references it;
                nothing is deleted
        """
        method = self.get_payment_method(payment_method_id)

        in_use = sum(
            1 for t in self._transactions if t.payment_method_id == payment_method_id
        )
        if in_use:
            record_payment_method_delete_rejected()
            logger.warning(
                "payment_method_delete_rejected",
                payment_method_id=payment_method_id,
                transaction_count=in_use,
            )
            raise PaymentMethodInUseException(payment_method_id, in_use)

        self._payment_methods.remove(method)
        logger.info("payment_method_deleted", payment_method_id=payment_method_id)

        await self._persist(self.PAYMENT_METHODS)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transaction_index(self, transaction_id: str) -> int:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                return index
        raise TransactionNotFoundException(transaction_id)

    def _materialize(self, transaction_id: str, request: TransactionRequest) -> Transaction:
        payment_method = (
            self.get_payment_method(request.payment_method_id)
            if request.payment_method_id
            else None
        )

        return materialize_transaction(
            transaction_id=transaction_id,
            description=request.description,
            amount=request.amount,
            purchase_date=request.date,
            category=request.category,
            payment_method=payment_method,
            installment_count=request.installment_count,
            settings=self._settings,
        )

    async def _persist(self, collection: str) -> None:
        if collection == self.TRANSACTIONS:
            records = [t.to_dict() for t in self._transactions]
        else:
            records = [m.to_dict() for m in self._payment_methods]

        try:
            await self._repository.save(collection, records)
        except PersistenceException as exc:
            record_persist_failure(collection)
            logger.error(
                "state_persist_failed",
                collection=collection,
                reason=exc.reason,
            )
