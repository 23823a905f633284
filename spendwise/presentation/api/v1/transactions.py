"""Transaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from spendwise.application.dto import TransactionRequest
from spendwise.application.services import TransactionStore
from spendwise.core.dependencies import get_transaction_store
from spendwise.presentation.schemas import (
    ErrorResponseSchema,
    TransactionRequestSchema,
    TransactionResponseSchema,
)

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Transaction or payment method not found"},
    },
)

TransactionId = Annotated[str, Path(description="Id of the transaction")]
Store = Annotated[TransactionStore, Depends(get_transaction_store)]


def _to_request(body: TransactionRequestSchema) -> TransactionRequest:
    return TransactionRequest(
        description=body.description,
        amount=body.amount,
        date=body.date,
        category=body.category,
        payment_method_id=body.payment_method_id,
        installment_count=body.installment_count,
    )


@transaction_router.get(
    "",
    response_model=list[TransactionResponseSchema],
    summary="List Transactions",
    description="All transactions, newest first.",
)
async def list_transactions(store: Store) -> list[TransactionResponseSchema]:
    return [TransactionResponseSchema.from_entity(t) for t in store.list_transactions()]


@transaction_router.get(
    "/{transaction_id}",
    response_model=TransactionResponseSchema,
    summary="Get Transaction",
)
async def get_transaction(
    transaction_id: TransactionId,
    store: Store,
) -> TransactionResponseSchema:
    return TransactionResponseSchema.from_entity(store.get_transaction(transaction_id))


@transaction_router.post(
    "",
    response_model=TransactionResponseSchema,
    status_code=201,
    summary="Add Transaction",
    description="""
    Log a transaction.

    Purchases on a credit card with more than one installment are split
    into monthly installments billed on the card's statements.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid installment count"},
    },
)
async def add_transaction(
    body: TransactionRequestSchema,
    store: Store,
) -> TransactionResponseSchema:
    transaction = await store.add_transaction(_to_request(body))
    return TransactionResponseSchema.from_entity(transaction)


@transaction_router.put(
    "/{transaction_id}",
    response_model=TransactionResponseSchema,
    summary="Replace Transaction",
    description="""
    Replace a transaction. The installment schedule is rebuilt from the
    new amount, date and installment count.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid installment count"},
    },
)
async def update_transaction(
    transaction_id: TransactionId,
    body: TransactionRequestSchema,
    store: Store,
) -> TransactionResponseSchema:
    transaction = await store.update_transaction(transaction_id, _to_request(body))
    return TransactionResponseSchema.from_entity(transaction)


@transaction_router.delete(
    "/{transaction_id}",
    status_code=204,
    summary="Delete Transaction",
)
async def delete_transaction(transaction_id: TransactionId, store: Store) -> Response:
    await store.delete_transaction(transaction_id)
    return Response(status_code=204)
