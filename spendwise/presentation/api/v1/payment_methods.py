"""Payment method API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response

from spendwise.application.dto import PaymentMethodRequest
from spendwise.application.services import TransactionStore
from spendwise.core.dependencies import get_transaction_store
from spendwise.presentation.schemas import (
    ErrorResponseSchema,
    PaymentMethodRequestSchema,
    PaymentMethodResponseSchema,
)

payment_method_router = APIRouter(prefix="/payment-methods")

Store = Annotated[TransactionStore, Depends(get_transaction_store)]


@payment_method_router.get(
    "",
    response_model=list[PaymentMethodResponseSchema],
    summary="List Payment Methods",
)
async def list_payment_methods(store: Store) -> list[PaymentMethodResponseSchema]:
    return [PaymentMethodResponseSchema.from_entity(m) for m in store.list_payment_methods()]


@payment_method_router.post(
    "",
    response_model=PaymentMethodResponseSchema,
    status_code=201,
    summary="Add Payment Method",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid billing cycle"},
    },
)
async def add_payment_method(
    body: PaymentMethodRequestSchema,
    store: Store,
) -> PaymentMethodResponseSchema:
    method = await store.add_payment_method(
        PaymentMethodRequest(
            name=body.name,
            kind=body.kind,
            color=body.color,
            closing_day=body.closing_day,
            due_day=body.due_day,
        )
    )
    return PaymentMethodResponseSchema.from_entity(method)


@payment_method_router.delete(
    "/{payment_method_id}",
    status_code=204,
    summary="Delete Payment Method",
    description="Fails with 409 while any transaction still references the method.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Payment method not found"},
        409: {"model": ErrorResponseSchema, "description": "Payment method in use"},
    },
)
async def delete_payment_method(
    payment_method_id: Annotated[str, Path(description="Id of the payment method")],
    store: Store,
) -> Response:
    await store.delete_payment_method(payment_method_id)
    return Response(status_code=204)
