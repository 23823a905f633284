"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from spendwise.domain.exceptions import (
    DomainException,
    InvalidBillingCycleException,
    InvalidInstallmentCountException,
    InvalidYearMonthException,
    PaymentMethodInUseException,
    PaymentMethodNotFoundException,
    TransactionNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={**exc.to_dict(), "request_id": get_request_id()},
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(TransactionNotFoundException)
    async def transaction_not_found_handler(
        request: Request,
        exc: TransactionNotFoundException,
    ) -> JSONResponse:
        """Handle transaction not found errors."""
        return _error_response(404, exc)

    @app.exception_handler(PaymentMethodNotFoundException)
    async def payment_method_not_found_handler(
        request: Request,
        exc: PaymentMethodNotFoundException,
    ) -> JSONResponse:
        """Handle payment method not found errors."""
        return _error_response(404, exc)

    @app.exception_handler(PaymentMethodInUseException)
    async def payment_method_in_use_handler(
        request: Request,
        exc: PaymentMethodInUseException,
    ) -> JSONResponse:
        """Handle deletes of payment methods still referenced by transactions."""
        return _error_response(409, exc)

    @app.exception_handler(InvalidInstallmentCountException)
    async def invalid_installment_count_handler(
        request: Request,
        exc: InvalidInstallmentCountException,
    ) -> JSONResponse:
        """Handle invalid installment counts."""
        return _error_response(400, exc)

    @app.exception_handler(InvalidBillingCycleException)
    async def invalid_billing_cycle_handler(
        request: Request,
        exc: InvalidBillingCycleException,
    ) -> JSONResponse:
        """Handle out-of-range closing/due days."""
        return _error_response(400, exc)

    @app.exception_handler(InvalidYearMonthException)
    async def invalid_year_month_handler(
        request: Request,
        exc: InvalidYearMonthException,
    ) -> JSONResponse:
        """Handle malformed YYYY-MM parameters."""
        return _error_response(400, exc)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
