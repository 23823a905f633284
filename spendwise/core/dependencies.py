"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from spendwise.application.services import ReportService, TransactionStore
from spendwise.core.config import Settings, get_settings


def get_transaction_store(request: Request) -> TransactionStore:
    """Get the session's TransactionStore, built once at startup."""
    store = getattr(request.app.state, "transaction_store", None)
    if store is None:
        raise RuntimeError("Transaction store not initialized. Is the app lifespan running?")
    return store


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


def get_report_service(
    store: Annotated[TransactionStore, Depends(get_transaction_store)],
) -> ReportService:
    """Get a ReportService over the session's store."""
    return ReportService(store=store)
