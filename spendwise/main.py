"""
Spendwise - Main Application Entry Point

A personal finance tracker that logs transactions, manages payment
methods and splits credit-card purchases into monthly installments.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from spendwise import __version__
from spendwise.application.services import TransactionStore
from spendwise.core.config import settings
from spendwise.core.logging import setup_logging
from spendwise.core.metrics import get_metrics, get_metrics_content_type
from spendwise.infrastructure.database import db_manager
from spendwise.infrastructure.repositories import SqlStateRepository
from spendwise.presentation.api import api_router
from spendwise.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize the database and create the state table
    - Load the session's TransactionStore
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()
    await db_manager.create_tables()

    app.state.transaction_store = await TransactionStore.load(
        SqlStateRepository(db_manager)
    )

    logger = structlog.get_logger(__name__)
    logger.info("application_started", version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Spendwise",
    description="Personal finance tracker with credit-card installment planning",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")
