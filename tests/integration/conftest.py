"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app backed by an in-memory store
- In-memory SQLite database for the SQL state repository
- Request body helpers
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from spendwise.application.services import TransactionStore
from spendwise.core.dependencies import get_transaction_store
from spendwise.infrastructure.database import DatabaseSessionManager
from spendwise.infrastructure.repositories import (
    InMemoryStateRepository,
    SqlStateRepository,
)
from spendwise.main import app
from spendwise.service.installments import BillingCycleSettings


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    """Create an empty in-memory state repository."""
    return InMemoryStateRepository()


@pytest_asyncio.fixture
async def store(state_repository: InMemoryStateRepository) -> TransactionStore:
    """Load a store with the default payment methods and a 4/11 billing cycle."""
    return await TransactionStore.load(
        state_repository,
        BillingCycleSettings(closing_day=4, due_day=11),
    )


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def db() -> AsyncGenerator[DatabaseSessionManager, None]:
    """Create an in-memory SQLite session manager with tables created."""
    manager = DatabaseSessionManager()
    manager.init("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()

    yield manager

    await manager.close()


@pytest.fixture
def sql_repository(db: DatabaseSessionManager) -> SqlStateRepository:
    return SqlStateRepository(db)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(store: TransactionStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the store dependency overridden.

    The app lifespan does not run under ASGITransport, so the store the
    lifespan would build is replaced by the in-memory fixture store.
    """
    app.dependency_overrides[get_transaction_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def laptop_request() -> dict:
    """Request body for a 3-installment credit purchase."""
    return {
        "description": "Laptop",
        "amount": "100.00",
        "date": "2024-01-15",
        "category": "shopping",
        "payment_method_id": "credit",
        "installment_count": 3,
    }


@pytest.fixture
def groceries_request() -> dict:
    """Request body for a plain cash purchase."""
    return {
        "description": "Groceries",
        "amount": "42.50",
        "date": "2024-02-03",
        "category": "food",
        "payment_method_id": "cash",
    }
