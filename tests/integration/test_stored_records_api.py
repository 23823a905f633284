"""
Integration tests for serving records restored from storage.

These tests verify:
1. Listing works when a stored installment is missing its number or amount
2. Records without a usable date are dropped at load
3. Reports and new writes keep working on such a store
"""

import pytest
from httpx import AsyncClient

from spendwise.infrastructure.repositories import InMemoryStateRepository


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    """Repository holding one damaged installment plan and one undated record."""
    return InMemoryStateRepository(
        {
            "transactions": [
                {
                    "id": "legacy-tv",
                    "description": "TV",
                    "amount": "10.00",
                    "date": "2024-01-20",
                    "category": "gadgets",
                    "payment_method_id": "credit",
                    "installments": [
                        {"amount": "5.00", "due_date": "2024-02-11"},
                        {"installment_number": 2, "amount": "oops", "due_date": "2024-03-11"},
                    ],
                    "installment_count": 2,
                },
                {
                    "id": "legacy-import",
                    "description": "imported",
                    "amount": "10.00",
                    "category": "food",
                },
            ]
        }
    )


class TestStoredRecordsApi:
    """Tests for the API over a store loaded from damaged records."""

    @pytest.mark.asyncio
    async def test_list_with_malformed_installment(self, client: AsyncClient):
        response = await client.get("/v1/transactions")

        assert response.status_code == 200
        data = response.json()
        assert [t["id"] for t in data] == ["legacy-tv"]
        assert data[0]["category"] == "other"
        assert [(i["installment_number"], i["amount"]) for i in data[0]["installments"]] == [
            (1, "5.00"),
            (2, None),
        ]

    @pytest.mark.asyncio
    async def test_reports_skip_malformed_installment(self, client: AsyncClient):
        total = await client.get("/v1/reports/monthly-total", params={"month": "2024-03"})
        dashboard = await client.get("/v1/reports/dashboard", params={"month": "2024-02"})

        assert total.json()["total"] == "0.00"
        assert dashboard.status_code == 200
        assert dashboard.json()["largest_expense"]["id"] == "legacy-tv"

    @pytest.mark.asyncio
    async def test_new_transaction_is_saved(
        self,
        client: AsyncClient,
        groceries_request: dict,
        state_repository: InMemoryStateRepository,
    ):
        response = await client.post("/v1/transactions", json=groceries_request)

        assert response.status_code == 201
        saved = await state_repository.load("transactions")
        assert [r["id"] for r in saved] == [response.json()["id"], "legacy-tv"]
