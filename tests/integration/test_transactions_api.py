"""
Integration tests for the transaction API.

These tests verify:
1. Credit purchases are split into dated installments
2. Non-credit purchases stay single
3. Replace and delete semantics, including unknown ids
4. Validation errors map to the documented status codes
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# Create Tests
# =============================================================================

class TestAddTransaction:
    """Tests for POST /v1/transactions."""

    @pytest.mark.asyncio
    async def test_credit_purchase_is_split(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        response = await client.post("/v1/transactions", json=laptop_request)

        assert response.status_code == 201
        data = response.json()

        assert data["description"] == "Laptop"
        assert data["display_description"] == "Laptop (3x)"
        assert data["amount"] == "100.00"
        assert data["due_month"] == "2024-02"
        assert data["installment_amount"] == "33.34"
        assert data["total_amount"] == "100.00"
        assert data["installment_count"] == 3
        assert data["installments"] == [
            {"installment_number": 1, "amount": "33.34", "due_date": "2024-02-11"},
            {"installment_number": 2, "amount": "33.33", "due_date": "2024-03-11"},
            {"installment_number": 3, "amount": "33.33", "due_date": "2024-04-11"},
        ]

    @pytest.mark.asyncio
    async def test_cash_purchase_is_not_split(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        laptop_request["payment_method_id"] = "cash"

        response = await client.post("/v1/transactions", json=laptop_request)

        assert response.status_code == 201
        data = response.json()
        assert data["installments"] is None
        assert data["due_month"] is None
        assert data["display_description"] == "Laptop"

    @pytest.mark.asyncio
    async def test_invalid_installment_count_returns_400(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        laptop_request["installment_count"] = 0

        response = await client.post("/v1/transactions", json=laptop_request)

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "INVALID_INSTALLMENT_COUNT"
        assert "request_id" in data

    @pytest.mark.asyncio
    async def test_unknown_payment_method_returns_404(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        laptop_request["payment_method_id"] = "amex"

        response = await client.post("/v1/transactions", json=laptop_request)

        assert response.status_code == 404
        assert response.json()["error"] == "PAYMENT_METHOD_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_zero_amount_is_rejected(
        self,
        client: AsyncClient,
        groceries_request: dict,
    ):
        groceries_request["amount"] = "0"

        response = await client.post("/v1/transactions", json=groceries_request)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_description_is_rejected(
        self,
        client: AsyncClient,
        groceries_request: dict,
    ):
        groceries_request["description"] = "   "

        response = await client.post("/v1/transactions", json=groceries_request)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(
        self,
        client: AsyncClient,
        groceries_request: dict,
    ):
        response = await client.post(
            "/v1/transactions",
            json=groceries_request,
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"


# =============================================================================
# Read Tests
# =============================================================================

class TestListTransactions:
    """Tests for GET /v1/transactions."""

    @pytest.mark.asyncio
    async def test_list_is_newest_first(
        self,
        client: AsyncClient,
        laptop_request: dict,
        groceries_request: dict,
    ):
        first = (await client.post("/v1/transactions", json=laptop_request)).json()
        second = (await client.post("/v1/transactions", json=groceries_request)).json()

        response = await client.get("/v1/transactions")

        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_get_unknown_transaction_returns_404(self, client: AsyncClient):
        response = await client.get("/v1/transactions/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "TRANSACTION_NOT_FOUND"


# =============================================================================
# Replace / Delete Tests
# =============================================================================

class TestReplaceTransaction:
    """Tests for PUT and DELETE /v1/transactions/{id}."""

    @pytest.mark.asyncio
    async def test_replace_rebuilds_schedule(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        created = (await client.post("/v1/transactions", json=laptop_request)).json()

        laptop_request.update({"amount": "90.01", "date": "2024-03-02"})
        response = await client.put(f"/v1/transactions/{created['id']}", json=laptop_request)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["due_month"] == "2024-03"
        assert [i["amount"] for i in data["installments"]] == ["30.01", "30.00", "30.00"]
        assert [i["due_date"] for i in data["installments"]] == [
            "2024-03-11",
            "2024-04-11",
            "2024-05-11",
        ]

    @pytest.mark.asyncio
    async def test_replace_unknown_transaction_returns_404(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        response = await client.put("/v1/transactions/missing", json=laptop_request)

        assert response.status_code == 404
        assert response.json()["error"] == "TRANSACTION_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_transaction(
        self,
        client: AsyncClient,
        groceries_request: dict,
    ):
        created = (await client.post("/v1/transactions", json=groceries_request)).json()

        response = await client.delete(f"/v1/transactions/{created['id']}")

        assert response.status_code == 204
        assert (await client.get("/v1/transactions")).json() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_transaction_returns_404(self, client: AsyncClient):
        response = await client.delete("/v1/transactions/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "TRANSACTION_NOT_FOUND"
