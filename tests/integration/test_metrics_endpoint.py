"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Business metrics (transactions, installment plans, rejected deletes) are tracked
"""

import pytest
from httpx import AsyncClient

from spendwise.core.metrics import REGISTRY


def sample(name: str, labels: dict = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(self, client: AsyncClient):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "spendwise_transactions_total" in response.text
        assert "spendwise_http_request_latency_seconds" in response.text


# =============================================================================
# Business Metrics Tests
# =============================================================================

class TestBusinessMetrics:
    """Tests for counters moved by API calls."""

    @pytest.mark.asyncio
    async def test_installment_plan_is_counted(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        created_before = sample("spendwise_transactions_total", {"operation": "created"})
        plans_before = sample("spendwise_installment_plans_total")

        await client.post("/v1/transactions", json=laptop_request)

        assert sample("spendwise_transactions_total", {"operation": "created"}) == created_before + 1
        assert sample("spendwise_installment_plans_total") == plans_before + 1

    @pytest.mark.asyncio
    async def test_plain_purchase_is_not_a_plan(
        self,
        client: AsyncClient,
        groceries_request: dict,
    ):
        plans_before = sample("spendwise_installment_plans_total")

        await client.post("/v1/transactions", json=groceries_request)

        assert sample("spendwise_installment_plans_total") == plans_before

    @pytest.mark.asyncio
    async def test_rejected_delete_is_counted(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        await client.post("/v1/transactions", json=laptop_request)
        before = sample("spendwise_payment_method_delete_rejected_total")

        await client.delete("/v1/payment-methods/credit")

        assert sample("spendwise_payment_method_delete_rejected_total") == before + 1

    @pytest.mark.asyncio
    async def test_editing_existing_plan_is_not_a_new_plan(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        created = (await client.post("/v1/transactions", json=laptop_request)).json()
        plans_before = sample("spendwise_installment_plans_total")

        laptop_request["amount"] = "120.00"
        await client.put(f"/v1/transactions/{created['id']}", json=laptop_request)

        assert sample("spendwise_installment_plans_total") == plans_before

    @pytest.mark.asyncio
    async def test_splitting_plain_purchase_counts_new_plan(
        self,
        client: AsyncClient,
        laptop_request: dict,
    ):
        laptop_request["installment_count"] = None
        created = (await client.post("/v1/transactions", json=laptop_request)).json()
        plans_before = sample("spendwise_installment_plans_total")

        laptop_request["installment_count"] = 4
        await client.put(f"/v1/transactions/{created['id']}", json=laptop_request)

        assert sample("spendwise_installment_plans_total") == plans_before + 1
