"""Prometheus metrics for the Spendwise service.

Metrics are organized into two categories:

Business Metrics:
- spendwise_transactions_total: Transaction mutations by operation
- spendwise_installment_plans_total: Credit purchases split into installments
- spendwise_installments_per_plan: Distribution of installment counts
- spendwise_payment_method_delete_rejected_total: Deletes blocked by references

Technical Metrics:
- spendwise_persist_failures_total: State writes that failed
- spendwise_http_requests_total: HTTP requests by endpoint/status
- spendwise_http_request_latency_seconds: HTTP request latency
"""

from typing import Optional

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

transactions_total = Counter(
    "spendwise_transactions_total",
    "Total number of transaction mutations",
    ["operation"],  # created, updated, deleted
)

installment_plans_total = Counter(
    "spendwise_installment_plans_total",
    "Total number of credit-card purchases split into installments",
)

installments_per_plan = Histogram(
    "spendwise_installments_per_plan",
    "Number of installments per split purchase",
    buckets=[2, 3, 4, 6, 10, 12, 18, 24, 36, 48],
)

payment_method_delete_rejected = Counter(
    "spendwise_payment_method_delete_rejected_total",
    "Payment method deletions rejected because transactions reference them",
)


# =============================================================================
# Technical Metrics
# =============================================================================

persist_failures = Counter(
    "spendwise_persist_failures_total",
    "Total number of failed state collection writes",
    ["collection"],
)

http_requests_total = Counter(
    "spendwise_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "spendwise_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_transaction(operation: str, installment_count: Optional[int] = None) -> None:
    """
    Record a transaction mutation.

    Pass installment_count only when the mutation produced a new installment
    plan; it is then counted in the plan metrics.
    """
    transactions_total.labels(operation=operation).inc()

    if installment_count and installment_count > 1:
        installment_plans_total.inc()
        installments_per_plan.observe(installment_count)


def record_payment_method_delete_rejected() -> None:
    """Record a payment method deletion blocked by references."""
    payment_method_delete_rejected.inc()


def record_persist_failure(collection: str) -> None:
    """Record a failed state write."""
    persist_failures.labels(collection=collection).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
