"""Prometheus metrics for the Finance Tracker service.

Metrics are organized into two categories:

Business Metrics:
- finance_tracker_transactions_created_total: Transactions recorded by type
- finance_tracker_transactions_deleted_total: Transactions deleted
- finance_tracker_sample_seeds_total: Sample data sets inserted
- finance_tracker_csv_exports_total: CSV exports served

Technical Metrics:
- finance_tracker_dashboard_latency_seconds: Dashboard computation latency
- finance_tracker_store_latency_seconds: Transaction store latency
- finance_tracker_store_failures_total: Transaction store failures
- finance_tracker_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

transactions_created = Counter(
    "finance_tracker_transactions_created_total",
    "Total number of transactions recorded",
    ["type"],  # Income, Expense
)

transactions_deleted = Counter(
    "finance_tracker_transactions_deleted_total",
    "Total number of transactions deleted",
)

sample_seeds = Counter(
    "finance_tracker_sample_seeds_total",
    "Total number of sample data sets inserted",
)

csv_exports = Counter(
    "finance_tracker_csv_exports_total",
    "Total number of CSV exports served",
)

csv_exported_rows = Counter(
    "finance_tracker_csv_exported_rows_total",
    "Total number of transaction rows written to CSV exports",
)


# =============================================================================
# Technical Metrics
# =============================================================================

dashboard_latency = Histogram(
    "finance_tracker_dashboard_latency_seconds",
    "Dashboard statistics latency in seconds",
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

store_latency = Histogram(
    "finance_tracker_store_latency_seconds",
    "Transaction store operation latency in seconds",
    ["operation"],  # create, create_many, delete, list
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

store_failures = Counter(
    "finance_tracker_store_failures_total",
    "Total number of transaction store failures",
    ["operation", "error_type"],  # timeout, error, not_found
)

http_requests_total = Counter(
    "finance_tracker_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "finance_tracker_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_transaction_created(transaction_type: str) -> None:
    """Record a newly created transaction."""
    transactions_created.labels(type=transaction_type).inc()


def record_transaction_deleted() -> None:
    """Record a deleted transaction."""
    transactions_deleted.inc()


def record_sample_seed() -> None:
    """Record an inserted sample data set."""
    sample_seeds.inc()


def record_csv_export(row_count: int) -> None:
    """Record a served CSV export."""
    csv_exports.inc()
    csv_exported_rows.inc(row_count)


@contextmanager
def track_dashboard_latency() -> Generator[None, None, None]:
    """Context manager to track dashboard computation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        dashboard_latency.observe(duration)


@contextmanager
def track_store_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track transaction store latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        store_latency.labels(operation=operation).observe(duration)


def record_store_failure(operation: str, error_type: str) -> None:
    """Record a transaction store failure."""
    store_failures.labels(operation=operation, error_type=error_type).inc()


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
