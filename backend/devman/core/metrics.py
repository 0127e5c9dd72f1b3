"""Prometheus metrics for the Device Manager API.

Metrics are exposed at the /metrics endpoint.

Metrics Categories:
- HTTP request metrics (latency, count)
- Filter parameters that fell back to their defaults
- Secret encryption/decryption outcomes
"""

from prometheus_client import Counter, Gauge, Histogram, Info

APP_INFO = Info("devman_app", "Device Manager application information")

HTTP_REQUESTS_TOTAL = Counter(
    "devman_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "devman_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

HTTP_REQUESTS_IN_PROGRESS = Gauge(
    "devman_http_requests_in_progress",
    "Number of HTTP requests currently in progress",
    ["method", "endpoint"],
)

FILTER_FALLBACKS_TOTAL = Counter(
    "devman_filter_fallbacks_total",
    "Query parameters ignored because they could not be parsed or were out of range",
    ["parameter"],
)

SECRET_OPERATIONS_TOTAL = Counter(
    "devman_secret_operations_total",
    "Secret cipher operations",
    ["operation", "outcome"],  # encrypt/decrypt, success/failure
)


def set_app_info(version: str, environment: str) -> None:
    """Set application info metric."""
    APP_INFO.info({"version": version, "environment": environment})


def record_filter_fallback(parameter: str) -> None:
    """Record a query parameter that was ignored in favour of its default."""
    FILTER_FALLBACKS_TOTAL.labels(parameter=parameter).inc()


def record_secret_operation(operation: str, success: bool) -> None:
    """Record the outcome of a secret cipher operation.

    Args:
        operation: ``encrypt`` or ``decrypt``.
        success: Whether the operation succeeded.
    """
    outcome = "success" if success else "failure"
    SECRET_OPERATIONS_TOTAL.labels(operation=operation, outcome=outcome).inc()
