"""
Prometheus metrics for the CRM gateway.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


def get_registry():
    """Get the registry the gateway metrics are recorded in."""
    return registry


CRM_REQUESTS = Counter(
    "crm_requests_total",
    "Total number of requests sent to the CRM API",
    ["operation", "status_code"],
    registry=registry,
)

CRM_REQUEST_DURATION = Histogram(
    "crm_request_duration_seconds",
    "Time spent waiting on the CRM API",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=registry,
)

TICKETS_CREATED = Counter(
    "tickets_created_total",
    "Total number of support tickets created",
    ["with_deal", "admin"],
    registry=registry,
)

ATTACHMENT_UPLOADS = Counter(
    "attachment_uploads_total",
    "Total number of ticket attachment uploads",
    ["status"],
    registry=registry,
)

ERRORS_TOTAL = Counter(
    "errors_total",
    "Total number of errors",
    ["error_type", "component"],
    registry=registry,
)


def record_crm_request(operation: str, status_code: int, duration: float):
    """Record a CRM API call."""
    CRM_REQUESTS.labels(operation=operation, status_code=str(status_code)).inc()
    CRM_REQUEST_DURATION.labels(operation=operation).observe(duration)


def record_ticket_creation(with_deal: bool, admin: bool):
    """Record ticket creation metric."""
    TICKETS_CREATED.labels(
        with_deal=str(with_deal).lower(), admin=str(admin).lower()
    ).inc()


def record_attachment_upload(status: str):
    """Record attachment upload metric."""
    ATTACHMENT_UPLOADS.labels(status=status).inc()


def record_error(error_type: str, component: str):
    """Record error metric."""
    ERRORS_TOTAL.labels(error_type=error_type, component=component).inc()


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
