"""
Prometheus metrics for the job tracker.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()


JOBS_CREATED = Counter(
    "ooh_jobs_created_total",
    "Total number of jobs logged",
    ["category", "priority"],
    registry=registry,
)

MILESTONES_RECORDED = Counter(
    "ooh_milestones_recorded_total",
    "Total number of milestones recorded",
    ["milestone"],
    registry=registry,
)

LIFECYCLE_REJECTIONS = Counter(
    "ooh_lifecycle_rejections_total",
    "Total number of rejected milestone transitions",
    ["milestone", "error_type"],
    registry=registry,
)

ALERTS_RAISED = Counter(
    "ooh_alerts_raised_total",
    "Total number of job alerts raised",
    ["alert_type", "source"],
    registry=registry,
)

ALERTS_ACKNOWLEDGED = Counter(
    "ooh_alerts_acknowledged_total",
    "Total number of job alerts acknowledged",
    ["alert_type"],
    registry=registry,
)

# API metrics
API_REQUESTS = Counter(
    "ooh_api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)

API_REQUEST_DURATION = Histogram(
    "ooh_api_request_duration_seconds",
    "Time spent processing API requests",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
    registry=registry,
)

ERRORS_TOTAL = Counter(
    "ooh_errors_total",
    "Total number of errors",
    ["error_type", "component"],
    registry=registry,
)


def record_job_created(category: str, priority: str):
    """Record job creation metric."""
    JOBS_CREATED.labels(category=category, priority=priority).inc()


def record_milestone(milestone: str):
    """Record milestone metric."""
    MILESTONES_RECORDED.labels(milestone=milestone).inc()


def record_lifecycle_rejection(milestone: str, error_type: str):
    """Record rejected transition metric."""
    LIFECYCLE_REJECTIONS.labels(milestone=milestone, error_type=error_type).inc()


def record_alert_raised(alert_type: str, source: str = "manual"):
    """Record alert metric; source is 'manual' or 'sweep'."""
    ALERTS_RAISED.labels(alert_type=alert_type, source=source).inc()


def record_alert_acknowledged(alert_type: str):
    ALERTS_ACKNOWLEDGED.labels(alert_type=alert_type).inc()


def record_api_request(method: str, endpoint: str, status_code: int, duration: float):
    """Record API request metrics."""
    API_REQUESTS.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
    API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def record_error(error_type: str, component: str):
    """Record error metric."""
    ERRORS_TOTAL.labels(error_type=error_type, component=component).inc()


def get_metrics():
    """Get all metrics in Prometheus format."""
    return generate_latest(registry)


def get_metrics_content_type():
    """Get the content type for metrics."""
    return CONTENT_TYPE_LATEST
