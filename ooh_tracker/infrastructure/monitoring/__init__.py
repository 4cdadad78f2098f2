"""
Monitoring package.
"""

from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_alert_acknowledged,
    record_alert_raised,
    record_api_request,
    record_error,
    record_job_created,
    record_lifecycle_rejection,
    record_milestone,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "record_alert_acknowledged",
    "record_alert_raised",
    "record_api_request",
    "record_error",
    "record_job_created",
    "record_lifecycle_rejection",
    "record_milestone",
]
