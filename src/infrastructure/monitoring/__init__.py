"""
Monitoring package.
"""

from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_attachment_upload,
    record_crm_request,
    record_error,
    record_ticket_creation,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "record_attachment_upload",
    "record_crm_request",
    "record_error",
    "record_ticket_creation",
]
