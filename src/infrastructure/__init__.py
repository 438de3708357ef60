"""
Infrastructure package.
"""

from .external import *
from .monitoring import *
from .providers import *

__all__ = [
    # External
    "HTTPClient",
    # Monitoring
    "get_metrics",
    "get_metrics_content_type",
    "record_attachment_upload",
    "record_crm_request",
    "record_error",
    "record_ticket_creation",
    # Providers
    "HubSpotProvider",
]
