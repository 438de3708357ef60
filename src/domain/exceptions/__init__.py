"""
Domain exceptions package.
"""

from .crm_error import CRMAPIError, CRMConfigurationError, CRMError
from .gateway_error import GatewayError, TicketSubmissionError
from .validation_error import (
    InvalidFormatError,
    RequiredFieldError,
    TooManyFilesError,
    ValidationError,
)

__all__ = [
    "CRMError",
    "CRMAPIError",
    "CRMConfigurationError",
    "GatewayError",
    "TicketSubmissionError",
    "ValidationError",
    "RequiredFieldError",
    "InvalidFormatError",
    "TooManyFilesError",
]
