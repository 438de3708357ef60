"""
CRM-related domain exceptions.
"""

from typing import Any, Optional


class CRMError(Exception):
    """Base exception for CRM-related errors."""

    pass


class CRMConfigurationError(CRMError):
    """Raised when the CRM credential or settings are missing."""

    pass


class CRMAPIError(CRMError):
    """Raised when the CRM API returns a non-2xx response."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[Any] = None,
        provider: str = "hubspot",
    ):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(f"Provider {provider} API error ({status_code}): {message}")
