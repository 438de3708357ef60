"""
Exceptions raised by the portal's gateway client.
"""

from typing import Optional


class GatewayError(Exception):
    """Raised when a gateway call fails on the portal side."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TicketSubmissionError(GatewayError):
    """Raised when the gateway does not confirm a ticket creation."""

    pass
