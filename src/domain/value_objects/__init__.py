"""
Domain value objects package.
"""

from .contact_session import ContactSession
from .identification_method import IdentificationMethod
from .ticket_status import TicketStatus

__all__ = [
    "ContactSession",
    "IdentificationMethod",
    "TicketStatus",
]
