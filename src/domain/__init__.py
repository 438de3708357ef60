"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Contact",
    "Deal",
    "Message",
    "PhotoAttachment",
    "Ticket",
    # Exceptions
    "CRMError",
    "CRMAPIError",
    "CRMConfigurationError",
    "ValidationError",
    "RequiredFieldError",
    "TooManyFilesError",
    # Value Objects
    "ContactSession",
    "IdentificationMethod",
    "TicketStatus",
]
