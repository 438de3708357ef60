"""
Domain entities package.
"""

from .attachment import PhotoAttachment
from .contact import Contact
from .deal import Deal
from .message import Message
from .ticket import Ticket

__all__ = [
    "Contact",
    "Deal",
    "Message",
    "PhotoAttachment",
    "Ticket",
]
