"""
Use cases package.

This package contains the business logic use cases that orchestrate
the CRM provider on behalf of the support portal handlers.
"""

from .create_ticket import CreateTicketRequest, CreateTicketResult, CreateTicketUseCase
from .get_attachments import GetAttachmentsUseCase
from .get_ticket_messages import GetTicketMessagesUseCase
from .search_contact import SearchContactRequest, SearchContactResult, SearchContactUseCase
from .search_deals import SearchDealsUseCase
from .search_tickets import SearchTicketsUseCase

__all__ = [
    "CreateTicketRequest",
    "CreateTicketResult",
    "CreateTicketUseCase",
    "GetAttachmentsUseCase",
    "GetTicketMessagesUseCase",
    "SearchContactRequest",
    "SearchContactResult",
    "SearchContactUseCase",
    "SearchDealsUseCase",
    "SearchTicketsUseCase",
]
