"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the support portal.
"""

from .interfaces.crm import (
    AdminNote,
    ContactDetails,
    CRMProviderInterface,
    EmailEngagementRequest,
    FileUpload,
)
from .services.html_sanitizer import sanitize_message_html
from .use_cases.create_ticket import CreateTicketRequest, CreateTicketUseCase
from .use_cases.get_attachments import GetAttachmentsUseCase
from .use_cases.get_ticket_messages import GetTicketMessagesUseCase
from .use_cases.search_contact import SearchContactRequest, SearchContactUseCase
from .use_cases.search_deals import SearchDealsUseCase
from .use_cases.search_tickets import SearchTicketsUseCase

__all__ = [
    # Interfaces
    "AdminNote",
    "ContactDetails",
    "CRMProviderInterface",
    "EmailEngagementRequest",
    "FileUpload",
    # Services
    "sanitize_message_html",
    # Use Cases
    "CreateTicketRequest",
    "CreateTicketUseCase",
    "GetAttachmentsUseCase",
    "GetTicketMessagesUseCase",
    "SearchContactRequest",
    "SearchContactUseCase",
    "SearchDealsUseCase",
    "SearchTicketsUseCase",
]
