"""
API schemas for the Support Portal Gateway.
"""

from .common import BaseResponse, CamelModel, ErrorResponse
from .contact import ContactResponse, SearchContactRequest, SearchContactResponse
from .deal import DealListResponse, DealResponse
from .message import (
    AttachmentIdsRequest,
    AttachmentListResponse,
    AttachmentResponse,
    MessageListResponse,
    MessageResponse,
    TicketIdRequest,
)
from .ticket import (
    ContactIdRequest,
    CreatedTicketResponse,
    CreateTicketResponse,
    TicketListResponse,
    TicketResponse,
)

__all__ = [
    "AttachmentIdsRequest",
    "AttachmentListResponse",
    "AttachmentResponse",
    "BaseResponse",
    "CamelModel",
    "ContactIdRequest",
    "ContactResponse",
    "CreatedTicketResponse",
    "CreateTicketResponse",
    "DealListResponse",
    "DealResponse",
    "ErrorResponse",
    "MessageListResponse",
    "MessageResponse",
    "SearchContactRequest",
    "SearchContactResponse",
    "TicketIdRequest",
    "TicketListResponse",
    "TicketResponse",
]
