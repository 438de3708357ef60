"""
API package.
"""

from .app import create_app
from .dependencies import *
from .middleware import *
from .routes import *
from .schemas import *

__all__ = [
    "create_app",
    # Dependencies
    "CRMProviderDep",
    "CreateTicketUseCaseDep",
    "GetAttachmentsUseCaseDep",
    "GetTicketMessagesUseCaseDep",
    "SearchContactUseCaseDep",
    "SearchDealsUseCaseDep",
    "SearchTicketsUseCaseDep",
    # Middleware
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
    # Routes
    "contacts_router",
    "deals_router",
    "health_router",
    "tickets_router",
    # Schemas
    "BaseResponse",
    "ErrorResponse",
    "SearchContactRequest",
    "SearchContactResponse",
    "TicketListResponse",
    "DealListResponse",
    "CreateTicketResponse",
    "MessageListResponse",
    "AttachmentListResponse",
]
