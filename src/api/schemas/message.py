"""
Ticket message and attachment API schemas.
"""

from typing import List, Optional

from .common import BaseResponse, CamelModel


class TicketIdRequest(CamelModel):
    """Request keyed by a CRM ticket id."""

    ticket_id: Optional[str] = None


class AttachmentIdsRequest(CamelModel):
    """Attachment lookup request schema."""

    attachment_ids: Optional[List[str]] = None


class MessageResponse(CamelModel):
    """Ticket message response schema."""

    id: str
    timestamp: Optional[str] = None
    text: str
    html: str
    direction: str
    subject: str
    attachment_ids: List[str]
    is_client: bool
    is_ensol: bool


class MessageListResponse(BaseResponse):
    """Ticket message list response schema."""

    messages: List[MessageResponse]
    count: int


class AttachmentResponse(CamelModel):
    """Photo attachment response schema."""

    id: str
    name: str
    extension: str
    type: str
    size: int
    url: str
    created_at: Optional[str] = None


class AttachmentListResponse(BaseResponse):
    """Attachment list response schema."""

    attachments: List[AttachmentResponse]
    count: int
