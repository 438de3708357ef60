"""
Ticket-related API schemas.
"""

from typing import List, Optional

from pydantic import Field

from .common import BaseResponse, CamelModel


class ContactIdRequest(CamelModel):
    """Request keyed by a CRM contact id."""

    contact_id: Optional[str] = None


class TicketResponse(CamelModel):
    """Ticket response schema."""

    id: str
    ticket_id: str
    subject: str
    status: str
    priority: str
    created_date: Optional[str] = None
    last_modified: Optional[str] = None
    pipeline_stage: Optional[str] = None
    status_label: str = Field(..., description="Customer-facing pipeline stage label")


class TicketListResponse(BaseResponse):
    """Ticket list response schema."""

    tickets: List[TicketResponse]
    count: int


class CreatedTicketResponse(CamelModel):
    """Summary of a newly created ticket."""

    id: str
    subject: str


class CreateTicketResponse(BaseResponse):
    """Ticket creation response schema."""

    ticket: CreatedTicketResponse
