"""Ticket-related API endpoints."""

from typing import Annotated, List, Optional

import structlog
from fastapi import APIRouter, File, Form, UploadFile

from src.api.dependencies import (
    CreateTicketUseCaseDep,
    GetAttachmentsUseCaseDep,
    GetTicketMessagesUseCaseDep,
    SearchTicketsUseCaseDep,
)
from src.api.schemas.message import (
    AttachmentIdsRequest,
    AttachmentListResponse,
    AttachmentResponse,
    MessageListResponse,
    MessageResponse,
    TicketIdRequest,
)
from src.api.schemas.ticket import (
    ContactIdRequest,
    CreatedTicketResponse,
    CreateTicketResponse,
    TicketListResponse,
    TicketResponse,
)
from src.application.interfaces.crm import AdminNote, FileUpload
from src.application.use_cases.create_ticket import CreateTicketRequest
from src.domain.exceptions.validation_error import TooManyFilesError

logger = structlog.get_logger()
router = APIRouter(tags=["tickets"])


@router.post("/search-tickets", response_model=TicketListResponse)
async def search_tickets(payload: ContactIdRequest, use_case: SearchTicketsUseCaseDep):
    """List the tickets of a contact."""
    tickets = await use_case.execute(payload.contact_id)

    return TicketListResponse(
        tickets=[TicketResponse.model_validate(ticket) for ticket in tickets],
        count=len(tickets),
    )


@router.post("/create-ticket", response_model=CreateTicketResponse)
async def create_ticket(
    use_case: CreateTicketUseCaseDep,
    contact_id: Annotated[Optional[str], Form(alias="contactId")] = None,
    subject: Annotated[Optional[str], Form()] = None,
    description: Annotated[Optional[str], Form()] = None,
    deal_id: Annotated[Optional[str], Form(alias="dealId")] = None,
    admin_email: Annotated[Optional[str], Form(alias="adminEmail")] = None,
    admin_notes: Annotated[Optional[str], Form(alias="adminNotes")] = None,
    files: Annotated[Optional[List[UploadFile]], File()] = None,
):
    """Open a ticket with its description, photos and optional agent notes."""
    files = files or []
    if len(files) > use_case.max_files:
        raise TooManyFilesError(len(files), use_case.max_files)

    uploads = [
        FileUpload(
            name=upload.filename or "attachment",
            content=await upload.read(),
            content_type=upload.content_type or "application/octet-stream",
        )
        for upload in files
    ]

    admin_note = None
    if admin_email and admin_email.strip() and admin_notes and admin_notes.strip():
        admin_note = AdminNote(email=admin_email.strip(), notes=admin_notes)

    result = await use_case.execute(
        CreateTicketRequest(
            contact_id=contact_id,
            subject=subject,
            description=description,
            deal_id=deal_id or None,
            files=uploads,
            admin_note=admin_note,
        )
    )

    logger.info(
        "Ticket created from portal",
        ticket_id=result.ticket_id,
        attachments=len(result.attachment_ids),
    )

    return CreateTicketResponse(
        ticket=CreatedTicketResponse(id=result.ticket_id, subject=result.subject)
    )


@router.post("/get-ticket-messages", response_model=MessageListResponse)
async def get_ticket_messages(
    payload: TicketIdRequest, use_case: GetTicketMessagesUseCaseDep
):
    """Read the conversation of a ticket, oldest message first."""
    messages = await use_case.execute(payload.ticket_id)

    return MessageListResponse(
        messages=[MessageResponse.model_validate(message) for message in messages],
        count=len(messages),
    )


@router.post("/get-hubspot-attachments", response_model=AttachmentListResponse)
async def get_hubspot_attachments(
    payload: AttachmentIdsRequest, use_case: GetAttachmentsUseCaseDep
):
    """Resolve message attachment ids to displayable photos."""
    attachments = await use_case.execute(payload.attachment_ids)

    return AttachmentListResponse(
        attachments=[AttachmentResponse.model_validate(a) for a in attachments],
        count=len(attachments),
    )
