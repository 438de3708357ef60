"""Create ticket use case."""

from dataclasses import dataclass, field
from typing import List, Optional

from src.application.interfaces.crm import (
    AdminNote,
    ContactDetails,
    CRMProviderInterface,
    EmailEngagementRequest,
    FileUpload,
)
from src.application.services.ticket_content import (
    build_admin_note_html,
    description_to_html,
)
from src.config.logging import get_logger
from src.config.settings import settings
from src.domain.exceptions.crm_error import CRMAPIError
from src.domain.exceptions.validation_error import (
    RequiredFieldError,
    TooManyFilesError,
)
from src.infrastructure.monitoring.metrics import (
    record_attachment_upload,
    record_error,
    record_ticket_creation,
)

logger = get_logger(__name__)


@dataclass
class CreateTicketRequest:
    """Request for opening a support ticket."""

    contact_id: Optional[str]
    subject: Optional[str]
    description: Optional[str]
    deal_id: Optional[str] = None
    files: List[FileUpload] = field(default_factory=list)
    admin_note: Optional[AdminNote] = None


@dataclass
class CreateTicketResult:
    """Result of ticket creation."""

    ticket_id: str
    subject: str
    attachment_ids: List[str] = field(default_factory=list)
    email_id: Optional[str] = None
    note_id: Optional[str] = None


class CreateTicketUseCase:
    """Use case for creating a ticket with its first email and attachments.

    Steps run in order and are not rolled back: files are uploaded one by one
    (failed uploads are skipped), the ticket is created, then the description
    is recorded as an inbound email and, for agents, an internal note is added.
    Only upload validation and ticket creation failures abort the request.
    """

    def __init__(
        self,
        crm: CRMProviderInterface,
        max_files: Optional[int] = None,
    ):
        self.crm = crm
        self.max_files = max_files or settings.MAX_TICKET_ATTACHMENTS

    async def execute(self, request: CreateTicketRequest) -> CreateTicketResult:
        self._validate(request)

        logger.info(
            "Creating ticket",
            contact_id=request.contact_id,
            deal_id=request.deal_id,
            files=len(request.files),
            admin=request.admin_note is not None,
        )

        attachment_ids = await self._upload_files(request.files)

        ticket_id = await self.crm.create_ticket(
            request.contact_id, request.subject, request.deal_id
        )
        record_ticket_creation(
            with_deal=bool(request.deal_id), admin=request.admin_note is not None
        )

        email_id = await self._create_first_email(request, ticket_id, attachment_ids)

        note_id = None
        if request.admin_note is not None:
            note_id = await self._create_admin_note(ticket_id, request.admin_note)

        logger.info(
            "Ticket created",
            ticket_id=ticket_id,
            contact_id=request.contact_id,
            attachments=len(attachment_ids),
            email_created=email_id is not None,
            note_created=note_id is not None,
        )

        return CreateTicketResult(
            ticket_id=ticket_id,
            subject=request.subject,
            attachment_ids=attachment_ids,
            email_id=email_id,
            note_id=note_id,
        )

    def _validate(self, request: CreateTicketRequest) -> None:
        if not request.contact_id:
            raise RequiredFieldError("contactId", "Contact ID is required")
        if not request.subject or not request.subject.strip():
            raise RequiredFieldError("subject", "Subject is required")
        if not request.description or not request.description.strip():
            raise RequiredFieldError("description", "Description is required")
        if len(request.files) > self.max_files:
            raise TooManyFilesError(len(request.files), self.max_files)

    async def _upload_files(self, files: List[FileUpload]) -> List[str]:
        attachment_ids: List[str] = []

        for file in files:
            try:
                file_id = await self.crm.upload_file(file)
            except CRMAPIError as e:
                record_attachment_upload("failed")
                logger.warning(
                    "Skipping file that failed to upload",
                    file_name=file.name,
                    size=file.size,
                    status_code=e.status_code,
                    error=e.message,
                )
                continue

            record_attachment_upload("uploaded")
            attachment_ids.append(file_id)

        return attachment_ids

    async def _create_first_email(
        self, request: CreateTicketRequest, ticket_id: str, attachment_ids: List[str]
    ) -> Optional[str]:
        try:
            sender = await self.crm.get_contact_details(request.contact_id)
        except CRMAPIError as e:
            logger.warning(
                "Using fallback sender for ticket email",
                contact_id=request.contact_id,
                error=e.message,
            )
            sender = ContactDetails()

        try:
            return await self.crm.create_email_engagement(
                EmailEngagementRequest(
                    contact_id=request.contact_id,
                    ticket_id=ticket_id,
                    subject=request.subject,
                    html=description_to_html(request.description),
                    sender=sender,
                    attachment_ids=attachment_ids,
                )
            )
        except CRMAPIError as e:
            record_error("email_engagement", "create_ticket")
            logger.error(
                "Failed to create ticket email",
                ticket_id=ticket_id,
                status_code=e.status_code,
                error=e.message,
                details=e.details,
            )
            return None

    async def _create_admin_note(self, ticket_id: str, admin_note: AdminNote) -> Optional[str]:
        try:
            return await self.crm.create_note(
                ticket_id, build_admin_note_html(admin_note.email, admin_note.notes)
            )
        except CRMAPIError as e:
            record_error("admin_note", "create_ticket")
            logger.error(
                "Failed to create admin note",
                ticket_id=ticket_id,
                admin_email=admin_note.email,
                status_code=e.status_code,
                error=e.message,
                details=e.details,
            )
            return None
