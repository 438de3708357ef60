"""
HubSpot provider implementation.
"""

import time
from typing import List, Optional

import httpx
import structlog

from src.application.interfaces.crm import (
    ContactDetails,
    CRMProviderInterface,
    EmailEngagementRequest,
    FileUpload,
)
from src.domain.entities.attachment import PhotoAttachment
from src.domain.entities.contact import Contact
from src.domain.entities.deal import Deal
from src.domain.entities.message import Message
from src.domain.entities.ticket import Ticket
from src.domain.exceptions.crm_error import CRMAPIError
from src.infrastructure.providers.hubspot.client import HubSpotClient
from src.infrastructure.providers.hubspot.models import (
    CONTACT_PROPERTIES,
    DEAL_PROPERTIES,
    EMAIL_PROPERTIES,
    TICKET_PROPERTIES,
    AssociationType,
    HubSpotAssociation,
    HubSpotSearchRequest,
    ObjectType,
)
from src.infrastructure.providers.hubspot.transformer import HubSpotTransformer

logger = structlog.get_logger()


def _now_ms() -> int:
    return int(time.time() * 1000)


class HubSpotProvider(CRMProviderInterface):
    """HubSpot provider implementation."""

    @property
    def name(self) -> str:
        """Provider name."""
        return "HubSpot"

    def __init__(
        self,
        access_token: Optional[str],
        inbox: ContactDetails,
        files_folder_id: str,
        file_ttl: str = "P3M",
        base_url: str = "https://api.hubapi.com",
        timeout: float = 30.0,
        associations_page_size: int = 500,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.inbox = inbox
        self.files_folder_id = files_folder_id
        self.file_ttl = file_ttl
        self.client = HubSpotClient(
            access_token=access_token,
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
            associations_page_size=associations_page_size,
        )
        self.transformer = HubSpotTransformer()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def find_contact(self, property_name: str, value: str) -> Optional[Contact]:
        results = await self.client.search_objects(
            ObjectType.CONTACTS,
            HubSpotSearchRequest(
                property_name=property_name,
                value=value,
                properties=CONTACT_PROPERTIES,
            ),
        )
        if not results:
            logger.info("No contact matched", property_name=property_name)
            return None

        return self.transformer.transform_contact(results[0])

    async def list_contact_tickets(self, contact_id: str) -> List[Ticket]:
        ids = await self.client.get_association_ids(
            ObjectType.CONTACTS, contact_id, ObjectType.TICKETS
        )
        objects = await self.client.batch_read(ObjectType.TICKETS, ids, TICKET_PROPERTIES)

        logger.info("Fetched contact tickets", contact_id=contact_id, count=len(objects))
        return [self.transformer.transform_ticket(obj) for obj in objects]

    async def list_contact_deals(self, contact_id: str) -> List[Deal]:
        ids = await self.client.get_association_ids(
            ObjectType.CONTACTS, contact_id, ObjectType.DEALS
        )
        objects = await self.client.batch_read(ObjectType.DEALS, ids, DEAL_PROPERTIES)

        logger.info("Fetched contact deals", contact_id=contact_id, count=len(objects))
        return [self.transformer.transform_deal(obj) for obj in objects]

    async def list_ticket_messages(self, ticket_id: str) -> List[Message]:
        ids = await self.client.get_association_ids(
            ObjectType.TICKETS, ticket_id, ObjectType.EMAILS
        )
        objects = await self.client.batch_read(ObjectType.EMAILS, ids, EMAIL_PROPERTIES)

        logger.info("Fetched ticket emails", ticket_id=ticket_id, count=len(objects))
        return [self.transformer.transform_message(obj) for obj in objects]

    async def get_attachment(self, file_id: str) -> PhotoAttachment:
        data = await self.client.get_file(file_id)
        return self.transformer.transform_attachment(data)

    async def upload_file(self, file: FileUpload) -> str:
        data = await self.client.upload_file(
            name=file.name,
            content=file.content,
            content_type=file.content_type,
            folder_id=self.files_folder_id,
            ttl=self.file_ttl,
        )

        file_id = self.transformer.transform_upload_response(data)
        if not file_id:
            raise CRMAPIError(502, "Upload response has no file id", details=data)

        logger.info("Uploaded file", file_id=file_id, size=file.size)
        return file_id

    async def create_ticket(
        self, contact_id: str, subject: str, deal_id: Optional[str] = None
    ) -> str:
        associations = [
            HubSpotAssociation(contact_id, AssociationType.TICKET_TO_CONTACT)
        ]
        if deal_id:
            associations.append(HubSpotAssociation(deal_id, AssociationType.TICKET_TO_DEAL))

        ticket = await self.client.create_object(
            ObjectType.TICKETS,
            self.transformer.transform_ticket_properties(subject),
            associations,
        )

        logger.info(
            "Created ticket",
            ticket_id=ticket.id,
            contact_id=contact_id,
            deal_id=deal_id,
        )
        return ticket.id

    async def get_contact_details(self, contact_id: str) -> ContactDetails:
        contact = await self.client.get_object(
            ObjectType.CONTACTS, contact_id, ["email", "firstname", "lastname"]
        )
        return self.transformer.transform_contact_details(contact)

    async def create_email_engagement(self, request: EmailEngagementRequest) -> str:
        email = await self.client.create_object(
            ObjectType.EMAILS,
            self.transformer.transform_email_engagement_properties(
                request, self.inbox, _now_ms()
            ),
            [
                HubSpotAssociation(request.contact_id, AssociationType.EMAIL_TO_CONTACT),
                HubSpotAssociation(request.ticket_id, AssociationType.EMAIL_TO_TICKET),
            ],
        )

        logger.info(
            "Created email engagement",
            email_id=email.id,
            ticket_id=request.ticket_id,
            attachments=len(request.attachment_ids),
        )
        return email.id

    async def create_note(self, ticket_id: str, html: str) -> str:
        note = await self.client.create_object(
            ObjectType.NOTES,
            self.transformer.transform_note_properties(html, _now_ms()),
            [HubSpotAssociation(ticket_id, AssociationType.NOTE_TO_TICKET)],
        )

        logger.info("Created admin note", note_id=note.id, ticket_id=ticket_id)
        return note.id
