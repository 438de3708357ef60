"""
Portal-side client for the support gateway.

Contact, ticket, deal, message and attachment lookups never raise: failures
degrade to a not-found contact or an empty list so the wizard can keep going.
Only ticket creation reports failure, since the user has to be told.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
import structlog

from src.api.schemas.contact import SearchContactResponse
from src.api.schemas.deal import DealResponse
from src.api.schemas.message import AttachmentResponse, MessageResponse
from src.api.schemas.ticket import CreateTicketResponse, TicketResponse
from src.application.interfaces.crm import AdminNote, FileUpload
from src.domain.exceptions.gateway_error import TicketSubmissionError
from src.infrastructure.external.http_client import HTTPClient

logger = structlog.get_logger()

CONTACT_SEARCH_FAILED = "Failed to search for contact. Please try again."
TICKET_CREATION_FAILED = "Failed to create ticket"


class SupportGatewayInterface(ABC):
    """Gateway operations used by the ticket wizard."""

    @abstractmethod
    async def search_contact(self, method: str, value: str) -> SearchContactResponse:
        pass

    @abstractmethod
    async def search_tickets(self, contact_id: str) -> List[TicketResponse]:
        pass

    @abstractmethod
    async def search_deals(self, contact_id: str) -> List[DealResponse]:
        pass

    @abstractmethod
    async def create_ticket(
        self,
        contact_id: str,
        subject: str,
        description: str,
        deal_id: Optional[str] = None,
        files: Optional[List[FileUpload]] = None,
        admin_note: Optional[AdminNote] = None,
    ) -> CreateTicketResponse:
        pass

    @abstractmethod
    async def get_ticket_messages(self, ticket_id: str) -> List[MessageResponse]:
        pass

    @abstractmethod
    async def get_attachments(self, attachment_ids: List[str]) -> List[AttachmentResponse]:
        pass


class SupportGatewayClient(SupportGatewayInterface):
    """httpx client for the support gateway endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.http = HTTPClient(timeout=timeout, client=http_client)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def search_contact(self, method: str, value: str) -> SearchContactResponse:
        try:
            data = await self._post("search-contact", {"method": method, "value": value})
            return SearchContactResponse.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Contact search failed", method=method, error=str(e))
            return SearchContactResponse(found=False, error=CONTACT_SEARCH_FAILED)

    async def search_tickets(self, contact_id: str) -> List[TicketResponse]:
        try:
            data = await self._post("search-tickets", {"contactId": contact_id})
            return [TicketResponse.model_validate(t) for t in self._items(data, "tickets")]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Ticket search failed", contact_id=contact_id, error=str(e))
            return []

    async def search_deals(self, contact_id: str) -> List[DealResponse]:
        try:
            data = await self._post("search-deals", {"contactId": contact_id})
            return [DealResponse.model_validate(d) for d in self._items(data, "deals")]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Deal search failed", contact_id=contact_id, error=str(e))
            return []

    async def create_ticket(
        self,
        contact_id: str,
        subject: str,
        description: str,
        deal_id: Optional[str] = None,
        files: Optional[List[FileUpload]] = None,
        admin_note: Optional[AdminNote] = None,
    ) -> CreateTicketResponse:
        fields = {
            "contactId": contact_id,
            "subject": subject,
            "description": description,
        }
        if deal_id:
            fields["dealId"] = deal_id
        if admin_note is not None:
            fields["adminEmail"] = admin_note.email
            fields["adminNotes"] = admin_note.notes

        uploads = [
            ("files", (f.name, f.content, f.content_type)) for f in files or []
        ]

        try:
            response = await self.http.post(
                f"{self.base_url}/create-ticket", data=fields, files=uploads
            )
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Ticket creation request failed", error=str(e))
            raise TicketSubmissionError(TICKET_CREATION_FAILED)

        if not response.is_success or not data.get("success"):
            raise TicketSubmissionError(
                data.get("error") or TICKET_CREATION_FAILED, response.status_code
            )

        return CreateTicketResponse.model_validate(data)

    async def get_ticket_messages(self, ticket_id: str) -> List[MessageResponse]:
        try:
            data = await self._post("get-ticket-messages", {"ticketId": ticket_id})
            return [MessageResponse.model_validate(m) for m in self._items(data, "messages")]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Message fetch failed", ticket_id=ticket_id, error=str(e))
            return []

    async def get_attachments(self, attachment_ids: List[str]) -> List[AttachmentResponse]:
        if not attachment_ids:
            return []

        try:
            data = await self._post(
                "get-hubspot-attachments", {"attachmentIds": attachment_ids}
            )
            return [
                AttachmentResponse.model_validate(a)
                for a in self._items(data, "attachments")
            ]
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Attachment fetch failed", count=len(attachment_ids), error=str(e))
            return []

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = await self.http.post(f"{self.base_url}/{path}", data=payload)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _items(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
        if not data.get("success"):
            return []
        return data.get(key) or []
