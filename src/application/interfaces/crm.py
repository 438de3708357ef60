"""
CRM provider interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from src.domain.entities.attachment import PhotoAttachment
from src.domain.entities.contact import Contact
from src.domain.entities.deal import Deal
from src.domain.entities.message import Message
from src.domain.entities.ticket import Ticket


@dataclass
class FileUpload:
    """File attached to a new ticket."""

    name: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class AdminNote:
    """Internal note written by a support agent filling the form for a customer."""

    email: str
    notes: str


@dataclass
class ContactDetails:
    """Sender identity used on the ticket's first email."""

    email: str = "unknown@example.com"
    first_name: str = "Unknown"
    last_name: str = "Contact"


@dataclass
class EmailEngagementRequest:
    """Inbound email carrying the ticket description."""

    contact_id: str
    ticket_id: str
    subject: str
    html: str
    sender: ContactDetails
    attachment_ids: List[str] = field(default_factory=list)


class CRMProviderInterface(ABC):
    """Base interface for the CRM backing the support portal."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    async def find_contact(self, property_name: str, value: str) -> Optional[Contact]:
        """Find the first contact whose property equals the value."""
        pass

    @abstractmethod
    async def list_contact_tickets(self, contact_id: str) -> List[Ticket]:
        """Get the tickets associated to a contact."""
        pass

    @abstractmethod
    async def list_contact_deals(self, contact_id: str) -> List[Deal]:
        """Get the deals associated to a contact, unfiltered."""
        pass

    @abstractmethod
    async def list_ticket_messages(self, ticket_id: str) -> List[Message]:
        """Get the email engagements associated to a ticket, unfiltered."""
        pass

    @abstractmethod
    async def get_attachment(self, file_id: str) -> PhotoAttachment:
        """Get a single file's metadata."""
        pass

    @abstractmethod
    async def upload_file(self, file: FileUpload) -> str:
        """Upload a file to CRM storage and return its id."""
        pass

    @abstractmethod
    async def create_ticket(
        self, contact_id: str, subject: str, deal_id: Optional[str] = None
    ) -> str:
        """Create a ticket associated to the contact (and deal) and return its id."""
        pass

    @abstractmethod
    async def get_contact_details(self, contact_id: str) -> ContactDetails:
        """Get the contact's name and email."""
        pass

    @abstractmethod
    async def create_email_engagement(self, request: EmailEngagementRequest) -> str:
        """Create an inbound email on the contact and ticket and return its id."""
        pass

    @abstractmethod
    async def create_note(self, ticket_id: str, html: str) -> str:
        """Create an internal note on the ticket and return its id."""
        pass
