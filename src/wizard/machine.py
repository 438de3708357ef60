"""
Ticket intake wizard state machine.
"""

import asyncio
from typing import List, Optional

import structlog

from src.api.schemas.contact import ContactResponse, SearchContactResponse
from src.api.schemas.deal import DealResponse
from src.api.schemas.message import AttachmentResponse, MessageResponse
from src.api.schemas.ticket import TicketResponse
from src.application.interfaces.crm import AdminNote, FileUpload
from src.domain.exceptions.gateway_error import TicketSubmissionError
from src.domain.exceptions.validation_error import TooManyFilesError
from src.domain.value_objects.email_address import (
    complete_admin_email,
    suggest_email_addresses,
)
from src.domain.value_objects.identification_method import IdentificationMethod
from src.domain.value_objects.phone_number import (
    format_phone_number,
    is_valid_phone_number,
)
from src.wizard.entry import EntryParams
from src.wizard.gateway_client import SupportGatewayInterface
from src.wizard.session import ContactSessionStore
from src.wizard.steps import (
    DealsView,
    FormData,
    IdentifyView,
    StepView,
    SuccessView,
    TicketCreationView,
    TicketDetailsView,
    TicketsView,
    WizardStep,
)

logger = structlog.get_logger()

NO_CONTACT_AVAILABLE = "No contact ID available"
INVALID_PHONE_NUMBER = "Please enter a 10-digit phone number"


def _is_submittable(method: IdentificationMethod, value: str) -> bool:
    if method == IdentificationMethod.PHONE:
        return is_valid_phone_number(value)
    return True


class TicketWizard:
    """Drives the six-step ticket intake flow from gateway results.

    ``go_to_step`` is the only place the current step changes. Admin mode is a
    capability handed in by the caller and never read from ambient state.
    """

    def __init__(
        self,
        gateway: SupportGatewayInterface,
        session_store: ContactSessionStore,
        admin_mode: bool = False,
        auto_submit_timeout: float = 10.0,
        max_files: int = 6,
        admin_email_domain: str = "goensol.com",
    ):
        self.gateway = gateway
        self.session_store = session_store
        self.admin_mode = admin_mode
        self.auto_submit_timeout = auto_submit_timeout
        self.max_files = max_files
        self.admin_email_domain = admin_email_domain

        self.current_step = WizardStep.IDENTIFY
        self.form_data = FormData()
        self.email_suggestions: List[str] = []
        self.identification_error: Optional[str] = None
        self.auto_submitted = False
        self.is_loading = False
        self.search_result: Optional[SearchContactResponse] = None
        self.tickets: List[TicketResponse] = []
        self.deals: List[DealResponse] = []
        self.selected_deal: Optional[DealResponse] = None
        self.selected_ticket: Optional[TicketResponse] = None
        self.messages: List[MessageResponse] = []
        self.attachments: List[AttachmentResponse] = []
        self.is_submitting_ticket = False
        self.ticket_error: Optional[str] = None

    @property
    def contact(self) -> Optional[ContactResponse]:
        if self.search_result is None or not self.search_result.found:
            return None
        return self.search_result.contact

    @property
    def view(self) -> StepView:
        """View model of the current step."""
        step = self.current_step
        if step == WizardStep.TICKETS:
            return TicketsView(contact=self.contact, tickets=self.tickets)
        if step == WizardStep.DEALS:
            return DealsView(
                deals=self.deals, can_go_back_to_tickets=bool(self.tickets)
            )
        if step == WizardStep.TICKET_CREATION:
            return TicketCreationView(
                selected_deal=self.selected_deal,
                is_submitting=self.is_submitting_ticket,
                admin_mode=self.admin_mode,
                max_files=self.max_files,
                ticket_error=self.ticket_error,
            )
        if step == WizardStep.SUCCESS:
            return SuccessView(contact=self.contact)
        if step == WizardStep.TICKET_DETAILS:
            return TicketDetailsView(
                ticket=self.selected_ticket,
                messages=self.messages,
                attachments=self.attachments,
            )
        return IdentifyView(
            form_data=self.form_data,
            auto_submitted=self.auto_submitted,
            is_loading=self.is_loading,
            search_result=self.search_result,
            email_suggestions=self.email_suggestions,
            error=self.identification_error,
        )

    def go_to_step(self, step: WizardStep) -> None:
        logger.debug("Wizard step", from_step=int(self.current_step), to_step=int(step))
        self.current_step = WizardStep(step)

    def update_identification(self, method: IdentificationMethod, value: str) -> None:
        """Update the identification input as the user types."""
        method = IdentificationMethod(method)
        self.identification_error = None
        if method == IdentificationMethod.PHONE:
            value = format_phone_number(value)
            self.email_suggestions = []
        else:
            self.email_suggestions = suggest_email_addresses(value)
        self.form_data = FormData(method=method, value=value)

    def select_email_suggestion(self, suggestion: str) -> None:
        self.form_data = FormData(method=IdentificationMethod.EMAIL, value=suggestion)
        self.email_suggestions = []

    async def submit_identification(
        self,
        method: Optional[IdentificationMethod] = None,
        value: Optional[str] = None,
    ) -> Optional[SearchContactResponse]:
        """Resolve the contact, then route on its tickets and deals.

        Blank input and incomplete phone numbers never reach the gateway.
        """
        method = IdentificationMethod(method or self.form_data.method)
        value = self.form_data.value if value is None else value
        if not value or not value.strip():
            return None
        if not _is_submittable(method, value):
            self.identification_error = INVALID_PHONE_NUMBER
            return None

        self.identification_error = None
        self.email_suggestions = []
        self.is_loading = True
        self.search_result = None
        try:
            result = await self.gateway.search_contact(method.value, value)
        finally:
            self.is_loading = False

        self.search_result = result
        if not result.found or result.contact is None:
            logger.info("Contact not found", method=method.value)
            return result

        self.session_store.save(method, value)

        contact_id = result.contact.contact_id
        self.tickets, self.deals = await asyncio.gather(
            self.gateway.search_tickets(contact_id),
            self.gateway.search_deals(contact_id),
        )

        if self.tickets:
            self.go_to_step(WizardStep.TICKETS)
        elif self.deals:
            self.go_to_step(WizardStep.DEALS)
        else:
            self.go_to_step(WizardStep.TICKET_CREATION)
        return result

    async def resume(self, entry: Optional[EntryParams] = None) -> bool:
        """Replay identification from the entry URL or a stored session.

        Returns whether an identification was replayed. A replay that does not
        complete within the auto-submit timeout is abandoned and the stored
        session is discarded.
        """
        if self.current_step != WizardStep.IDENTIFY:
            return False

        if entry is not None and entry.has_identification:
            method, value = entry.method, entry.value
        else:
            session = self.session_store.load()
            if session is None:
                return False
            method, value = session.method, session.value

        if not _is_submittable(method, value):
            logger.info("Skipping auto-submission of invalid input", method=method.value)
            return False

        self.form_data = FormData(method=method, value=value)
        self.auto_submitted = True
        logger.info("Auto-submitting identification", method=method.value)

        try:
            await asyncio.wait_for(
                self.submit_identification(method, value),
                timeout=self.auto_submit_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Auto-submission timed out, clearing session")
            self.auto_submitted = False
            self.session_store.clear()
        return True

    def new_ticket(self) -> None:
        if self.deals:
            self.go_to_step(WizardStep.DEALS)
        else:
            self.go_to_step(WizardStep.TICKET_CREATION)

    def select_deal(self, deal: DealResponse) -> None:
        self.selected_deal = deal
        self.go_to_step(WizardStep.TICKET_CREATION)

    async def select_ticket(self, ticket: TicketResponse) -> None:
        """Open a ticket with its conversation and photos."""
        self.selected_ticket = ticket
        self.messages = await self.gateway.get_ticket_messages(ticket.id)

        attachment_ids: List[str] = []
        for message in self.messages:
            for file_id in message.attachment_ids:
                if file_id not in attachment_ids:
                    attachment_ids.append(file_id)

        self.attachments = await self.gateway.get_attachments(attachment_ids)
        self.go_to_step(WizardStep.TICKET_DETAILS)

    def back_to_tickets(self) -> None:
        if self.tickets:
            self.go_to_step(WizardStep.TICKETS)
        else:
            self.try_again()

    def back_to_deals(self) -> None:
        self.selected_deal = None
        self.ticket_error = None
        if self.deals:
            self.go_to_step(WizardStep.DEALS)
        elif self.tickets:
            self.go_to_step(WizardStep.TICKETS)
        else:
            self.try_again()

    def back_from_ticket_details(self) -> None:
        self.selected_ticket = None
        self.messages = []
        self.attachments = []
        self.go_to_step(WizardStep.TICKETS)

    async def submit_ticket(
        self,
        subject: str,
        description: str,
        files: Optional[List[FileUpload]] = None,
        admin_email: Optional[str] = None,
        admin_notes: Optional[str] = None,
    ) -> bool:
        """Create the ticket; on failure stay on the form with ``ticket_error`` set."""
        files = files or []
        contact = self.contact
        if contact is None:
            logger.error(NO_CONTACT_AVAILABLE)
            self.ticket_error = NO_CONTACT_AVAILABLE
            return False

        if len(files) > self.max_files:
            self.ticket_error = str(TooManyFilesError(len(files), self.max_files))
            return False

        admin_note = None
        if self.admin_mode and admin_email and admin_notes and admin_notes.strip():
            email = complete_admin_email(admin_email.strip(), self.admin_email_domain)
            if email:
                admin_note = AdminNote(email=email, notes=admin_notes)

        self.is_submitting_ticket = True
        self.ticket_error = None
        try:
            response = await self.gateway.create_ticket(
                contact_id=contact.contact_id,
                subject=subject,
                description=description,
                deal_id=self.selected_deal.deal_id if self.selected_deal else None,
                files=files,
                admin_note=admin_note,
            )
        except TicketSubmissionError as e:
            logger.error("Ticket creation failed", error=e.message)
            self.ticket_error = e.message
            return False
        finally:
            self.is_submitting_ticket = False

        logger.info("Ticket created", ticket_id=response.ticket.id)
        self.go_to_step(WizardStep.SUCCESS)
        return True

    async def view_tickets(self) -> None:
        """Refresh the contact's tickets and list them."""
        contact = self.contact
        if contact is not None:
            self.tickets = await self.gateway.search_tickets(contact.contact_id)
        self.go_to_step(WizardStep.TICKETS)

    def try_again(self) -> None:
        """Reset the form and search results."""
        self.form_data = FormData()
        self.email_suggestions = []
        self.identification_error = None
        self.auto_submitted = False
        self.selected_deal = None
        self.selected_ticket = None
        self.is_submitting_ticket = False
        self.ticket_error = None
        self.search_result = None
        self.tickets = []
        self.deals = []
        self.messages = []
        self.attachments = []
        self.go_to_step(WizardStep.IDENTIFY)

    def disconnect(self) -> None:
        """Forget the remembered contact and start over."""
        self.session_store.clear()
        self.try_again()

    def skip_auto_verification(self) -> None:
        self.auto_submitted = False
        self.session_store.clear()
