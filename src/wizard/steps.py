"""
Wizard steps and the view rendered for each of them.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Union

from src.api.schemas.contact import ContactResponse, SearchContactResponse
from src.api.schemas.deal import DealResponse
from src.api.schemas.message import AttachmentResponse, MessageResponse
from src.api.schemas.ticket import TicketResponse
from src.domain.value_objects.identification_method import IdentificationMethod


class WizardStep(IntEnum):
    """Steps of the ticket intake wizard."""

    IDENTIFY = 1
    TICKETS = 2
    DEALS = 3
    TICKET_CREATION = 4
    SUCCESS = 5
    TICKET_DETAILS = 6


@dataclass
class FormData:
    """Identification input."""

    method: IdentificationMethod = IdentificationMethod.PHONE
    value: str = ""


@dataclass
class IdentifyView:
    form_data: FormData
    auto_submitted: bool
    is_loading: bool
    search_result: Optional[SearchContactResponse] = None
    email_suggestions: List[str] = field(default_factory=list)
    error: Optional[str] = None
    step: WizardStep = field(default=WizardStep.IDENTIFY, init=False)


@dataclass
class TicketsView:
    contact: ContactResponse
    tickets: List[TicketResponse]
    step: WizardStep = field(default=WizardStep.TICKETS, init=False)


@dataclass
class DealsView:
    deals: List[DealResponse]
    can_go_back_to_tickets: bool
    step: WizardStep = field(default=WizardStep.DEALS, init=False)


@dataclass
class TicketCreationView:
    """Ticket form; admin fields are shown only in admin mode."""

    selected_deal: Optional[DealResponse]
    is_submitting: bool
    admin_mode: bool
    max_files: int
    ticket_error: Optional[str] = None
    step: WizardStep = field(default=WizardStep.TICKET_CREATION, init=False)


@dataclass
class SuccessView:
    contact: ContactResponse
    step: WizardStep = field(default=WizardStep.SUCCESS, init=False)


@dataclass
class TicketDetailsView:
    ticket: TicketResponse
    messages: List[MessageResponse]
    attachments: List[AttachmentResponse]
    step: WizardStep = field(default=WizardStep.TICKET_DETAILS, init=False)


StepView = Union[
    IdentifyView,
    TicketsView,
    DealsView,
    TicketCreationView,
    SuccessView,
    TicketDetailsView,
]
