"""
Unit tests for the ticket intake wizard.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from src.api.schemas.contact import ContactResponse, SearchContactResponse
from src.api.schemas.deal import DealResponse
from src.api.schemas.message import AttachmentResponse, MessageResponse
from src.api.schemas.ticket import (
    CreatedTicketResponse,
    CreateTicketResponse,
    TicketResponse,
)
from src.application.interfaces.crm import FileUpload
from src.domain.exceptions.gateway_error import TicketSubmissionError
from src.domain.value_objects.identification_method import IdentificationMethod
from src.wizard import create_wizard
from src.wizard.entry import EntryParams
from src.wizard.gateway_client import SupportGatewayInterface
from src.wizard.machine import INVALID_PHONE_NUMBER, TicketWizard
from src.wizard.session import ContactSessionStore
from src.wizard.steps import (
    DealsView,
    IdentifyView,
    TicketCreationView,
    TicketDetailsView,
    WizardStep,
)

FOUND = SearchContactResponse(
    found=True,
    contact=ContactResponse(contact_id="101", full_name="Marie Dupont"),
)


def make_ticket(ticket_id="5001"):
    return TicketResponse(
        id=ticket_id,
        ticket_id=ticket_id,
        subject="Panne",
        status="1",
        priority="medium",
        status_label="Nous allons bientôt traiter votre demande",
    )


def make_deal(deal_id="3001"):
    return DealResponse(
        id=deal_id,
        deal_id=deal_id,
        name="Installation",
        stage="closedwon",
        amount="N/A",
        address="",
        postcode="",
        products=[],
        is_quote_signed="1",
        is_closed_lost="false",
        pipeline="default",
    )


@pytest.fixture
def gateway():
    mock_gateway = AsyncMock(spec=SupportGatewayInterface)
    mock_gateway.search_contact = AsyncMock(return_value=FOUND)
    mock_gateway.search_tickets = AsyncMock(return_value=[])
    mock_gateway.search_deals = AsyncMock(return_value=[])
    mock_gateway.get_ticket_messages = AsyncMock(return_value=[])
    mock_gateway.get_attachments = AsyncMock(return_value=[])
    mock_gateway.create_ticket = AsyncMock(
        return_value=CreateTicketResponse(
            ticket=CreatedTicketResponse(id="9001", subject="Panne")
        )
    )
    return mock_gateway


@pytest.fixture
def session_store():
    return ContactSessionStore(clock=lambda: 1_700_000_000_000)


@pytest.fixture
def wizard(gateway, session_store):
    return TicketWizard(gateway, session_store, auto_submit_timeout=0.2)


class TestIdentification:
    """Test the identification step and its routing."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tickets, deals, expected_step",
        [
            (3, 0, WizardStep.TICKETS),
            (3, 2, WizardStep.TICKETS),
            (0, 2, WizardStep.DEALS),
            (0, 0, WizardStep.TICKET_CREATION),
        ],
    )
    async def test_routing_table(self, wizard, gateway, tickets, deals, expected_step):
        gateway.search_tickets.return_value = [make_ticket(str(i)) for i in range(tickets)]
        gateway.search_deals.return_value = [make_deal(str(i)) for i in range(deals)]

        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        assert wizard.current_step == expected_step

    @pytest.mark.asyncio
    async def test_not_found_stays_on_identification(self, wizard, gateway, session_store):
        gateway.search_contact.return_value = SearchContactResponse(
            found=False, message="No contact found with the provided phone number"
        )

        result = await wizard.submit_identification(IdentificationMethod.PHONE, "06 12 34 56 78")

        assert result.found is False
        assert wizard.current_step == WizardStep.IDENTIFY
        assert isinstance(wizard.view, IdentifyView)
        assert wizard.view.search_result.message == (
            "No contact found with the provided phone number"
        )
        gateway.search_tickets.assert_not_called()
        assert session_store.load() is None

    @pytest.mark.asyncio
    async def test_waits_for_both_searches(self, wizard, gateway):
        """Test routing waits for a late ticket search instead of racing it."""

        async def late_tickets(contact_id):
            await asyncio.sleep(0.05)
            return [make_ticket()]

        gateway.search_tickets.side_effect = late_tickets
        gateway.search_deals.return_value = [make_deal()]

        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        assert wizard.current_step == WizardStep.TICKETS
        assert len(wizard.tickets) == 1
        assert len(wizard.deals) == 1

    @pytest.mark.asyncio
    async def test_found_saves_session(self, wizard, session_store):
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        session = session_store.load()
        assert session.method == IdentificationMethod.EMAIL
        assert session.value == "marie@example.com"

    @pytest.mark.asyncio
    async def test_blank_value_is_ignored(self, wizard, gateway):
        assert await wizard.submit_identification(IdentificationMethod.EMAIL, "  ") is None
        gateway.search_contact.assert_not_called()

    @pytest.mark.asyncio
    async def test_incomplete_phone_is_not_searched(self, wizard, gateway):
        wizard.update_identification(IdentificationMethod.PHONE, "0612")

        assert await wizard.submit_identification() is None

        gateway.search_contact.assert_not_awaited()
        assert wizard.current_step == WizardStep.IDENTIFY
        assert wizard.view.error == INVALID_PHONE_NUMBER

    @pytest.mark.asyncio
    async def test_typing_clears_phone_error(self, wizard, gateway):
        await wizard.submit_identification(IdentificationMethod.PHONE, "0612")

        wizard.update_identification(IdentificationMethod.PHONE, "0612345678")
        await wizard.submit_identification()

        assert wizard.identification_error is None
        gateway.search_contact.assert_awaited_once_with("phone", "06 12 34 56 78")

    def test_update_identification_formats_phone(self, wizard):
        wizard.update_identification(IdentificationMethod.PHONE, "0612345678")
        assert wizard.form_data.value == "06 12 34 56 78"

        wizard.update_identification(IdentificationMethod.EMAIL, "marie@")
        assert wizard.form_data.value == "marie@"

    def test_email_suggestions(self, wizard):
        wizard.update_identification(IdentificationMethod.EMAIL, "marie@ho")
        assert wizard.view.email_suggestions == ["marie@hotmail.fr"]

        wizard.select_email_suggestion("marie@hotmail.fr")
        assert wizard.form_data.value == "marie@hotmail.fr"
        assert wizard.view.email_suggestions == []

    def test_no_suggestions_for_phone(self, wizard):
        wizard.update_identification(IdentificationMethod.EMAIL, "marie@")
        wizard.update_identification(IdentificationMethod.PHONE, "06")

        assert wizard.view.email_suggestions == []


class TestResume:
    """Test automatic identification on entry."""

    @pytest.mark.asyncio
    async def test_entry_params_take_precedence(self, wizard, gateway, session_store):
        session_store.save(IdentificationMethod.PHONE, "0611111111")

        replayed = await wizard.resume(
            EntryParams(IdentificationMethod.EMAIL, "marie@example.com")
        )

        assert replayed is True
        assert wizard.auto_submitted is True
        gateway.search_contact.assert_called_once_with("email", "marie@example.com")

    @pytest.mark.asyncio
    async def test_stored_session(self, wizard, gateway, session_store):
        session_store.save(IdentificationMethod.PHONE, "0612345678")

        await wizard.resume()

        gateway.search_contact.assert_called_once_with("phone", "0612345678")
        assert wizard.form_data.value == "0612345678"

    @pytest.mark.asyncio
    async def test_incomplete_phone_is_not_replayed(self, wizard, gateway):
        replayed = await wizard.resume(EntryParams(IdentificationMethod.PHONE, "0612"))

        assert replayed is False
        assert wizard.auto_submitted is False
        gateway.search_contact.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_nothing_to_resume(self, wizard, gateway):
        assert await wizard.resume() is False
        gateway.search_contact.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_clears_session(self, wizard, gateway, session_store):
        session_store.save(IdentificationMethod.PHONE, "0612345678")

        async def never_resolves(method, value):
            await asyncio.sleep(10)

        gateway.search_contact.side_effect = never_resolves

        await wizard.resume()

        assert wizard.auto_submitted is False
        assert wizard.is_loading is False
        assert wizard.current_step == WizardStep.IDENTIFY
        assert session_store.load() is None

    @pytest.mark.asyncio
    async def test_skip_auto_verification(self, wizard, session_store):
        await wizard.resume(EntryParams(IdentificationMethod.EMAIL, "marie@example.com"))

        wizard.skip_auto_verification()

        assert wizard.auto_submitted is False
        assert session_store.load() is None


class TestNavigation:
    """Test transitions between steps."""

    @pytest.mark.asyncio
    async def test_new_ticket_goes_to_deals_when_present(self, wizard, gateway):
        gateway.search_tickets.return_value = [make_ticket()]
        gateway.search_deals.return_value = [make_deal()]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        wizard.new_ticket()

        assert wizard.current_step == WizardStep.DEALS
        assert isinstance(wizard.view, DealsView)
        assert wizard.view.can_go_back_to_tickets is True

    @pytest.mark.asyncio
    async def test_new_ticket_skips_deals_when_absent(self, wizard, gateway):
        gateway.search_tickets.return_value = [make_ticket()]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        wizard.new_ticket()

        assert wizard.current_step == WizardStep.TICKET_CREATION

    @pytest.mark.asyncio
    async def test_select_and_back_to_deals(self, wizard, gateway):
        deal = make_deal()
        gateway.search_deals.return_value = [deal]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        wizard.select_deal(deal)
        assert wizard.current_step == WizardStep.TICKET_CREATION
        assert wizard.view.selected_deal == deal

        wizard.back_to_deals()
        assert wizard.current_step == WizardStep.DEALS
        assert wizard.selected_deal is None

    @pytest.mark.asyncio
    async def test_back_without_deals_or_tickets_restarts(self, wizard):
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        assert wizard.current_step == WizardStep.TICKET_CREATION

        wizard.back_to_deals()

        assert wizard.current_step == WizardStep.IDENTIFY
        assert wizard.search_result is None

    @pytest.mark.asyncio
    async def test_back_to_deals_falls_back_to_tickets(self, wizard, gateway):
        gateway.search_tickets.return_value = [make_ticket()]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        wizard.new_ticket()

        wizard.back_to_deals()

        assert wizard.current_step == WizardStep.TICKETS

    @pytest.mark.asyncio
    async def test_back_to_tickets_without_tickets_restarts(self, wizard, gateway):
        gateway.search_deals.return_value = [make_deal()]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        assert wizard.current_step == WizardStep.DEALS

        wizard.back_to_tickets()

        assert wizard.current_step == WizardStep.IDENTIFY

    @pytest.mark.asyncio
    async def test_select_ticket_loads_conversation(self, wizard, gateway):
        ticket = make_ticket()
        gateway.search_tickets.return_value = [ticket]
        gateway.get_ticket_messages.return_value = [
            MessageResponse(
                id="1", text="a", html="a", direction="INCOMING_EMAIL", subject="",
                attachment_ids=["4001", "4002"], is_client=True, is_ensol=False,
            ),
            MessageResponse(
                id="2", text="b", html="b", direction="EMAIL", subject="",
                attachment_ids=["4002"], is_client=False, is_ensol=True,
            ),
        ]
        photo = AttachmentResponse(
            id="4001", name="p", extension="jpg", type="IMG", size=1, url="https://f/p.jpg"
        )
        gateway.get_attachments.return_value = [photo]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        await wizard.select_ticket(ticket)

        gateway.get_ticket_messages.assert_called_once_with("5001")
        gateway.get_attachments.assert_called_once_with(["4001", "4002"])
        assert wizard.current_step == WizardStep.TICKET_DETAILS
        view = wizard.view
        assert isinstance(view, TicketDetailsView)
        assert view.attachments == [photo]

        wizard.back_from_ticket_details()
        assert wizard.current_step == WizardStep.TICKETS
        assert wizard.selected_ticket is None

    @pytest.mark.asyncio
    async def test_disconnect(self, wizard, session_store):
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        wizard.disconnect()

        assert wizard.current_step == WizardStep.IDENTIFY
        assert session_store.load() is None
        assert wizard.form_data.value == ""


class TestTicketSubmission:
    """Test ticket submission from the creation step."""

    @pytest.mark.asyncio
    async def test_success_goes_to_success_step(self, wizard, gateway):
        deal = make_deal()
        gateway.search_deals.return_value = [deal]
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        wizard.select_deal(deal)
        photo = FileUpload(name="p.jpg", content=b"x", content_type="image/jpeg")

        created = await wizard.submit_ticket("Panne", "Ne démarre plus", [photo])

        assert created is True
        assert wizard.current_step == WizardStep.SUCCESS
        assert wizard.is_submitting_ticket is False
        kwargs = gateway.create_ticket.call_args.kwargs
        assert kwargs["contact_id"] == "101"
        assert kwargs["deal_id"] == "3001"
        assert kwargs["files"] == [photo]
        assert kwargs["admin_note"] is None

    @pytest.mark.asyncio
    async def test_failure_stays_on_form_with_error(self, wizard, gateway):
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        gateway.create_ticket.side_effect = TicketSubmissionError("Failed to create tickets", 400)

        created = await wizard.submit_ticket("Panne", "Ne démarre plus")

        assert created is False
        assert wizard.current_step == WizardStep.TICKET_CREATION
        assert wizard.is_submitting_ticket is False
        view = wizard.view
        assert isinstance(view, TicketCreationView)
        assert view.ticket_error == "Failed to create tickets"

    @pytest.mark.asyncio
    async def test_too_many_files(self, wizard, gateway):
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        photo = FileUpload(name="p.jpg", content=b"x")

        created = await wizard.submit_ticket("Panne", "x", [photo] * 7)

        assert created is False
        assert "At most 6 files" in wizard.ticket_error
        gateway.create_ticket.assert_not_called()

    @pytest.mark.asyncio
    async def test_admin_notes_only_in_admin_mode(self, gateway, session_store):
        customer = TicketWizard(gateway, session_store, admin_mode=False)
        agent = TicketWizard(gateway, session_store, admin_mode=True)

        for wizard in (customer, agent):
            await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
            await wizard.submit_ticket(
                "Panne", "x", admin_email="jean@goensol.com", admin_notes="Client rappelé"
            )

        customer_call, agent_call = gateway.create_ticket.call_args_list
        assert customer_call.kwargs["admin_note"] is None
        assert agent_call.kwargs["admin_note"].email == "jean@goensol.com"
        assert agent.view.step == WizardStep.SUCCESS

    @pytest.mark.asyncio
    async def test_view_tickets_refreshes(self, wizard, gateway):
        await wizard.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")
        await wizard.submit_ticket("Panne", "x")
        gateway.search_tickets.return_value = [make_ticket()]

        await wizard.view_tickets()

        assert wizard.current_step == WizardStep.TICKETS
        assert gateway.search_tickets.call_count == 2
        assert len(wizard.tickets) == 1

    @pytest.mark.asyncio
    async def test_without_contact(self, wizard, gateway):
        created = await wizard.submit_ticket("Panne", "x")

        assert created is False
        assert wizard.ticket_error == "No contact ID available"
        gateway.create_ticket.assert_not_called()

    @pytest.mark.asyncio
    async def test_admin_email_is_pinned_to_company_domain(self, gateway, session_store):
        agent = TicketWizard(gateway, session_store, admin_mode=True)
        await agent.submit_identification(IdentificationMethod.EMAIL, "marie@example.com")

        await agent.submit_ticket("Panne", "x", admin_email="jean", admin_notes="RAS")
        await agent.submit_ticket(
            "Panne", "x", admin_email="jean@gmail.com", admin_notes="RAS"
        )

        first, second = gateway.create_ticket.call_args_list
        assert first.kwargs["admin_note"].email == "jean@goensol.com"
        assert second.kwargs["admin_note"] is None


class TestCreateWizard:
    def test_admin_capability_comes_from_entry(self, gateway):
        wizard = create_wizard(
            EntryParams(IdentificationMethod.PHONE, "0612345678", admin_mode=True),
            gateway=gateway,
        )

        assert wizard.admin_mode is True
        assert wizard.max_files == 6
        assert wizard.session_store.cookie_name == "ensol_contact_session"

    def test_defaults_to_customer_mode(self, gateway):
        assert create_wizard(gateway=gateway).admin_mode is False
