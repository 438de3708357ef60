"""
Pytest configuration and fixtures.
"""

from typing import Callable, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from src.application.interfaces.crm import ContactDetails, CRMProviderInterface
from src.config.settings import Settings
from src.domain.entities.attachment import PhotoAttachment
from src.domain.entities.contact import Contact
from src.domain.entities.deal import Deal
from src.domain.entities.message import Message
from src.domain.entities.ticket import Ticket
from src.infrastructure.providers.hubspot.provider import HubSpotProvider

TEST_ACCESS_TOKEN = "pat-test-token"

SUPPORT_INBOX = ContactDetails(
    email="client@goensol.com", first_name="SAV", last_name="Ensol"
)


@pytest.fixture(scope="session")
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        HUBSPOT_ACCESS_TOKEN=TEST_ACCESS_TOKEN,
    )


@pytest.fixture
def mock_crm_provider():
    """Mock CRM provider implementation."""
    mock_provider = AsyncMock(spec=CRMProviderInterface)

    # Mock methods
    mock_provider.name = "MockCRM"
    mock_provider.find_contact = AsyncMock(return_value=None)
    mock_provider.list_contact_tickets = AsyncMock(return_value=[])
    mock_provider.list_contact_deals = AsyncMock(return_value=[])
    mock_provider.list_ticket_messages = AsyncMock(return_value=[])
    mock_provider.get_attachment = AsyncMock()
    mock_provider.upload_file = AsyncMock()
    mock_provider.create_ticket = AsyncMock(return_value="9001")
    mock_provider.get_contact_details = AsyncMock(return_value=ContactDetails())
    mock_provider.create_email_engagement = AsyncMock(return_value="7001")
    mock_provider.create_note = AsyncMock(return_value="8001")

    return mock_provider


@pytest.fixture
def client(mock_crm_provider):
    """Create test FastAPI client backed by the mock CRM provider."""
    from fastapi.testclient import TestClient

    from src.api.app import create_app
    from src.api.dependencies import get_crm_provider

    app = create_app()

    async def override_crm_provider():
        yield mock_crm_provider

    app.dependency_overrides[get_crm_provider] = override_crm_provider
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def hubspot_provider_factory() -> Callable[..., HubSpotProvider]:
    """Build HubSpot providers whose HTTP traffic goes to a handler function."""

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
        access_token: Optional[str] = TEST_ACCESS_TOKEN,
    ) -> HubSpotProvider:
        return HubSpotProvider(
            access_token=access_token,
            inbox=SUPPORT_INBOX,
            files_folder_id="250402102515",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    return factory


@pytest.fixture
def sample_contact():
    """Sample contact for testing."""
    return Contact(
        contact_id="101",
        full_name="Marie Dupont",
        first_name="Marie",
        email="marie@example.com",
        phone="+33612345678",
    )


@pytest.fixture
def sample_ticket():
    """Sample ticket for testing."""
    return Ticket(
        id="5001",
        ticket_id="5001",
        subject="Onduleur en panne",
        status="1",
        priority="HIGH",
        created_date="2024-03-01T09:00:00Z",
        last_modified="2024-03-02T10:00:00Z",
    )


@pytest.fixture
def sample_deal():
    """Sample signed deal for testing."""
    return Deal(
        id="3001",
        deal_id="3001",
        name="Installation solaire Dupont",
        stage="closedwon",
        amount="12 500 €",
        address="12 rue des Lilas",
        postcode="69003",
        installation_done_date="2024-02-15T00:00:00Z",
        products=["Panneaux", "Onduleur"],
        is_quote_signed="1",
        is_closed_lost="false",
    )


@pytest.fixture
def sample_message():
    """Sample client email for testing."""
    return Message(
        id="7001",
        timestamp="2024-03-01T09:00:00Z",
        text="Bonjour, mon onduleur affiche une erreur.",
        direction="INCOMING_EMAIL",
        subject="Onduleur en panne",
        attachment_ids=["4001"],
        html="Bonjour, mon onduleur affiche une erreur.",
    )


@pytest.fixture
def sample_photo():
    """Sample photo attachment for testing."""
    return PhotoAttachment(
        id="4001",
        name="onduleur",
        extension="jpg",
        type="IMG",
        size=20480,
        url="https://files.example.com/onduleur.jpg",
        created_at="2024-03-01T09:00:00Z",
    )
