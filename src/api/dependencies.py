"""
FastAPI dependency injection container.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends

from src.application.interfaces.crm import ContactDetails, CRMProviderInterface
from src.application.use_cases.create_ticket import CreateTicketUseCase
from src.application.use_cases.get_attachments import GetAttachmentsUseCase
from src.application.use_cases.get_ticket_messages import GetTicketMessagesUseCase
from src.application.use_cases.search_contact import SearchContactUseCase
from src.application.use_cases.search_deals import SearchDealsUseCase
from src.application.use_cases.search_tickets import SearchTicketsUseCase
from src.config.logging import get_logger
from src.config.settings import settings
from src.infrastructure.providers.hubspot.provider import HubSpotProvider

logger = get_logger(__name__)


# Provider Dependencies
async def get_crm_provider() -> AsyncGenerator[CRMProviderInterface, None]:
    """Get a HubSpot provider for the duration of a request."""
    provider = HubSpotProvider(
        access_token=settings.HUBSPOT_ACCESS_TOKEN,
        inbox=ContactDetails(
            email=settings.SUPPORT_INBOX_EMAIL,
            first_name=settings.SUPPORT_INBOX_FIRST_NAME,
            last_name=settings.SUPPORT_INBOX_LAST_NAME,
        ),
        files_folder_id=settings.HUBSPOT_FILES_FOLDER_ID,
        file_ttl=settings.HUBSPOT_FILE_TTL,
        base_url=settings.HUBSPOT_BASE_URL,
        timeout=settings.HUBSPOT_REQUEST_TIMEOUT,
        associations_page_size=settings.HUBSPOT_ASSOCIATIONS_PAGE_SIZE,
    )
    try:
        yield provider
    finally:
        await provider.aclose()


CRMProviderDep = Annotated[CRMProviderInterface, Depends(get_crm_provider)]


# Use Case Dependencies
async def get_search_contact_use_case(crm: CRMProviderDep) -> SearchContactUseCase:
    return SearchContactUseCase(crm, country_code=settings.DEFAULT_PHONE_COUNTRY_CODE)


async def get_search_tickets_use_case(crm: CRMProviderDep) -> SearchTicketsUseCase:
    return SearchTicketsUseCase(crm)


async def get_search_deals_use_case(crm: CRMProviderDep) -> SearchDealsUseCase:
    return SearchDealsUseCase(crm)


async def get_create_ticket_use_case(crm: CRMProviderDep) -> CreateTicketUseCase:
    return CreateTicketUseCase(crm, max_files=settings.MAX_TICKET_ATTACHMENTS)


async def get_ticket_messages_use_case(crm: CRMProviderDep) -> GetTicketMessagesUseCase:
    return GetTicketMessagesUseCase(crm)


async def get_attachments_use_case(crm: CRMProviderDep) -> GetAttachmentsUseCase:
    return GetAttachmentsUseCase(crm)


# Type aliases for cleaner dependency injection
SearchContactUseCaseDep = Annotated[
    SearchContactUseCase, Depends(get_search_contact_use_case)
]
SearchTicketsUseCaseDep = Annotated[
    SearchTicketsUseCase, Depends(get_search_tickets_use_case)
]
SearchDealsUseCaseDep = Annotated[SearchDealsUseCase, Depends(get_search_deals_use_case)]
CreateTicketUseCaseDep = Annotated[
    CreateTicketUseCase, Depends(get_create_ticket_use_case)
]
GetTicketMessagesUseCaseDep = Annotated[
    GetTicketMessagesUseCase, Depends(get_ticket_messages_use_case)
]
GetAttachmentsUseCaseDep = Annotated[
    GetAttachmentsUseCase, Depends(get_attachments_use_case)
]
