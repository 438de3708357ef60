"""Search tickets use case."""

from typing import List

from src.application.interfaces.crm import CRMProviderInterface
from src.config.logging import get_logger
from src.domain.entities.ticket import Ticket
from src.domain.exceptions.validation_error import RequiredFieldError

logger = get_logger(__name__)


class SearchTicketsUseCase:
    """Use case for listing a contact's support tickets."""

    def __init__(self, crm: CRMProviderInterface):
        self.crm = crm

    async def execute(self, contact_id: str) -> List[Ticket]:
        if not contact_id:
            raise RequiredFieldError("contactId", "Contact ID is required")

        tickets = await self.crm.list_contact_tickets(contact_id)

        logger.info("Tickets found", contact_id=contact_id, count=len(tickets))
        return tickets
