"""Get ticket messages use case."""

from datetime import datetime, timezone
from typing import List, Tuple

from src.application.interfaces.crm import CRMProviderInterface
from src.application.services.timestamps import parse_timestamp
from src.config.logging import get_logger
from src.domain.entities.message import Message
from src.domain.exceptions.validation_error import RequiredFieldError

logger = get_logger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _chronological_key(message: Message) -> Tuple[int, float]:
    sent_at = parse_timestamp(message.timestamp)
    if sent_at is None:
        return (1, 0.0)
    return (0, (sent_at - _EPOCH).total_seconds())


class GetTicketMessagesUseCase:
    """Use case for reading the conversation of a ticket."""

    def __init__(self, crm: CRMProviderInterface):
        self.crm = crm

    async def execute(self, ticket_id: str) -> List[Message]:
        if not ticket_id:
            raise RequiredFieldError("ticketId", "Ticket ID is required")

        messages = await self.crm.list_ticket_messages(ticket_id)
        conversation = sorted(
            (message for message in messages if message.is_displayable()),
            key=_chronological_key,
        )

        logger.info(
            "Ticket messages fetched",
            ticket_id=ticket_id,
            total=len(messages),
            displayed=len(conversation),
        )
        return conversation
