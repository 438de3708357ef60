"""Search deals use case."""

from datetime import datetime, timezone
from typing import List, Tuple

from src.application.interfaces.crm import CRMProviderInterface
from src.application.services.timestamps import parse_timestamp
from src.config.logging import get_logger
from src.domain.entities.deal import Deal
from src.domain.exceptions.validation_error import RequiredFieldError

logger = get_logger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _installation_sort_key(deal: Deal) -> Tuple[int, float]:
    # Most recent installation first, deals never installed last
    installed_at = parse_timestamp(deal.installation_done_date)
    if installed_at is None:
        return (1, 0.0)
    return (0, -(installed_at - _EPOCH).total_seconds())


class SearchDealsUseCase:
    """Use case for listing the deals a contact can open a ticket on."""

    def __init__(self, crm: CRMProviderInterface):
        self.crm = crm

    async def execute(self, contact_id: str) -> List[Deal]:
        if not contact_id:
            raise RequiredFieldError("contactId", "Contact ID is required")

        deals = await self.crm.list_contact_deals(contact_id)
        eligible = sorted(
            (deal for deal in deals if deal.is_eligible()),
            key=_installation_sort_key,
        )

        logger.info(
            "Deals found",
            contact_id=contact_id,
            total=len(deals),
            eligible=len(eligible),
        )
        return eligible
