"""Deal lookup endpoint."""

import structlog
from fastapi import APIRouter

from src.api.dependencies import SearchDealsUseCaseDep
from src.api.schemas.deal import DealListResponse, DealResponse
from src.api.schemas.ticket import ContactIdRequest

logger = structlog.get_logger()
router = APIRouter(tags=["deals"])


@router.post("/search-deals", response_model=DealListResponse)
async def search_deals(payload: ContactIdRequest, use_case: SearchDealsUseCaseDep):
    """List the signed, open deals of a contact, latest installation first."""
    deals = await use_case.execute(payload.contact_id)

    return DealListResponse(
        deals=[DealResponse.model_validate(deal) for deal in deals],
        count=len(deals),
    )
