"""Contact identification endpoint."""

import structlog
from fastapi import APIRouter

from src.api.dependencies import SearchContactUseCaseDep
from src.api.schemas.contact import (
    ContactResponse,
    SearchContactRequest,
    SearchContactResponse,
)
from src.application.use_cases.search_contact import (
    SearchContactRequest as SearchContactCommand,
)

logger = structlog.get_logger()
router = APIRouter(tags=["contacts"])


@router.post("/search-contact", response_model=SearchContactResponse)
async def search_contact(
    payload: SearchContactRequest, use_case: SearchContactUseCaseDep
):
    """Find the CRM contact behind a phone number or email address."""
    result = await use_case.execute(
        SearchContactCommand(method=payload.method, value=payload.value)
    )

    if not result.found:
        return SearchContactResponse(found=False, message=result.message)

    return SearchContactResponse(
        found=True, contact=ContactResponse.model_validate(result.contact)
    )
