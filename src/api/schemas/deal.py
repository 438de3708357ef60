"""
Deal-related API schemas.
"""

from typing import List, Optional

from .common import BaseResponse, CamelModel


class DealResponse(CamelModel):
    """Deal response schema."""

    id: str
    deal_id: str
    name: str
    stage: str
    amount: str
    address: str
    postcode: str
    installation_done_date: Optional[str] = None
    products: List[str]
    is_quote_signed: str
    is_closed_lost: str
    close_date: Optional[str] = None
    created_date: Optional[str] = None
    pipeline: str
    deal_type: Optional[str] = None


class DealListResponse(BaseResponse):
    """Deal list response schema."""

    deals: List[DealResponse]
    count: int
