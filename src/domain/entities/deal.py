"""Deal domain entity."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Deal:
    """Installation project sold to a contact."""

    id: str
    deal_id: str
    name: str = "Sans nom"
    stage: str = "Unknown"
    amount: str = "N/A"
    address: str = ""
    postcode: str = ""
    installation_done_date: Optional[str] = None
    products: List[str] = field(default_factory=list)
    is_quote_signed: str = "0"
    is_closed_lost: str = "false"
    close_date: Optional[str] = None
    created_date: Optional[str] = None
    pipeline: str = "default"
    deal_type: Optional[str] = None

    def is_eligible(self) -> bool:
        """Only signed, still-open deals can carry a support ticket."""
        return self.is_quote_signed == "1" and self.is_closed_lost != "true"
