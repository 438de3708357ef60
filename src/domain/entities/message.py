"""Ticket message domain entity."""

from dataclasses import dataclass, field
from typing import List, Optional

INCOMING_EMAIL = "INCOMING_EMAIL"
OUTGOING_EMAIL = "EMAIL"


@dataclass
class Message:
    """Email exchanged on a ticket, from the client or from the support team."""

    id: str
    timestamp: Optional[str] = None
    text: str = ""
    direction: str = "UNKNOWN"
    subject: str = ""
    attachment_ids: List[str] = field(default_factory=list)
    html: str = ""

    @property
    def is_client(self) -> bool:
        return self.direction == INCOMING_EMAIL

    @property
    def is_ensol(self) -> bool:
        return self.direction == OUTGOING_EMAIL

    def is_displayable(self) -> bool:
        """Only client and support team emails are shown."""
        return self.is_client or self.is_ensol
