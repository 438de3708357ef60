"""Ticket domain entity."""

from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects.ticket_status import TicketStatus


@dataclass
class Ticket:
    """Support ticket as seen by the customer.

    Tickets are read-only once created; their pipeline stage can change in the
    CRM between fetches, so callers re-fetch to observe status changes.
    """

    id: str
    ticket_id: str
    subject: str = "Sans titre"
    status: str = "unknown"
    priority: str = "medium"
    created_date: Optional[str] = None
    last_modified: Optional[str] = None
    pipeline_stage: Optional[str] = None

    def __post_init__(self):
        if self.pipeline_stage is None:
            self.pipeline_stage = self.status

    @property
    def status_label(self) -> str:
        """Customer-facing label of the pipeline stage."""
        return TicketStatus.label_for(self.pipeline_stage or self.status)
