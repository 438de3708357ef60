"""
Ticket status value object.
"""

from enum import Enum

UNKNOWN_STATUS_LABEL = "Statut inconnu"


class TicketStatus(str, Enum):
    """Known pipeline stages of the support ticket pipeline."""

    NEW = "1"
    WAITING_ON_CONTACT = "2"
    IN_PROGRESS = "573356530"
    INTERVENTION_PLANNED = "573359340"
    INTERVENTION_DONE = "573356532"
    RESOLVED = "4"

    @property
    def label(self) -> str:
        """Customer-facing label."""
        return _STATUS_LABELS[self]

    @classmethod
    def label_for(cls, stage: str) -> str:
        """Label for any pipeline stage code, known or not."""
        try:
            return cls(stage).label
        except ValueError:
            return UNKNOWN_STATUS_LABEL


_STATUS_LABELS = {
    TicketStatus.NEW: "Nous allons bientôt traiter votre demande",
    TicketStatus.WAITING_ON_CONTACT: "Nous vous demandons plus d'informations",
    TicketStatus.IN_PROGRESS: "En cours de traitement",
    TicketStatus.INTERVENTION_PLANNED: "Intervention planifiée",
    TicketStatus.INTERVENTION_DONE: "Intervention effectuée",
    TicketStatus.RESOLVED: "Résolu",
}
