"""Contact domain entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Contact:
    """CRM contact resolved from the identification step."""

    contact_id: str
    full_name: str
    first_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    def __post_init__(self):
        """Validate contact data."""
        if not self.contact_id:
            raise ValueError("Contact ID is required")

    @staticmethod
    def compose_full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
        """Join first and last name, falling back to a neutral label."""
        full_name = f"{first_name or ''} {last_name or ''}".strip()
        return full_name or "Contact"
