"""
Identification method value object.
"""

from enum import Enum


class IdentificationMethod(str, Enum):
    """How a customer identifies themselves on the intake form."""

    PHONE = "phone"
    EMAIL = "email"

    @property
    def crm_property(self) -> str:
        """CRM contact property queried for this method."""
        return {
            IdentificationMethod.PHONE: "mobilephone",
            IdentificationMethod.EMAIL: "email",
        }[self]

    @property
    def display_name(self) -> str:
        """Wording used in customer-facing messages."""
        return {
            IdentificationMethod.PHONE: "phone number",
            IdentificationMethod.EMAIL: "email address",
        }[self]
