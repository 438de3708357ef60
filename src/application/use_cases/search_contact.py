"""Search contact use case."""

from dataclasses import dataclass
from typing import Optional

from src.application.interfaces.crm import CRMProviderInterface
from src.config.logging import get_logger
from src.config.settings import settings
from src.domain.entities.contact import Contact
from src.domain.exceptions.validation_error import (
    InvalidFormatError,
    RequiredFieldError,
)
from src.domain.value_objects.identification_method import IdentificationMethod
from src.domain.value_objects.phone_number import to_international

logger = get_logger(__name__)


@dataclass
class SearchContactRequest:
    """Request for finding the contact behind an identification."""

    method: Optional[str]
    value: Optional[str]


@dataclass
class SearchContactResult:
    """Result of a contact search."""

    found: bool
    contact: Optional[Contact] = None
    message: Optional[str] = None


class SearchContactUseCase:
    """Use case for resolving a phone number or email address to a CRM contact."""

    def __init__(self, crm: CRMProviderInterface, country_code: Optional[str] = None):
        self.crm = crm
        self.country_code = country_code or settings.DEFAULT_PHONE_COUNTRY_CODE

    async def execute(self, request: SearchContactRequest) -> SearchContactResult:
        if not request.method or not request.value:
            raise RequiredFieldError(
                "method", "Search method and value are required"
            )

        try:
            method = IdentificationMethod(request.method)
        except ValueError:
            raise InvalidFormatError("method", "'phone' or 'email'")

        value = request.value.strip()
        if method == IdentificationMethod.PHONE:
            value = to_international(value, self.country_code)

        logger.info("Searching contact", method=method.value)

        contact = await self.crm.find_contact(method.crm_property, value)
        if contact is None:
            return SearchContactResult(
                found=False,
                message=f"No contact found with the provided {method.display_name}",
            )

        logger.info("Contact found", contact_id=contact.contact_id)
        return SearchContactResult(found=True, contact=contact)
