"""
Contact-related API schemas.
"""

from typing import Optional

from .common import CamelModel


class SearchContactRequest(CamelModel):
    """Contact search request schema."""

    method: Optional[str] = None
    value: Optional[str] = None


class ContactResponse(CamelModel):
    """Contact response schema."""

    contact_id: str
    full_name: str
    first_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class SearchContactResponse(CamelModel):
    """Contact search response schema."""

    found: bool
    contact: Optional[ContactResponse] = None
    message: Optional[str] = None
    error: Optional[str] = None
