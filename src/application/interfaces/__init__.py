"""
Application interfaces package.
"""

from .crm import (
    AdminNote,
    ContactDetails,
    CRMProviderInterface,
    EmailEngagementRequest,
    FileUpload,
)

__all__ = [
    "AdminNote",
    "ContactDetails",
    "CRMProviderInterface",
    "EmailEngagementRequest",
    "FileUpload",
]
