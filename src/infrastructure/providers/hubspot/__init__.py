"""
HubSpot provider package.
"""

from .client import HubSpotClient
from .models import HubSpotAssociation, HubSpotObject, HubSpotSearchRequest
from .provider import HubSpotProvider
from .transformer import HubSpotTransformer

__all__ = [
    "HubSpotProvider",
    "HubSpotClient",
    "HubSpotTransformer",
    "HubSpotAssociation",
    "HubSpotObject",
    "HubSpotSearchRequest",
]
