"""
Providers package.
"""

from .hubspot.provider import HubSpotProvider

__all__ = [
    "HubSpotProvider",
]
