"""
Support Portal Gateway.

A stateless gateway and ticket intake wizard for the customer support portal,
backed by HubSpot.
"""

__version__ = "0.1.0"
__author__ = "Ensol Team"
__description__ = "Support Portal Gateway"

from .api import create_app
from .config import settings

__all__ = [
    "create_app",
    "settings",
]
