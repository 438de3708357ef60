"""
API routes package.
"""

from .contacts import router as contacts_router
from .deals import router as deals_router
from .health import router as health_router
from .tickets import router as tickets_router

__all__ = [
    "contacts_router",
    "deals_router",
    "health_router",
    "tickets_router",
]
