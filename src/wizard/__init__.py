"""
Ticket intake wizard package.

Portal-side state machine that walks a customer from identification to a
created ticket through the support gateway.
"""

from typing import Optional

import httpx

from src.config.settings import settings

from .entry import EntryParams, parse_entry_params
from .gateway_client import SupportGatewayClient, SupportGatewayInterface
from .machine import TicketWizard
from .session import ContactSessionStore
from .steps import StepView, WizardStep


def create_wizard(
    entry: Optional[EntryParams] = None,
    cookies: Optional[httpx.Cookies] = None,
    gateway: Optional[SupportGatewayInterface] = None,
) -> TicketWizard:
    """Create a wizard wired to the configured gateway."""
    entry = entry or EntryParams()
    return TicketWizard(
        gateway=gateway
        or SupportGatewayClient(
            settings.GATEWAY_BASE_URL, timeout=settings.GATEWAY_REQUEST_TIMEOUT
        ),
        session_store=ContactSessionStore(
            cookies,
            cookie_name=settings.CONTACT_SESSION_COOKIE_NAME,
            max_age_days=settings.CONTACT_SESSION_MAX_AGE_DAYS,
        ),
        admin_mode=entry.admin_mode,
        auto_submit_timeout=settings.AUTO_SUBMIT_TIMEOUT_SECONDS,
        max_files=settings.MAX_TICKET_ATTACHMENTS,
        admin_email_domain=settings.ADMIN_EMAIL_DOMAIN,
    )


__all__ = [
    "ContactSessionStore",
    "EntryParams",
    "StepView",
    "SupportGatewayClient",
    "SupportGatewayInterface",
    "TicketWizard",
    "WizardStep",
    "create_wizard",
    "parse_entry_params",
]
