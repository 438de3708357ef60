"""
Contact session persistence for returning visitors.
"""

import json
import time
from typing import Callable, Optional
from urllib.parse import quote, unquote

import httpx
import structlog

from src.domain.value_objects.contact_session import ContactSession
from src.domain.value_objects.identification_method import IdentificationMethod

logger = structlog.get_logger()


def _now_ms() -> int:
    return int(time.time() * 1000)


class ContactSessionStore:
    """Single contact session kept in a cookie jar.

    Writing overwrites the previous session. Reading an expired or unreadable
    session clears it.
    """

    def __init__(
        self,
        cookies: Optional[httpx.Cookies] = None,
        cookie_name: str = "ensol_contact_session",
        max_age_days: int = 30,
        clock: Callable[[], int] = _now_ms,
    ):
        self.cookies = cookies if cookies is not None else httpx.Cookies()
        self.cookie_name = cookie_name
        self.max_age_days = max_age_days
        self.clock = clock

    def save(self, method: IdentificationMethod, value: str) -> ContactSession:
        session = ContactSession.start(method, value, now_ms=self.clock())
        self.clear()
        self.cookies.set(self.cookie_name, quote(json.dumps(session.to_dict())))

        logger.debug("Contact session saved", method=session.method.value)
        return session

    def load(self) -> Optional[ContactSession]:
        raw = self.cookies.get(self.cookie_name)
        if not raw:
            return None

        try:
            session = ContactSession.from_dict(json.loads(unquote(raw)))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding unreadable contact session", error=str(e))
            self.clear()
            return None

        if session.is_expired(self.clock(), self.max_age_days):
            logger.info("Contact session expired")
            self.clear()
            return None

        return session

    def clear(self) -> None:
        # Delete across domains and paths the jar may hold it under
        for cookie in list(self.cookies.jar):
            if cookie.name == self.cookie_name:
                self.cookies.delete(cookie.name, domain=cookie.domain, path=cookie.path)
