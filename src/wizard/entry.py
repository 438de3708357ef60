"""
Portal entry parameters.

Links sent to customers may carry ``email=`` or ``phone=`` to pre-fill the
identification step, and agents open the portal with ``admin=true``.
"""

from dataclasses import dataclass
from typing import Optional, Union

import httpx

from src.domain.value_objects.identification_method import IdentificationMethod


@dataclass(frozen=True)
class EntryParams:
    """Identification and capabilities read from the portal URL."""

    method: Optional[IdentificationMethod] = None
    value: Optional[str] = None
    admin_mode: bool = False

    @property
    def has_identification(self) -> bool:
        return self.method is not None and bool(self.value)


def parse_entry_params(query: Union[str, httpx.QueryParams, httpx.URL]) -> EntryParams:
    """Read entry parameters, preferring email over phone."""
    if isinstance(query, httpx.URL):
        params = query.params
    elif isinstance(query, str):
        params = httpx.QueryParams(query.lstrip("?"))
    else:
        params = query

    admin_mode = params.get("admin") == "true"

    email = (params.get("email") or "").strip()
    if email:
        return EntryParams(IdentificationMethod.EMAIL, email, admin_mode)

    phone = (params.get("phone") or "").strip()
    if phone:
        return EntryParams(IdentificationMethod.PHONE, phone, admin_mode)

    return EntryParams(admin_mode=admin_mode)
