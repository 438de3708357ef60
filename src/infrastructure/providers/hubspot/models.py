"""
HubSpot data models and DTOs.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ObjectType:
    """CRM object type path segments."""

    CONTACTS = "contacts"
    TICKETS = "tickets"
    DEALS = "deals"
    EMAILS = "emails"
    NOTES = "notes"


class AssociationType(IntEnum):
    """HubSpot-defined association type ids used by the portal."""

    TICKET_TO_CONTACT = 16
    TICKET_TO_DEAL = 28
    EMAIL_TO_CONTACT = 198
    EMAIL_TO_TICKET = 224
    NOTE_TO_TICKET = 228


CONTACT_PROPERTIES = ["firstname", "lastname", "email", "mobilephone"]

TICKET_PROPERTIES = [
    "hs_ticket_id",
    "subject",
    "hs_pipeline_stage",
    "hs_ticket_priority",
    "createdate",
    "hs_lastmodifieddate",
]

DEAL_PROPERTIES = [
    "dealname",
    "dealstage",
    "amount",
    "closedate",
    "createdate",
    "pipeline",
    "dealtype",
    "address",
    "postcode",
    "date_entered__installation_done_",
    "products",
    "is_quote_signed",
    "hs_is_closed_lost",
]

EMAIL_PROPERTIES = [
    "hs_timestamp",
    "hs_email_text",
    "hs_email_direction",
    "hs_email_subject",
    "hs_attachment_ids",
]


@dataclass
class HubSpotObject:
    """CRM object as returned by the objects API."""

    id: str
    properties: Dict[str, Optional[str]] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        """Property value, or the default when missing or empty."""
        value = self.properties.get(name)
        if value is None or value == "":
            return default
        return value

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "HubSpotObject":
        return cls(id=str(data["id"]), properties=data.get("properties") or {})


@dataclass
class HubSpotAssociation:
    """Association declared when creating an object."""

    to_id: str
    type_id: AssociationType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "to": {"id": self.to_id},
            "types": [
                {
                    "associationCategory": "HUBSPOT_DEFINED",
                    "associationTypeId": int(self.type_id),
                }
            ],
        }


@dataclass
class HubSpotSearchRequest:
    """Single-filter search on an object property."""

    property_name: str
    value: str
    properties: List[str]
    limit: int = 1
    operator: str = "EQ"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filterGroups": [
                {
                    "filters": [
                        {
                            "propertyName": self.property_name,
                            "operator": self.operator,
                            "value": self.value,
                        }
                    ]
                }
            ],
            "properties": self.properties,
            "limit": self.limit,
        }
