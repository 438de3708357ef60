"""
HubSpot data transformer.
"""

import json
from typing import Any, Dict, List, Optional

from src.application.interfaces.crm import ContactDetails, EmailEngagementRequest
from src.application.services.html_sanitizer import sanitize_message_html
from src.domain.entities.attachment import PhotoAttachment
from src.domain.entities.contact import Contact
from src.domain.entities.deal import Deal
from src.domain.entities.message import INCOMING_EMAIL, Message
from src.domain.entities.ticket import Ticket
from src.domain.value_objects.ticket_status import TicketStatus
from src.infrastructure.providers.hubspot.models import HubSpotObject

# fr-FR number formatting groups thousands with a narrow no-break space
_THOUSANDS_SEPARATOR = "\u202f"


class HubSpotTransformer:
    """Transform data between HubSpot and domain formats."""

    def transform_contact(self, obj: HubSpotObject) -> Contact:
        first_name = obj.get("firstname", "")
        return Contact(
            contact_id=obj.id,
            full_name=Contact.compose_full_name(first_name, obj.get("lastname", "")),
            first_name=first_name or None,
            email=obj.get("email", ""),
            phone=obj.get("mobilephone", ""),
        )

    def transform_contact_details(self, obj: HubSpotObject) -> ContactDetails:
        defaults = ContactDetails()
        return ContactDetails(
            email=obj.get("email", defaults.email),
            first_name=obj.get("firstname", defaults.first_name),
            last_name=obj.get("lastname", defaults.last_name),
        )

    def transform_ticket(self, obj: HubSpotObject) -> Ticket:
        stage = obj.get("hs_pipeline_stage", "unknown")
        return Ticket(
            id=obj.id,
            ticket_id=obj.get("hs_ticket_id", obj.id),
            subject=obj.get("subject", "Sans titre"),
            status=stage,
            priority=obj.get("hs_ticket_priority", "medium"),
            created_date=obj.get("createdate"),
            last_modified=obj.get("hs_lastmodifieddate"),
            pipeline_stage=stage,
        )

    def transform_deal(self, obj: HubSpotObject) -> Deal:
        products = obj.get("products", "")
        return Deal(
            id=obj.id,
            deal_id=obj.id,
            name=obj.get("dealname", "Sans nom"),
            stage=obj.get("dealstage", "Unknown"),
            amount=self.format_amount(obj.get("amount")),
            address=obj.get("address", ""),
            postcode=obj.get("postcode", ""),
            installation_done_date=obj.get("date_entered__installation_done_"),
            products=products.split(";") if products else [],
            is_quote_signed=obj.get("is_quote_signed", "0"),
            is_closed_lost=obj.get("hs_is_closed_lost", "false"),
            close_date=obj.get("closedate"),
            created_date=obj.get("createdate"),
            pipeline=obj.get("pipeline", "default"),
            deal_type=obj.get("dealtype"),
        )

    def transform_message(self, obj: HubSpotObject) -> Message:
        text = obj.get("hs_email_text", "")
        subject = obj.get("hs_email_subject", "")
        attachment_ids = obj.get("hs_attachment_ids", "")
        return Message(
            id=obj.id,
            timestamp=obj.get("hs_timestamp"),
            text=text,
            direction=obj.get("hs_email_direction", "UNKNOWN"),
            subject=subject,
            attachment_ids=[i for i in attachment_ids.split(";") if i],
            html=sanitize_message_html(text or subject),
        )

    def transform_attachment(self, data: Dict[str, Any]) -> PhotoAttachment:
        # Legacy file manager payloads nest metadata under "properties"
        fields = data.get("properties") or data
        return PhotoAttachment(
            id=str(data["id"]),
            name=fields.get("name") or "Untitled",
            extension=fields.get("extension") or "",
            type=fields.get("type") or "",
            size=int(fields.get("size") or 0),
            url=fields.get("url") or "",
            created_at=fields.get("createdAt") or fields.get("created_at"),
        )

    def transform_upload_response(self, data: Dict[str, Any]) -> Optional[str]:
        """Extract the file id from an upload response."""
        objects = data.get("objects")
        if objects:
            return str(objects[0]["id"])
        if data.get("id"):
            return str(data["id"])
        return None

    def transform_ticket_properties(self, subject: str) -> Dict[str, Any]:
        return {
            "hs_pipeline_stage": TicketStatus.NEW.value,
            "subject": subject,
            "is_created_from_support_portal": "true",
        }

    def transform_email_engagement_properties(
        self,
        request: EmailEngagementRequest,
        recipient: ContactDetails,
        timestamp_ms: int,
    ) -> Dict[str, Any]:
        properties = {
            "hs_email_direction": INCOMING_EMAIL,
            "hs_timestamp": timestamp_ms,
            "hs_email_status": "SENT",
            "hs_email_subject": request.subject,
            "hs_email_html": request.html,
            "hs_email_headers": json.dumps(
                {
                    "from": self._email_party(request.sender),
                    "to": [self._email_party(recipient)],
                    "cc": [],
                    "bcc": [],
                }
            ),
        }
        if request.attachment_ids:
            properties["hs_attachment_ids"] = ";".join(request.attachment_ids)
        return properties

    def transform_note_properties(self, html: str, timestamp_ms: int) -> Dict[str, Any]:
        return {"hs_timestamp": timestamp_ms, "hs_note_body": html}

    @staticmethod
    def format_amount(raw: Optional[str]) -> str:
        """Format an amount the way fr-FR locales do, followed by the euro sign."""
        if raw is None or raw == "":
            return "N/A"
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return "N/A"

        digits = f"{abs(value):.3f}".rstrip("0").rstrip(".")
        integer_part, _, fraction = digits.partition(".")

        groups: List[str] = []
        while len(integer_part) > 3:
            groups.insert(0, integer_part[-3:])
            integer_part = integer_part[:-3]
        groups.insert(0, integer_part)

        formatted = _THOUSANDS_SEPARATOR.join(groups)
        if fraction:
            formatted = f"{formatted},{fraction}"
        if value < 0 and formatted != "0":
            formatted = f"-{formatted}"
        return f"{formatted} €"

    @staticmethod
    def _email_party(details: ContactDetails) -> Dict[str, str]:
        return {
            "email": details.email,
            "firstName": details.first_name,
            "lastName": details.last_name,
        }
