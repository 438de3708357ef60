"""
Unit tests for the logging configuration.
"""

from src.config.logging import REDACTED, redact_sensitive_fields


class TestRedactSensitiveFields:
    def test_masks_credentials(self):
        event = redact_sensitive_fields(
            None,
            "info",
            {
                "event": "HubSpot call",
                "Authorization": "Bearer pat-eu1-secret",
                "access_token": "pat-eu1-secret",
            },
        )

        assert event["Authorization"] == REDACTED
        assert event["access_token"] == REDACTED
        assert event["event"] == "HubSpot call"

    def test_keeps_other_fields_and_empty_values(self):
        event = redact_sensitive_fields(
            None, "info", {"event": "x", "contact_id": "101", "token": None}
        )

        assert event == {"event": "x", "contact_id": "101", "token": None}
