"""
Unit tests for value objects.
"""

import dataclasses

import pytest

from src.domain.value_objects.contact_session import MILLISECONDS_PER_DAY, ContactSession
from src.domain.value_objects.email_address import (
    COMMON_EMAIL_DOMAINS,
    complete_admin_email,
    suggest_email_addresses,
)
from src.domain.value_objects.identification_method import IdentificationMethod
from src.domain.value_objects.phone_number import (
    format_phone_number,
    is_valid_phone_number,
    to_international,
)
from src.domain.value_objects.ticket_status import TicketStatus


class TestPhoneNumber:
    """Test phone number helpers."""

    @pytest.mark.parametrize(
        "typed, expected",
        [
            ("0612345678", "06 12 34 56 78"),
            ("06-12-34-56-78", "06 12 34 56 78"),
            ("061", "06 1"),
            ("06123456789999", "06 12 34 56 78"),
            ("abc", ""),
        ],
    )
    def test_format_phone_number(self, typed, expected):
        """Test formatting keeps ten digits grouped in pairs."""
        assert format_phone_number(typed) == expected

    def test_is_valid_phone_number(self):
        """Test validation counts digits only."""
        assert is_valid_phone_number("06 12 34 56 78") is True
        assert is_valid_phone_number("0612345678") is True
        assert is_valid_phone_number("06 12 34 56") is False
        assert is_valid_phone_number("") is False

    def test_to_international_rewrites_trunk_prefix(self):
        """Test the national trunk prefix becomes the country code."""
        assert to_international("0612345678") == "+33612345678"
        assert to_international("06 12 34 56 78") == "+33612345678"

    def test_to_international_keeps_international_numbers(self):
        """Test numbers already in international form are only stripped."""
        assert to_international("+33 6 12 34 56 78") == "+33612345678"
        assert to_international("0033612345678") == "+33612345678"

    def test_to_international_custom_country_code(self):
        """Test another country code can be used."""
        assert to_international("0470123456", country_code="32") == "+32470123456"


class TestEmailAddress:
    """Test email helpers."""

    def test_no_suggestion_without_at_sign(self):
        assert suggest_email_addresses("marie") == []

    def test_all_domains_after_at_sign(self):
        suggestions = suggest_email_addresses("marie@")
        assert len(suggestions) == len(COMMON_EMAIL_DOMAINS)
        assert suggestions[0] == "marie@gmail.com"

    def test_suggestions_filtered_by_typed_domain(self):
        assert suggest_email_addresses("marie@ho") == ["marie@hotmail.fr"]
        assert suggest_email_addresses("marie@o") == [
            "marie@outlook.fr",
            "marie@orange.fr",
        ]

    def test_complete_admin_email(self):
        """Test agent addresses are pinned to the company domain."""
        assert complete_admin_email("jean") == "jean@goensol.com"
        assert complete_admin_email("jean@goensol.com") == "jean@goensol.com"
        assert complete_admin_email("jean@gmail.com") == ""


class TestIdentificationMethod:
    """Test IdentificationMethod value object."""

    def test_crm_property(self):
        assert IdentificationMethod.PHONE.crm_property == "mobilephone"
        assert IdentificationMethod.EMAIL.crm_property == "email"

    def test_display_name(self):
        assert IdentificationMethod.PHONE.display_name == "phone number"
        assert IdentificationMethod.EMAIL.display_name == "email address"


class TestTicketStatus:
    """Test TicketStatus value object."""

    def test_known_labels(self):
        assert TicketStatus.label_for("1") == "Nous allons bientôt traiter votre demande"
        assert TicketStatus.label_for("573359340") == "Intervention planifiée"
        assert TicketStatus.label_for("4") == "Résolu"

    def test_unknown_label(self):
        assert TicketStatus.label_for("999") == "Statut inconnu"
        assert TicketStatus.label_for("unknown") == "Statut inconnu"


class TestContactSession:
    """Test ContactSession value object."""

    def test_start_and_serialize(self):
        session = ContactSession.start(IdentificationMethod.EMAIL, "a@b.fr", now_ms=1000)

        assert session.to_dict() == {"method": "email", "value": "a@b.fr", "timestamp": 1000}
        assert ContactSession.from_dict(session.to_dict()) == session

    def test_expiry(self):
        now = 100 * MILLISECONDS_PER_DAY
        fresh = ContactSession(IdentificationMethod.PHONE, "0612345678", now - 29 * MILLISECONDS_PER_DAY)
        stale = ContactSession(IdentificationMethod.PHONE, "0612345678", now - 31 * MILLISECONDS_PER_DAY)

        assert fresh.is_expired(now) is False
        assert stale.is_expired(now) is True

    def test_value_required(self):
        with pytest.raises(ValueError):
            ContactSession(IdentificationMethod.EMAIL, "  ", 0)

    def test_immutability(self):
        session = ContactSession(IdentificationMethod.EMAIL, "a@b.fr", 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            session.value = "other@b.fr"
